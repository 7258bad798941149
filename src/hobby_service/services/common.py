"""Helpers shared by the services."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ConstraintViolationError, ValidationError

logger = logging.getLogger("hobby_store")


def check_page(page: int, page_size: int) -> None:
    if page < 1:
        raise ValidationError("page must be 1 or greater")
    if page_size < 1:
        raise ValidationError("pageSize must be 1 or greater")


def constraint_error(action: str, exc: IntegrityError) -> ConstraintViolationError:
    reason = str(exc.orig) if exc.orig is not None else str(exc)
    logger.warning(f"Store rejected {action}: {reason}")
    return ConstraintViolationError(
        f"Failed to {action} due to database constraints", reason
    )


async def commit(session: AsyncSession, action: str) -> None:
    """Commit the request transaction, reporting constraint failures."""
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        raise constraint_error(action, e) from e
