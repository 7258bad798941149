"""Shared pydantic base model."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, populated by either form."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
