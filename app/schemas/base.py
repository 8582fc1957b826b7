from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Largest value an INTEGER column accepts
MAX_INT = 2_147_483_647


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


class CamelRequest(CamelModel):
    """Base request schema: unknown fields are rejected."""

    class Config:
        extra = "forbid"
