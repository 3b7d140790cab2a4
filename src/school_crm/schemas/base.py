"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# upper bound for medal balances, prices and spends; keeps values inside a 32-bit column
MAX_AMOUNT = 2_147_483_647


class CamelModel(BaseModel):
    """Base for every payload: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete and logout endpoints."""

    message: str
