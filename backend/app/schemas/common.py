"""
Shared pydantic building blocks: camelCase wire format and pagination envelopes.
"""
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _decimal_to_float(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


# Amounts are stored as Numeric but emitted as JSON numbers
Money = Annotated[float, BeforeValidator(_decimal_to_float)]


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OffsetPagination(CamelModel):
    """Page-number pagination block."""
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class CursorPagination(CamelModel):
    """Forward-only cursor pagination block."""
    limit: int
    total: int
    has_next: bool
    next_cursor: Optional[str] = None


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: str
    code: str
