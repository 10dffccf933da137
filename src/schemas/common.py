"""Response envelopes and field checks shared by the catalog schemas."""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic_core import PydanticCustomError

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Envelope for read endpoints."""

    data: T


class MessageResponse(BaseModel):
    """Envelope for endpoints that only report an outcome."""

    message: str


class MessageDataResponse(MessageResponse, Generic[T]):
    """Envelope for write endpoints returning the written record."""

    data: T


def require_name(value: Any) -> str:
    """Reject missing or empty names, then anything that is not a string."""
    if not value:
        raise PydanticCustomError("name_required", "Name is required")
    if not isinstance(value, str):
        raise PydanticCustomError("name_type", "Name must be a string")
    return value


def check_price(value: Any) -> float:
    """Accept finite, non-negative JSON numbers only (booleans excluded)."""
    if (
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or (isinstance(value, float) and not math.isfinite(value))
        or value < 0
    ):
        raise PydanticCustomError("price_invalid", "Price must be a non-negative number")
    return value


def check_category_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PydanticCustomError("category_id_type", "Category id must be an integer")
    return value
