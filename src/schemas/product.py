"""Product schemas.

Clients send the category reference as ``categoryId``; responses never carry
it and nest the category instead.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from src.schemas.category import CategoryResponse
from src.schemas.common import check_category_id, check_price, require_name


class ProductCreate(BaseModel):
    """Create a new product. Fields are checked in declaration order."""

    name: str | None = Field(default=None, validate_default=True)
    price: float | None = Field(default=None, validate_default=True)
    category_id: int | None = Field(default=None, alias="categoryId", validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return require_name(value)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> float:
        if value is None:
            raise PydanticCustomError("price_required", "Price is required")
        return check_price(value)

    @field_validator("category_id", mode="before")
    @classmethod
    def validate_category_id(cls, value: Any) -> int:
        if value is None or value == 0 or value == "":
            raise PydanticCustomError("category_id_required", "Category id is required")
        return check_category_id(value)


class ProductUpdate(BaseModel):
    """Partially update a product. Omitted fields are left unchanged."""

    name: str | None = None
    price: float | None = None
    category_id: int | None = Field(default=None, alias="categoryId")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("name_type", "Name must be a string")
        if not value.strip():
            raise PydanticCustomError("name_empty", "Name cannot be empty")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> float:
        return check_price(value)

    @field_validator("category_id", mode="before")
    @classmethod
    def validate_category_id(cls, value: Any) -> int:
        return check_category_id(value)


class ProductResponse(BaseModel):
    """Product projection with its category nested."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    category: CategoryResponse
