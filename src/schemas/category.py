"""Category schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from src.models.category import CATEGORY_NAME_MAX_LENGTH
from src.schemas.common import require_name


class CategoryCreate(BaseModel):
    """Create a new category."""

    name: str | None = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        name = require_name(value)
        if len(name) > CATEGORY_NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long",
                f"Category name must be {CATEGORY_NAME_MAX_LENGTH} characters or less.",
            )
        return name


class CategoryUpdate(BaseModel):
    """Rename a category.

    Only presence is checked here; the length limit applies on create.
    """

    name: str | None = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return require_name(value)


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
