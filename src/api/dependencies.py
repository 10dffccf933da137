"""FastAPI dependencies and request helpers shared by the catalog routers."""

import re
from typing import Annotated, Any, TypeVar

from fastapi import Depends, HTTPException, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.category_service import CategoryService
from src.services.product_service import ProductService

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Leading integer, the rest of the segment is ignored ("12abc" -> 12)
_LEADING_INT = re.compile(r"\s*([+-]?)0*(\d+)")

# Signed 32-bit INTEGER primary keys
MAX_ID = 2**31 - 1


def parse_id(raw: str) -> int:
    """Parse a path id, raising 400 when it has no leading integer or cannot be a key."""
    match = _LEADING_INT.match(raw)
    if match and len(match.group(2)) <= len(str(MAX_ID)):
        value = int(match.group(1) + match.group(2))
        if abs(value) <= MAX_ID:
            return value
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Id")


def validate_body(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate a JSON body against a schema.

    The body must be a JSON object; an absent body counts as empty.
    Only the first failing field is reported, in the schema's field order.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Invalid request body"
        )
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors()[0]["msg"],
        ) from None


def get_category_service(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryService:
    """Get category service bound to the request session."""
    return CategoryService(db)


def get_product_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProductService:
    """Get product service bound to the request session."""
    return ProductService(db)
