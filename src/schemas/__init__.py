"""Pydantic schemas for API requests and responses."""

from src.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from src.schemas.common import DataResponse, MessageDataResponse, MessageResponse
from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    "DataResponse",
    "MessageResponse",
    "MessageDataResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
