"""Category API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from src.api.dependencies import get_category_service, parse_id, validate_body
from src.models.category import Category
from src.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from src.schemas.common import DataResponse, MessageDataResponse, MessageResponse
from src.services.category_service import CategoryService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def get_existing_category(service: CategoryService, category_id: int) -> Category:
    category = service.get(category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


def ensure_name_available(service: CategoryService, name: str) -> None:
    if service.get_by_name(name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=f"{name} category already exists"
        )


def name_conflict(service: CategoryService, name: str) -> HTTPException:
    """A concurrent writer claimed the name between the check and the write."""
    service.db.rollback()
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT, detail=f"{name} category already exists"
    )


@router.get("", response_model=DataResponse[list[CategoryResponse]])
def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get all categories ordered by id."""
    return {"data": service.list_categories()}


@router.post(
    "",
    response_model=MessageDataResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    service: Annotated[CategoryService, Depends(get_category_service)],
    payload: Annotated[Any, Body()] = None,
):
    """Create a category with a unique name of at most 60 characters."""
    category_data = validate_body(CategoryCreate, payload)
    ensure_name_available(service, category_data.name)

    try:
        category = service.create(category_data.name)
    except IntegrityError:
        raise name_conflict(service, category_data.name) from None
    return {"message": "Category created successfully", "data": category}


@router.put("/{category_id}", response_model=MessageDataResponse[CategoryResponse])
def update_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
    payload: Annotated[Any, Body()] = None,
):
    """Rename a category.

    The new name must not be used by any category, including this one.
    """
    category = get_existing_category(service, parse_id(category_id))
    category_data = validate_body(CategoryUpdate, payload)
    ensure_name_available(service, category_data.name)

    try:
        category = service.rename(category, category_data.name)
    except IntegrityError:
        raise name_conflict(service, category_data.name) from None
    return {"message": "Category updated successfully", "data": category}


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Delete a category that no product references."""
    category = get_existing_category(service, parse_id(category_id))

    product_count = service.count_products(category.id)
    if product_count:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category is being used in {product_count} product(s)",
        )

    service.delete(category)
    return {"message": "Category deleted successfully"}
