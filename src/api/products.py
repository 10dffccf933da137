"""Product API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import (
    get_category_service,
    get_product_service,
    parse_id,
    validate_body,
)
from src.models.product import Product
from src.schemas.common import DataResponse, MessageDataResponse, MessageResponse
from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from src.services.category_service import CategoryService
from src.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_existing_product(service: ProductService, product_id: int) -> Product:
    product = service.get(product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.get("", response_model=DataResponse[list[ProductResponse]])
def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get all products ordered by id, each with its category."""
    return {"data": service.list_products()}


@router.get("/category/{category_id}", response_model=DataResponse[list[ProductResponse]])
def list_products_by_category(
    category_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get the products of one category ordered by name."""
    parsed_id = parse_id(category_id)
    if not categories.get(parsed_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category id not found")

    return {"data": service.list_by_category(parsed_id)}


@router.get("/{product_id}", response_model=DataResponse[ProductResponse])
def get_product(
    product_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get a single product."""
    return {"data": get_existing_product(service, parse_id(product_id))}


@router.post(
    "",
    response_model=MessageDataResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    service: Annotated[ProductService, Depends(get_product_service)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
    payload: Annotated[Any, Body()] = None,
):
    """Create a product in an existing category."""
    product_data = validate_body(ProductCreate, payload)
    if not categories.get(product_data.category_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category id not found")

    product = service.create(
        name=product_data.name,
        price=product_data.price,
        category_id=product_data.category_id,
    )
    return {"message": "Product created successfully", "data": product}


@router.put("/{product_id}", response_model=MessageDataResponse[ProductResponse])
def update_product(
    product_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
    payload: Annotated[Any, Body()] = None,
):
    """Update any of name, price and categoryId.

    An unknown categoryId is a validation failure (422) here, unlike create
    where it is reported as 404.
    """
    product = get_existing_product(service, parse_id(product_id))
    product_data = validate_body(ProductUpdate, payload)

    changes = product_data.model_dump(exclude_unset=True)
    if "category_id" in changes and not categories.get(changes["category_id"]):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Category id not found"
        )

    product = service.update(product, changes)
    return {"message": "Product updated successfully", "data": product}


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Delete a product."""
    product = get_existing_product(service, parse_id(product_id))
    service.delete(product)
    return {"message": "Product deleted successfully"}
