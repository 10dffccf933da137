"""Product data access.

Every query eagerly loads the owning category for the nested projection.
"""

import logging
from typing import Any

from sqlalchemy.orm import Query, Session, joinedload

from src.models.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product persistence."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(Product).options(joinedload(Product.category))

    def list_products(self) -> list[Product]:
        return self._query().order_by(Product.id).all()

    def list_by_category(self, category_id: int) -> list[Product]:
        return self._query().filter(Product.category_id == category_id).order_by(Product.name).all()

    def get(self, product_id: int) -> Product | None:
        return self._query().filter(Product.id == product_id).first()

    def create(self, name: str, price: float, category_id: int) -> Product:
        product = Product(name=name, price=price, category_id=category_id)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        logger.info(f"Created product {product.id} in category {category_id}")
        return product

    def update(self, product: Product, changes: dict[str, Any]) -> Product:
        """Apply only the provided fields."""
        for field, value in changes.items():
            setattr(product, field, value)
        self.db.commit()
        # Reload so the nested category reflects a changed category_id
        self.db.refresh(product)
        logger.info(f"Updated product {product.id}: {sorted(changes)}")
        return product

    def delete(self, product: Product) -> None:
        product_id = product.id
        self.db.delete(product)
        self.db.commit()
        logger.info(f"Deleted product {product_id}")
