"""Category data access."""

import logging

from sqlalchemy.orm import Session

from src.models.category import Category
from src.models.product import Product

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category persistence."""

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def get(self, category_id: int) -> Category | None:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def get_by_name(self, name: str) -> Category | None:
        """Exact, case-sensitive name lookup."""
        return self.db.query(Category).filter(Category.name == name).first()

    def count_products(self, category_id: int) -> int:
        """Number of products still referencing the category."""
        return self.db.query(Product).filter(Product.category_id == category_id).count()

    def create(self, name: str) -> Category:
        category = Category(name=name)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"Created category {category.id} ({category.name!r})")
        return category

    def rename(self, category: Category, name: str) -> Category:
        category.name = name
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"Renamed category {category.id} to {name!r}")
        return category

    def delete(self, category: Category) -> None:
        category_id = category.id
        self.db.delete(category)
        self.db.commit()
        logger.info(f"Deleted category {category_id}")
