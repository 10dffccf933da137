"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base

CATEGORY_NAME_MAX_LENGTH = 60


class Category(Base):
    """Category grouping products in the catalog."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(CATEGORY_NAME_MAX_LENGTH), nullable=False, unique=True)

    # Relationships
    products = relationship("Product", back_populates="category")
