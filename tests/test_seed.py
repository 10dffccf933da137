"""Demo seed script tests."""

from scripts.seed_demo_data import DEMO_CATALOG, seed
from src.models import Category, Product


def test_seed_populates_catalog(client, db):
    """Test that seeding creates every demo category and product."""
    counts = seed(db)

    assert counts == {"categories": 3, "products": 8}
    assert db.query(Category).count() == len(DEMO_CATALOG)
    assert db.query(Product).count() == 8

    response = client.get("/api/v1/products")
    names = {p["name"] for p in response.json()["data"]}
    assert "Hammer" in names


def test_seed_replaces_existing_data(client, db, product):
    """Test that re-seeding clears what was there before."""
    seed(db)
    seed(db)

    assert db.query(Category).count() == 3
    assert db.query(Category).filter(Category.name == "Tools").count() == 1
