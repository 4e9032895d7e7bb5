"""Creates the data directory and seeds a small demo catalog."""
import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.database import db  # noqa: E402
from app.db.repositories import ProductRepository  # noqa: E402
from app.models.product import Product  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger("seed")

PRODUCTS = [
    Product(name="Ball", category="Sports", cost=20, rating=5),
    Product(name="Running Shoes", category="Fashion", cost=75, rating=4),
    Product(name="Table Lamp", category="Home & Kitchen", cost=45, rating=4),
    Product(name="Wireless Mouse", category="Electronics", cost=25, rating=3),
]


def main():
    repo = ProductRepository(db)
    existing = {p.name for p in repo.list_all()}
    for product in PRODUCTS:
        if product.name in existing:
            logger.info("%s already in catalog", product.name)
            continue
        saved = repo.create(product)
        logger.info("Added %s (%s)", saved.name, saved.id)


if __name__ == "__main__":
    main()
