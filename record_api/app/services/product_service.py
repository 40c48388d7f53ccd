"""Business logic for the product catalogue."""

import logging
from typing import List, Optional

from record_api.app.repositories.product_repository import ProductRepository
from record_api.app.schemas.product import Product, ProductCreate

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    async def get_all(self) -> List[Product]:
        return self.repository.find_all()

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.repository.find_by_id(product_id)

    async def add(self, data: ProductCreate) -> Product:
        """Add a product; the catalogue assigns its id."""
        logger.info("Adding product %s", data.name)
        return self.repository.insert(data)
