"""
Product repository: an in-memory catalogue with store-generated ids.

New products receive ``max(id) + 1`` (or ``1`` for an empty catalogue);
any id supplied by the caller is ignored.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, List, Optional

from ..schemas.product import Product, ProductCreate

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS = (
    Product(id=1, name="Laptop", price=Decimal("1200.00")),
    Product(id=2, name="Phone", price=Decimal("800.00")),
)


class ProductRepository(ABC):
    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]: ...

    @abstractmethod
    def find_all(self) -> List[Product]: ...

    @abstractmethod
    def insert(self, data: ProductCreate) -> Product: ...


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: List[Product] = list(DEFAULT_PRODUCTS if products is None else products)
        self._lock = threading.Lock()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def find_all(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def insert(self, data: ProductCreate) -> Product:
        with self._lock:
            next_id = max((p.id for p in self._products), default=0) + 1
            product = Product(id=next_id, name=data.name, price=data.price)
            self._products.append(product)
        logger.info("Added product %s", product.id)
        return product
