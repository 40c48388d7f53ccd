"""
Pydantic schemas for products.

Products live in the in-memory catalogue.  Prices are ``Decimal`` so
amounts such as ``19.99`` are kept exactly; they serialize to JSON as
strings.  Names and prices are stored as given: empty names and
negative prices are accepted.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(..., examples=["Tablet"])
    price: Decimal = Field(..., examples=["199.99"])


class Product(ProductCreate):
    id: int
