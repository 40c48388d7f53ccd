"""
Product endpoints for the in-memory catalogue.

Listing and lookup mirror the player endpoints; ``POST`` adds a
product and answers ``201 Created`` with the assigned id and a
``Location`` header pointing at the new resource.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from record_api.app.schemas.product import Product, ProductCreate
from record_api.app.services.product_service import ProductService
from record_api.app.api.deps import get_product_service

router = APIRouter()


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)) -> List[Product]:
    """Return the whole catalogue in insertion order."""
    return await service.get_all()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Return a single product or 404 if the id is unknown."""
    product = await service.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Add a product; the catalogue assigns its id."""
    product = await service.add(product_in)
    response.headers["Location"] = f"/api/products/{product.id}"
    return product
