# app/api/products_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.core.deps import get_catalog
from app.models.product import Product
from app.schemas.product import DeleteProductResponse, ErrorResponse, ProductCreate
from app.services.catalog import CatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[Product], response_model_exclude_none=True)
def list_products(catalog: CatalogService = Depends(get_catalog)):
    return catalog.list_products()


@router.post(
    "",
    response_model=Product,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def create_product(
    payload: Optional[ProductCreate] = None,
    catalog: CatalogService = Depends(get_catalog),
):
    # no body at all counts as every field missing
    fields = payload.model_dump() if payload is not None else {}
    return catalog.create_product(fields)


@router.delete(
    "/{product_id}",
    response_model=DeleteProductResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def delete_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
):
    product = catalog.delete_product(product_id)
    return DeleteProductResponse(message="Product deleted successfully", product=product)
