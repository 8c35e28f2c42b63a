# app/schemas/product.py

from typing import Optional, Union

from pydantic import BaseModel, StrictFloat, StrictInt

from app.models.product import Product


class ProductCreate(BaseModel):
    """
    Writable product fields as sent by the client.
    Everything is optional here: presence of the required ones is checked
    by the catalog service so a missing field yields the catalog's own 400.
    Numbers are strict: JSON booleans and numeric strings are type errors.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Union[StrictInt, StrictFloat]] = None
    rating: Optional[Union[StrictInt, StrictFloat]] = None
    brand: Optional[str] = None
    image: Optional[str] = None


class DeleteProductResponse(BaseModel):
    message: str
    product: Product


class ErrorResponse(BaseModel):
    error: str
