# app/models/product.py

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """A stored catalog record. Never mutated after it is added."""

    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    title: str
    description: str
    brand: str
    category: Optional[str] = None
    rating: Optional[float] = None
    price: float
    image: str
