# app/services/catalog.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from app.core.config import Settings
from app.core.errors import NotFoundError, ValidationError
from app.models.product import Product
from app.repositories.product_repository import InMemoryProductRepository, ProductRepository
from app.services.id_policy import IdPolicy, get_id_policy
from app.services.seed import SEED_PRODUCTS

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "brand", "price", "image")
WRITABLE_FIELDS = ("title", "description", "category", "price", "rating", "brand", "image")


class CatalogService:
    """List / create / delete over a product repository."""

    def __init__(self, repository: ProductRepository, id_policy: IdPolicy) -> None:
        self._repository = repository
        self._id_policy = id_policy

    def list_products(self) -> List[Product]:
        return self._repository.list_all()

    def create_product(self, candidate: Mapping[str, Any]) -> Product:
        """
        Store a new product.
        Any required field that is missing or falsy (empty string, 0 price)
        rejects the whole request and leaves the catalog untouched.
        """
        missing = [f for f in REQUIRED_FIELDS if not candidate.get(f)]
        if missing:
            logger.warning("Rejected product create, missing: %s", ", ".join(missing))
            raise ValidationError("All fields are required")

        fields: Dict[str, Any] = {f: candidate.get(f) for f in WRITABLE_FIELDS}
        product = self._repository.add(fields)
        logger.info("Created product %s (%s)", product.id, product.title)
        return product

    def delete_product(self, raw_id: str) -> Product:
        product_id = self._id_policy.parse(raw_id)
        removed = self._repository.remove(product_id) if product_id is not None else None
        if removed is None:
            logger.warning("Delete of unknown product id %r", raw_id)
            raise NotFoundError("Product not found")

        logger.info("Deleted product %s", removed.id)
        return removed


def build_catalog(settings: Settings) -> CatalogService:
    """Wire policy + repository from settings."""
    id_policy = get_id_policy(settings.id_policy)
    seed = SEED_PRODUCTS if settings.seed_catalog else None
    repository = InMemoryProductRepository(id_policy, seed=seed)
    logger.info(
        "Catalog ready: %d products, id policy '%s'", repository.count(), id_policy.name
    )
    return CatalogService(repository, id_policy)
