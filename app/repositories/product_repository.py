# app/repositories/product_repository.py

# In-memory only: the collection lives for the process lifetime.

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from app.models.product import Product
from app.services.id_policy import IdPolicy, ProductId


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def add(self, fields: Mapping[str, Any]) -> Product:
        """Assign a new id to `fields`, append the record and return it."""

    @abstractmethod
    def remove(self, product_id: ProductId) -> Optional[Product]:
        """Remove the first product with this id and return it, or None."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""


class InMemoryProductRepository(ProductRepository):
    """
    Ordered list guarded by a lock.

    FastAPI runs sync handlers on a thread pool, so id assignment + append
    and scan + splice must happen under the same lock to keep ids unique
    and to remove a record at most once.
    """

    def __init__(
        self,
        id_policy: IdPolicy,
        seed: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> None:
        self._id_policy = id_policy
        self._products: list[Product] = []
        self._lock = threading.Lock()

        for raw in seed or []:
            record = dict(raw)
            record["id"] = id_policy.normalize(record["id"])
            self._products.append(Product(**record))
        id_policy.reserve(p.id for p in self._products)

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def add(self, fields: Mapping[str, Any]) -> Product:
        with self._lock:
            product = Product(id=self._id_policy.next_id(), **fields)
            self._products.append(product)
            return product

    def remove(self, product_id: ProductId) -> Optional[Product]:
        with self._lock:
            for index, product in enumerate(self._products):
                if product.id == product_id:
                    return self._products.pop(index)
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._products)
