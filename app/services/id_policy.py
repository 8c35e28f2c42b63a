# app/services/id_policy.py

from __future__ import annotations

import itertools
import re
import secrets
import time
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union

from app.core.errors import ConfigurationError

ProductId = Union[int, str]

INTEGER_RX = re.compile(r"[+-]?[0-9]+")


class IdPolicy(ABC):
    """Assigns ids to new products and turns path values into lookup keys."""

    name: str

    @abstractmethod
    def next_id(self) -> ProductId:
        """Return a fresh id. Callers must hold the repository lock."""

    @abstractmethod
    def parse(self, raw: str) -> Optional[ProductId]:
        """Convert a path parameter into the id type, or None if it can never match."""

    def normalize(self, value: ProductId) -> ProductId:
        """Coerce an existing (seeded) id into this policy's id type."""
        return value

    def reserve(self, existing: Iterable[ProductId]) -> None:
        """Make sure ids already in the catalog are never handed out again."""


class SequentialIdPolicy(IdPolicy):
    """
    Monotonic integer counter.
    Deletions never move it backwards, so an id is never reused.
    """

    name = "sequential"

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._floor = start

    def next_id(self) -> int:
        return next(self._counter)

    def parse(self, raw: str) -> Optional[int]:
        # ASCII digits only; int() would also take "\u0663" or "1_0"
        if raw is None or not INTEGER_RX.fullmatch(raw):
            return None
        return int(raw)

    def normalize(self, value: ProductId) -> int:
        return int(value)

    def reserve(self, existing: Iterable[ProductId]) -> None:
        highest = max((int(v) for v in existing), default=0)
        if highest >= self._floor:
            self._floor = highest + 1
            self._counter = itertools.count(self._floor)


class TokenIdPolicy(IdPolicy):
    """
    Opaque string: millisecond timestamp plus a random suffix.
    Ids are compared as strings, never parsed.
    """

    name = "token"

    def __init__(self, random_bytes: int = 4) -> None:
        self._random_bytes = random_bytes

    def next_id(self) -> str:
        return f"{int(time.time() * 1000)}-{secrets.token_hex(self._random_bytes)}"

    def parse(self, raw: str) -> Optional[str]:
        return raw if raw else None

    def normalize(self, value: ProductId) -> str:
        return str(value)


POLICIES = {
    SequentialIdPolicy.name: SequentialIdPolicy,
    TokenIdPolicy.name: TokenIdPolicy,
}


def get_id_policy(name: str) -> IdPolicy:
    try:
        return POLICIES[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown id policy '{name}'. Expected one of: {', '.join(sorted(POLICIES))}"
        ) from None
