from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class BaseBackend(ABC):
    """Abstract line source and text sink."""

    name: str = ""

    @abstractmethod
    def lines(self, name: Any) -> Iterator[str]:
        """Yield the raw lines of *name* without line terminators."""

    @abstractmethod
    def write(self, name: Any, contents: str) -> str | None:
        """Store *contents* under *name*."""
