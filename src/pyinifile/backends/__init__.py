"""Backend registry and factory."""
from __future__ import annotations

from ..errors import UnknownBackendError
from .base import BaseBackend

_REGISTRY: dict[str, type[BaseBackend]] = {}

DEFAULT_BACKEND = "file"


def register_backend(backend: type[BaseBackend]) -> type[BaseBackend]:
    """Register a backend class and return it for decorator use."""
    if not backend.name:
        raise ValueError(f"{backend.__name__} has no backend name")
    _REGISTRY[backend.name] = backend
    return backend


def get_backend(name: str | BaseBackend = DEFAULT_BACKEND) -> BaseBackend:
    if isinstance(name, BaseBackend):
        return name
    backend_cls = _REGISTRY.get(name)
    if backend_cls is None:
        raise UnknownBackendError(f"No backend named {name!r}")
    return backend_cls()


def available_backends() -> list[str]:
    return sorted(_REGISTRY)


# register default backends
from . import file_backend, memory_backend  # noqa: F401,E402
