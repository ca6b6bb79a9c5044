"""
Core components for the AI Band Registry service.

Submodules are imported directly (``core.intake``, ``core.review``) because the
storage layer depends on ``core.exceptions``.
"""

from .exceptions import NotFoundError, RegistryError, StorageError, UnauthorizedError, ValidationError

__all__ = [
    "NotFoundError",
    "RegistryError",
    "StorageError",
    "UnauthorizedError",
    "ValidationError",
]
