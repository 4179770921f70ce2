# catalog/domain/errors.py
"""
Error kinds raised by the catalog and the HTTP status each one maps to.

    CatalogError
    ├── ValidationError      → 400 (missing name, bad price, bad upload)
    ├── ConflictError        → 409 (duplicate product name)
    └── InfrastructureError  → 500 (Mongo, Cloudinary, malformed id)

Not-found is never reported: delete answers the same whether or not
anything matched.
"""
from typing import Dict, Type


class CatalogError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CatalogError):
    pass


class ConflictError(CatalogError):
    pass


class InfrastructureError(CatalogError):
    """Wraps a driver/SDK failure; the underlying message is kept for the response."""

    @classmethod
    def wrap(cls, exc: Exception) -> "InfrastructureError":
        return cls(str(exc) or exc.__class__.__name__)


ERROR_STATUS: Dict[Type[CatalogError], int] = {
    ValidationError: 400,
    ConflictError: 409,
    InfrastructureError: 500,
}


def status_for(exc: CatalogError) -> int:
    for kind, status in ERROR_STATUS.items():
        if isinstance(exc, kind):
            return status
    return 500
