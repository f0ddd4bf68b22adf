from __future__ import annotations
from typing import Sequence

class CatalogError(Exception):
    """Base class for every failure a catalog action can end in."""

class ValidationError(CatalogError):
    """Required form fields are missing; raised before any remote call."""

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"missing required field(s): {', '.join(self.missing)}")

class PersistenceError(CatalogError):
    """The document store rejected or never answered a call."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")
