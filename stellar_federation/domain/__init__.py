"""Domain models - pure federation entities."""

from .federation import FederationRecord, StellarAddress

__all__ = [
    "FederationRecord",
    "StellarAddress",
]
