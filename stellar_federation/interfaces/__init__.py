# stellar_federation/interfaces/__init__.py
"""Collaborator interface definitions using Protocol."""

from .federation import (
    IHttpFetcher,
    IStellarTomlResolver,
    IPublicKeyParser,
    IMemoFactory,
)

__all__ = [
    "IHttpFetcher",
    "IStellarTomlResolver",
    "IPublicKeyParser",
    "IMemoFactory",
]
