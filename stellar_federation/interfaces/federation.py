# stellar_federation/interfaces/federation.py
"""Interfaces of the collaborators used by the federation resolver."""

from typing import Any, Protocol

from stellar_sdk import Keypair, Memo

from stellar_federation.web_tools import WebResponse


class IHttpFetcher(Protocol):
    """Interface for HTTP GET."""

    async def fetch(self, url: str) -> WebResponse:
        """
        GET url and return status and raw body.

        Raises TransportError on connection, TLS or timeout failures.
        """
        ...


class IStellarTomlResolver(Protocol):
    """Interface for stellar.toml (SEP-1) lookups."""

    async def fetch(self, domain: str) -> dict[str, Any]:
        """Fetch and parse stellar.toml of domain."""
        ...


class IPublicKeyParser(Protocol):
    """Interface for account id parsing."""

    def parse(self, account_id: str) -> Keypair:
        """Parse G... account id, raise ValueError if it is invalid."""
        ...


class IMemoFactory(Protocol):
    """Interface for memo construction, each method raises ValueError on invalid input."""

    def text(self, value: str) -> Memo:
        ...

    def id(self, value: int) -> Memo:
        ...

    def hash(self, value: bytes) -> Memo:
        ...
