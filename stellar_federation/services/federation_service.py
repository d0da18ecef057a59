"""
Federation resolver: SEP-0002 lookups of addresses, account ids,
transaction ids and forward requests.
"""

from typing import Any, Optional, Union
from urllib.parse import urlsplit

from loguru import logger
from stellar_sdk import Keypair

from stellar_federation.domain import FederationRecord
from stellar_federation.errors import (
    ClientError,
    DiscoveryError,
    InvalidUrl,
    MissingFederationServer,
    ServerError,
)
from stellar_federation.interfaces import IHttpFetcher, IMemoFactory, IPublicKeyParser, IStellarTomlResolver
from stellar_federation.stellar.address_utils import parse_stellar_address
from stellar_federation.stellar.query_urls import (
    ForwardParameters,
    stellar_account_id_request_url,
    stellar_address_request_url,
    stellar_forward_request_url,
    stellar_transaction_id_request_url,
)
from stellar_federation.stellar.response_decoder import decode_federation_response
from stellar_federation.stellar.sdk_utils import StellarKeyParser, StellarMemoFactory
from stellar_federation.stellar.toml_resolver import StellarTomlResolver
from stellar_federation.web_tools import HTTPSessionManager, WebResponse, http_session_manager

FEDERATION_SERVER_KEY = "FEDERATION_SERVER"


def validate_server_url(url: Any) -> str:
    """Return url if it is an absolute URL with scheme and host, raise InvalidUrl otherwise."""
    if not isinstance(url, str):
        raise InvalidUrl(url)
    try:
        parts = urlsplit(url)
        # ValueError for a non-numeric or out of range port
        parts.port
    except ValueError as e:
        raise InvalidUrl(url) from e
    if not parts.scheme or not parts.hostname or any(c.isspace() for c in parts.netloc):
        raise InvalidUrl(url)
    return url


async def discover_federation_server(domain: str, toml_resolver: IStellarTomlResolver) -> str:
    """
    Find the federation server of domain from its stellar.toml.

    Args:
        domain: Domain part of a federation address
        toml_resolver: stellar.toml fetcher

    Returns:
        FEDERATION_SERVER url

    Raises:
        DiscoveryError: stellar.toml could not be fetched or parsed
        MissingFederationServer: stellar.toml has no FEDERATION_SERVER
        InvalidUrl: FEDERATION_SERVER is not an absolute URL
    """
    try:
        toml = await toml_resolver.fetch(domain)
    except Exception as e:
        raise DiscoveryError(domain, e) from e

    server = toml.get(FEDERATION_SERVER_KEY) if isinstance(toml, dict) else None
    if server is None or server == "":
        raise MissingFederationServer(domain)

    server = validate_server_url(server)
    logger.info(f"Federation server of {domain}: {server}")
    return server


class FederationResolver:
    """
    Resolve federation requests.

    Collaborators not given are replaced by the stellar_sdk / aiohttp
    backed defaults. An HTTPSessionManager created here is closed by close().
    """

    def __init__(
            self,
            http: Optional[IHttpFetcher] = None,
            toml_resolver: Optional[IStellarTomlResolver] = None,
            key_parser: Optional[IPublicKeyParser] = None,
            memo_factory: Optional[IMemoFactory] = None,
    ):
        self._owns_http = http is None
        self.http: IHttpFetcher = http if http is not None else HTTPSessionManager()
        self.toml_resolver = toml_resolver or StellarTomlResolver()
        self.key_parser = key_parser or StellarKeyParser()
        self.memo_factory = memo_factory or StellarMemoFactory()

    async def __aenter__(self) -> "FederationResolver":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http and isinstance(self.http, HTTPSessionManager):
            await self.http.close()

    # === Public API ===

    async def resolve_address(self, address: str) -> FederationRecord:
        """Resolve name*domain, discovering the federation server from stellar.toml of domain."""
        stellar_address = parse_stellar_address(address)
        server = await discover_federation_server(stellar_address.domain, self.toml_resolver)
        return await self._resolve_url(stellar_address_request_url(address, server))

    async def resolve_address_at_server(self, address: str, server: str) -> FederationRecord:
        """Resolve address using the given federation server."""
        server = validate_server_url(server)
        return await self._resolve_url(stellar_address_request_url(address, server))

    async def resolve_account_id(self, account_id: Union[Keypair, str], server: str) -> FederationRecord:
        """Reverse lookup of account_id."""
        server = validate_server_url(server)
        return await self._resolve_url(stellar_account_id_request_url(account_id, server))

    async def resolve_transaction_id(self, tx_id: str, server: str) -> FederationRecord:
        server = validate_server_url(server)
        return await self._resolve_url(stellar_transaction_id_request_url(tx_id, server))

    async def resolve_forward(self, forward_parameters: ForwardParameters, server: str) -> FederationRecord:
        """
        Resolve where to send a payment forwarded to another network or institution.

        The parameters needed depend on the destination institution.
        """
        server = validate_server_url(server)
        return await self._resolve_url(stellar_forward_request_url(forward_parameters, server))

    # === Internals ===

    async def _resolve_url(self, url: str) -> FederationRecord:
        logger.debug(f"Federation request: {url}")
        response = await self.http.fetch(url)
        self._check_status(url, response)
        return decode_federation_response(response.body, self.key_parser, self.memo_factory)

    @staticmethod
    def _check_status(url: str, response: WebResponse) -> None:
        match response.status:
            case status if 200 <= status < 300:
                return
            case status if 400 <= status < 500:
                logger.warning(f"Federation request {url} rejected: status {status}")
                raise ClientError(status, response)
            case status:
                logger.warning(f"Federation server error for {url}: status {status}")
                raise ServerError(status, response)


default_resolver = FederationResolver(http=http_session_manager)


async def resolve_stellar_address(address: str, resolver: Optional[FederationResolver] = None) -> FederationRecord:
    """
    Resolve federation address, discovering its federation server.

    Args:
        address: Federation address (e.g., user*domain.com)
        resolver: Optional FederationResolver, module default if None

    Returns:
        FederationRecord
    """
    resolver = resolver or default_resolver
    return await resolver.resolve_address(address)


async def resolve_stellar_address_from_server(address: str, server: str,
                                              resolver: Optional[FederationResolver] = None) -> FederationRecord:
    resolver = resolver or default_resolver
    return await resolver.resolve_address_at_server(address, server)


async def resolve_stellar_account_id(account_id: Union[Keypair, str], server: str,
                                     resolver: Optional[FederationResolver] = None) -> FederationRecord:
    resolver = resolver or default_resolver
    return await resolver.resolve_account_id(account_id, server)


async def resolve_stellar_transaction_id(tx_id: str, server: str,
                                         resolver: Optional[FederationResolver] = None) -> FederationRecord:
    resolver = resolver or default_resolver
    return await resolver.resolve_transaction_id(tx_id, server)


async def resolve_stellar_forward(forward_parameters: ForwardParameters, server: str,
                                  resolver: Optional[FederationResolver] = None) -> FederationRecord:
    resolver = resolver or default_resolver
    return await resolver.resolve_forward(forward_parameters, server)
