"""
Stellar federation (SEP-0002) client.

Maps Stellar addresses like 'name*domain.com', account ids and
transaction ids to a FederationRecord: account id plus optional memo.

    record = await resolve_stellar_address("with-text-memo*ceccon.me")
"""

from .domain import FederationRecord, StellarAddress
from .errors import (
    FederationError,
    InvalidAddress,
    MissingFederationServer,
    DiscoveryError,
    InvalidUrl,
    FederationHttpError,
    ClientError,
    ServerError,
    TransportError,
    MalformedResponse,
    InvalidAccountId,
    InvalidMemo,
)
from .stellar import (
    parse_stellar_address,
    is_stellar_address,
    stellar_address_request_url,
    stellar_account_id_request_url,
    stellar_transaction_id_request_url,
    stellar_forward_request_url,
    decode_federation_response,
    StellarKeyParser,
    StellarMemoFactory,
    StellarTomlResolver,
)
from .services import (
    FederationResolver,
    discover_federation_server,
    resolve_stellar_address,
    resolve_stellar_address_from_server,
    resolve_stellar_account_id,
    resolve_stellar_transaction_id,
    resolve_stellar_forward,
)
from .web_tools import HTTPSessionManager, WebResponse, http_session_manager

__all__ = [
    # Models
    "FederationRecord",
    "StellarAddress",
    # Errors
    "FederationError",
    "InvalidAddress",
    "MissingFederationServer",
    "DiscoveryError",
    "InvalidUrl",
    "FederationHttpError",
    "ClientError",
    "ServerError",
    "TransportError",
    "MalformedResponse",
    "InvalidAccountId",
    "InvalidMemo",
    # Stellar helpers
    "parse_stellar_address",
    "is_stellar_address",
    "stellar_address_request_url",
    "stellar_account_id_request_url",
    "stellar_transaction_id_request_url",
    "stellar_forward_request_url",
    "decode_federation_response",
    "StellarKeyParser",
    "StellarMemoFactory",
    "StellarTomlResolver",
    # Resolver
    "FederationResolver",
    "discover_federation_server",
    "resolve_stellar_address",
    "resolve_stellar_address_from_server",
    "resolve_stellar_account_id",
    "resolve_stellar_transaction_id",
    "resolve_stellar_forward",
    # HTTP
    "HTTPSessionManager",
    "WebResponse",
    "http_session_manager",
]
