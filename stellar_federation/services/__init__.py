"""Federation resolution services."""

from .federation_service import (
    FederationResolver,
    default_resolver,
    discover_federation_server,
    validate_server_url,
    resolve_stellar_address,
    resolve_stellar_address_from_server,
    resolve_stellar_account_id,
    resolve_stellar_transaction_id,
    resolve_stellar_forward,
)

__all__ = [
    "FederationResolver",
    "default_resolver",
    "discover_federation_server",
    "validate_server_url",
    "resolve_stellar_address",
    "resolve_stellar_address_from_server",
    "resolve_stellar_account_id",
    "resolve_stellar_transaction_id",
    "resolve_stellar_forward",
]
