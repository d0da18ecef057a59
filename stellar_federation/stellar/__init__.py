# stellar_federation/stellar/__init__.py
"""
Stellar side of the federation protocol.

- address_utils: name*domain parsing
- query_urls: request URLs for name, id, txid and forward queries
- response_decoder: federation JSON to FederationRecord
- sdk_utils: stellar_sdk key parsing and memo construction
- toml_resolver: stellar.toml lookups
"""

from .address_utils import (
    parse_stellar_address,
    is_stellar_address,
)

from .query_urls import (
    stellar_address_request_url,
    stellar_account_id_request_url,
    stellar_transaction_id_request_url,
    stellar_forward_request_url,
)

from .response_decoder import (
    decode_federation_response,
)

from .sdk_utils import (
    StellarKeyParser,
    StellarMemoFactory,
)

from .toml_resolver import StellarTomlResolver


__all__ = [
    # Address
    "parse_stellar_address",
    "is_stellar_address",
    # Query URLs
    "stellar_address_request_url",
    "stellar_account_id_request_url",
    "stellar_transaction_id_request_url",
    "stellar_forward_request_url",
    # Decoder
    "decode_federation_response",
    # SDK
    "StellarKeyParser",
    "StellarMemoFactory",
    "StellarTomlResolver",
]
