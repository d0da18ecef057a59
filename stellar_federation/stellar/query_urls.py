# stellar_federation/stellar/query_urls.py
"""Federation request URLs for the four SEP-0002 query types."""

from typing import Iterable, Mapping, Tuple, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

from stellar_sdk import Keypair

ForwardParameters = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _append_query(server: str, pairs: Iterable[Tuple[str, str]]) -> str:
    # existing query of the server url is kept, new pairs go after it
    parts = urlsplit(server)
    extra = urlencode(list(pairs))
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def stellar_address_request_url(address: str, server: str) -> str:
    """URL of a 'name' request for address."""
    return _append_query(server, [("type", "name"), ("q", address)])


def stellar_account_id_request_url(account_id: Union[Keypair, str], server: str) -> str:
    """URL of an 'id' (reverse) request, q is the G... account id."""
    if isinstance(account_id, Keypair):
        account_id = account_id.public_key
    return _append_query(server, [("type", "id"), ("q", account_id)])


def stellar_transaction_id_request_url(tx_id: str, server: str) -> str:
    """URL of a 'txid' request."""
    return _append_query(server, [("type", "txid"), ("q", tx_id)])


def stellar_forward_request_url(forward_parameters: ForwardParameters, server: str) -> str:
    """
    URL of a 'forward' request.

    Parameters are appended after type=forward in the order given.
    Which parameters are needed is published by the receiving institution
    in its stellar.toml.

    Args:
        forward_parameters: Mapping or sequence of (key, value) pairs
        server: Federation server URL

    Returns:
        Request URL
    """
    if isinstance(forward_parameters, Mapping):
        forward_parameters = forward_parameters.items()
    pairs = [("type", "forward")]
    pairs.extend((key, value) for key, value in forward_parameters)
    return _append_query(server, pairs)
