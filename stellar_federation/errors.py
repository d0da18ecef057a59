# stellar_federation/errors.py
"""Errors raised while resolving federation addresses."""

from typing import Any


class FederationError(Exception):
    """
    Base class for all federation resolution errors.

    Every failure of the resolution pipeline is raised as a subclass,
    so callers can catch this one type.
    """


class InvalidAddress(FederationError):
    """Address is not of the form 'name*domain'."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid stellar address: {address!r}")


class MissingFederationServer(FederationError):
    """stellar.toml of the domain does not publish FEDERATION_SERVER."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"No FEDERATION_SERVER in stellar.toml of {domain}")


class DiscoveryError(FederationError):
    """stellar.toml of the domain could not be fetched or parsed."""

    def __init__(self, domain: str, cause: BaseException):
        self.domain = domain
        self.cause = cause
        super().__init__(f"Failed to resolve stellar.toml of {domain}: {cause}")


class InvalidUrl(FederationError):
    """Federation server URL is not an absolute URL."""

    def __init__(self, url: Any):
        self.url = url
        super().__init__(f"Invalid federation server url: {url!r}")


class FederationHttpError(FederationError):
    """
    Federation server answered with a non-success status.

    The response is kept as is so callers can inspect the body.
    """

    kind = "http"

    def __init__(self, status: int, response: Any):
        self.status = status
        self.response = response
        super().__init__(f"Federation server {self.kind} error: status {status}")


class ClientError(FederationHttpError):
    """4xx answer, the request was rejected."""

    kind = "client"


class ServerError(FederationHttpError):
    """5xx or any other non-success answer."""

    kind = "server"


class TransportError(FederationError):
    """Connection, TLS or timeout failure."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause!r}")


class MalformedResponse(FederationError):
    """Response body is not a federation JSON object."""


class InvalidAccountId(FederationError):
    """account_id of the response is not a valid public key."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Malformed account_id: {account_id!r}")


class InvalidMemo(FederationError):
    """memo_type/memo pair of the response can not be turned into a memo."""

    def __init__(self, message: str, memo_type: Any = None, memo: Any = None):
        self.memo_type = memo_type
        self.memo = memo
        super().__init__(message)
