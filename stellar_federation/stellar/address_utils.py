# stellar_federation/stellar/address_utils.py
"""Stellar address parsing."""

from stellar_federation.domain import StellarAddress
from stellar_federation.errors import InvalidAddress

ADDRESS_SEPARATOR = '*'


def parse_stellar_address(address: str) -> StellarAddress:
    """
    Split federation address into name and domain.

    The address must contain exactly one '*' with a non-empty part
    on each side. Nothing is trimmed or lowercased.

    Args:
        address: Federation address (e.g., user*domain.com)

    Returns:
        StellarAddress

    Raises:
        InvalidAddress: address is not of the form name*domain
    """
    parts = address.split(ADDRESS_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidAddress(address)
    return StellarAddress(name=parts[0], domain=parts[1])


def is_stellar_address(address: str) -> bool:
    """Check if address is of the form name*domain."""
    try:
        parse_stellar_address(address)
    except InvalidAddress:
        return False
    return True
