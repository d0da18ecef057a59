# stellar_federation/domain/federation.py
"""Federation domain models."""

from dataclasses import dataclass
from typing import Optional

from stellar_sdk import HashMemo, IdMemo, Keypair, Memo, NoneMemo, TextMemo


@dataclass(frozen=True)
class StellarAddress:
    """
    Parsed 'name*domain' address.

    Immutable value object, str() gives back the original address.
    """
    name: str
    domain: str

    def __str__(self) -> str:
        return f"{self.name}*{self.domain}"


@dataclass(frozen=True)
class FederationRecord:
    """
    Result of a federation lookup.

    account_id is a public-only Keypair, memo is one of
    TextMemo / IdMemo / HashMemo or None when the server sent no memo.
    """
    stellar_address: str
    account_id: Keypair
    memo: Optional[Memo] = None

    @property
    def account_id_str(self) -> str:
        """Account id in G... form."""
        return self.account_id.public_key

    @property
    def has_memo(self) -> bool:
        return self.memo is not None

    @property
    def memo_type(self) -> Optional[str]:
        """Memo kind as named by SEP-0002: 'text', 'id', 'hash' or None."""
        if isinstance(self.memo, TextMemo):
            return "text"
        if isinstance(self.memo, IdMemo):
            return "id"
        if isinstance(self.memo, HashMemo):
            return "hash"
        return None

    @property
    def payment_memo(self) -> Memo:
        """Memo to pass to a TransactionBuilder, NoneMemo when absent."""
        return self.memo if self.memo is not None else NoneMemo()
