# stellar_federation/stellar/sdk_utils.py
"""stellar_sdk backed key parsing and memo construction."""

from stellar_sdk import HashMemo, IdMemo, Keypair, Memo, TextMemo


class StellarKeyParser:
    """Parse account ids with stellar_sdk.Keypair."""

    def parse(self, account_id: str) -> Keypair:
        # Ed25519PublicKeyInvalidError is a ValueError
        return Keypair.from_public_key(account_id)


class StellarMemoFactory:
    """
    Build stellar_sdk memos.

    Size checks are done by stellar_sdk: text up to 28 bytes,
    id within uint64, hash exactly 32 bytes. All of them raise
    MemoInvalidException, a ValueError.
    """

    def text(self, value: str) -> Memo:
        return TextMemo(value)

    def id(self, value: int) -> Memo:
        return IdMemo(value)

    def hash(self, value: bytes) -> Memo:
        # bytes only, stellar_sdk treats str as hex
        return HashMemo(bytes(value))
