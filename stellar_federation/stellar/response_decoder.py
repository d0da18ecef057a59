# stellar_federation/stellar/response_decoder.py
"""Decoding of SEP-0002 federation responses into FederationRecord."""

import base64
import binascii
import re
from typing import Any, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, StrictStr, ValidationError
from stellar_sdk import Memo

from stellar_federation.domain import FederationRecord
from stellar_federation.errors import InvalidAccountId, InvalidMemo, MalformedResponse
from stellar_federation.interfaces import IMemoFactory, IPublicKeyParser
from stellar_federation.stellar.sdk_utils import StellarKeyParser, StellarMemoFactory

MAX_ID_MEMO = 2 ** 64 - 1
ID_MEMO_PATTERN = re.compile(r'\+?[0-9]+')


class FederationResponseDTO(BaseModel):
    """Federation response as it comes over the wire, null means absent."""
    stellar_address: StrictStr
    account_id: StrictStr
    memo_type: Optional[StrictStr] = None
    memo: Optional[StrictStr] = None


def _load_dto(body: Union[bytes, str, Mapping[str, Any]]) -> FederationResponseDTO:
    try:
        if isinstance(body, (bytes, bytearray, str)):
            return FederationResponseDTO.model_validate_json(body)
        return FederationResponseDTO.model_validate(body)
    except ValidationError as e:
        raise MalformedResponse(f"Malformed federation response: {e}") from e


def _parse_id(value: str) -> int:
    if not ID_MEMO_PATTERN.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")
    memo_id = int(value)
    if memo_id > MAX_ID_MEMO:
        raise ValueError(f"does not fit in uint64: {value}")
    return memo_id


def _decode_memo(memo_type: Optional[str], memo: Optional[str], memo_factory: IMemoFactory) -> Optional[Memo]:
    match (memo_type, memo):
        case (None, None):
            return None
        case ("text", str()):
            try:
                return memo_factory.text(memo)
            except ValueError as e:
                raise InvalidMemo(f"Malformed text memo: {e}", memo_type, memo) from e
        case ("id", str()):
            try:
                return memo_factory.id(_parse_id(memo))
            except ValueError as e:
                raise InvalidMemo(f"Malformed id memo: {e}", memo_type, memo) from e
        case ("hash", str()):
            try:
                memo_hash = base64.b64decode(memo, validate=True)
            except (binascii.Error, ValueError) as e:
                raise InvalidMemo(f"Malformed base64 hash memo: {e}", memo_type, memo) from e
            try:
                return memo_factory.hash(memo_hash)
            except ValueError as e:
                raise InvalidMemo(f"Malformed hash memo: {e}", memo_type, memo) from e
        case _:
            raise InvalidMemo(f"Invalid memo_type or memo: {memo_type!r}, {memo!r}", memo_type, memo)


def decode_federation_response(
        body: Union[bytes, str, Mapping[str, Any]],
        key_parser: Optional[IPublicKeyParser] = None,
        memo_factory: Optional[IMemoFactory] = None,
) -> FederationRecord:
    """
    Decode federation server response.

    The memo_type/memo pair must be one of: both absent, or
    'text', 'id', 'hash' with a value. Anything else is rejected.

    Args:
        body: Raw JSON body, or an already parsed object
        key_parser: Account id parser, StellarKeyParser if None
        memo_factory: Memo builder, StellarMemoFactory if None

    Returns:
        FederationRecord

    Raises:
        MalformedResponse: body is not a federation JSON object
        InvalidAccountId: account_id is not a valid public key
        InvalidMemo: memo_type/memo pair is invalid
    """
    key_parser = key_parser or StellarKeyParser()
    memo_factory = memo_factory or StellarMemoFactory()

    dto = _load_dto(body)

    try:
        account_id = key_parser.parse(dto.account_id.strip())
    except ValueError as e:
        raise InvalidAccountId(dto.account_id) from e

    memo = _decode_memo(dto.memo_type, dto.memo, memo_factory)

    record = FederationRecord(
        stellar_address=dto.stellar_address,
        account_id=account_id,
        memo=memo,
    )
    logger.debug(f"Decoded federation record for {record.stellar_address}: "
                 f"{record.account_id_str}, memo_type={record.memo_type}")
    return record
