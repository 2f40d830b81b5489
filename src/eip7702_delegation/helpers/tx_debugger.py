"""
Transaction debugging output.

Logs what is about to be signed so a Type-4 request can be inspected before
it is broadcast. Long calldata is shown as length + preview.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from eth_utils import encode_hex

from eip7702_delegation.helpers.smart_wallet import ExecutionCall, MethodParameters

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 100


def _jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return encode_hex(bytes(value))
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def serializable_request(tx: dict[str, Any]) -> dict[str, Any]:
    """JSON-safe copy of a transaction request: bytes become 0x-hex strings."""
    return _jsonable(tx)


def preview(data: bytes | str) -> str:
    """0x-hex with everything past PREVIEW_CHARS characters elided."""
    text = encode_hex(data) if isinstance(data, (bytes, bytearray)) else data
    if len(text) <= PREVIEW_CHARS:
        return text
    return text[:PREVIEW_CHARS] + "..."


def _hex_length(data: bytes | str) -> int:
    return len(encode_hex(data)) if isinstance(data, (bytes, bytearray)) else len(data)


def display_transaction_details(tx: dict[str, Any]) -> None:
    """Log a full Type-4 request and a summary of its parts."""
    logger.info("=== RAW TRANSACTION DETAILS ===")
    logger.info(f"Transaction Request: {json.dumps(serializable_request(tx), indent=2)}")

    data = tx.get("data", b"")
    authorizations = tx.get("authorizationList", [])
    logger.info("- Type: EIP-7702 (Type-4)")
    logger.info(f"- To: {tx.get('to')}")
    logger.info(f"- Data Length: {_hex_length(data)} characters")
    logger.info(f"- Data Preview: {preview(data)}")
    logger.info(f"- Value: {tx.get('value', 0)} wei")
    logger.info(f"- Authorization Count: {len(authorizations)}")
    for auth in authorizations:
        logger.info(
            f"- Authorization: address={auth['address']} chainId={auth['chainId']} "
            f"nonce={auth['nonce']} yParity={auth['yParity']}"
        )


def display_execution_call(execution_call: ExecutionCall) -> None:
    logger.info("=== EXECUTION CALL DETAILS ===")
    logger.info(f"Target Address: {execution_call.to}")
    logger.info(f"Data Length: {_hex_length(execution_call.data)} characters")
    logger.info(f"Value: {execution_call.value} wei")
    logger.info(f"Data Preview: {preview(execution_call.data)}")


def display_method_parameters(method_parameters: MethodParameters) -> None:
    logger.info("=== METHOD PARAMETERS ===")
    logger.info(f"Calldata Length: {_hex_length(method_parameters.calldata)} characters")
    logger.info(f"Value: {method_parameters.value} wei")
    logger.info(f"Calldata Preview: {preview(method_parameters.calldata)}")
