"""
Reading EIP-7702 delegations back from chain.

A delegated EOA carries the 23-byte designator ``0xef0100 || address`` as
its code. Revoking (delegating to the zero address) clears the code.
"""

from __future__ import annotations

import logging

from eth_utils import to_bytes, to_checksum_address
from web3 import Web3

logger = logging.getLogger(__name__)

DELEGATION_DESIGNATION = bytes.fromhex("ef0100")
DELEGATION_CODE_LENGTH = len(DELEGATION_DESIGNATION) + 20


def delegation_code(address: str) -> bytes:
    """Code an EOA carries while delegated to ``address``."""
    return DELEGATION_DESIGNATION + to_bytes(hexstr=to_checksum_address(address))


def parse_delegation_code(code: bytes | str) -> str | None:
    """
    Extract the delegate from account code.

    Returns:
        Checksummed delegate address, or None when the account has no code

    Raises:
        ValueError: If the account has code that is not a delegation designator
            (it is a regular contract)
    """
    if isinstance(code, str):
        code = to_bytes(hexstr=code)
    code = bytes(code)

    if not code:
        return None

    if len(code) != DELEGATION_CODE_LENGTH or not code.startswith(DELEGATION_DESIGNATION):
        raise ValueError(f"Account code is not a delegation designator ({len(code)} bytes)")

    return to_checksum_address(code[len(DELEGATION_DESIGNATION):])


def get_delegation(w3: Web3, address: str) -> str | None:
    """Return the contract ``address`` is currently delegated to, if any."""
    code = w3.eth.get_code(to_checksum_address(address))
    logger.debug(f"Code at {address}: 0x{bytes(code).hex()}")
    return parse_delegation_code(code)
