"""
Uniswap Universal Router calldata builders.

Only the commands needed for an ETH -> token exact-input swap through a V3
pool are covered: WRAP_ETH, V3_SWAP_EXACT_IN, PAY_PORTION and SWEEP.
"""

from __future__ import annotations

import time

from eth_abi import encode
from eth_abi.packed import encode_packed
from eth_utils import function_signature_to_4byte_selector, to_checksum_address

# Universal Router command bytes
V3_SWAP_EXACT_IN = 0x00
SWEEP = 0x04
PAY_PORTION = 0x06
WRAP_ETH = 0x0B

# Recipient placeholders understood by the router
MSG_SENDER = "0x0000000000000000000000000000000000000001"
ADDRESS_THIS = "0x0000000000000000000000000000000000000002"

EXECUTE_SELECTOR: bytes = function_signature_to_4byte_selector("execute(bytes,bytes[],uint256)")

DEFAULT_DEADLINE_SECONDS = 86_400


def encode_v3_path(token_in: str, fee: int, token_out: str) -> bytes:
    """Single-hop V3 path: token_in (20) | fee (3) | token_out (20)."""
    return encode_packed(
        ['address', 'uint24', 'address'],
        [to_checksum_address(token_in), fee, to_checksum_address(token_out)],
    )


def encode_execute(commands: bytes, inputs: list[bytes], deadline: int) -> bytes:
    """Calldata for ``execute(bytes commands, bytes[] inputs, uint256 deadline)``."""
    if len(commands) != len(inputs):
        raise ValueError(f"Got {len(commands)} commands but {len(inputs)} inputs")
    return EXECUTE_SELECTOR + encode(['bytes', 'bytes[]', 'uint256'], [commands, inputs, deadline])


def build_eth_to_token_swap(
    weth: str,
    token_out: str,
    amount_in: int,
    recipient: str,
    fee_recipient: str,
    fee_bips: int = 25,
    pool_fee: int = 100,
    min_amount_out: int = 0,
    sweep_min: int = 0,
    deadline: int | None = None,
) -> bytes:
    """
    Build router calldata that wraps ETH, swaps it for ``token_out`` and pays out.

    The router keeps intermediate balances (ADDRESS_THIS), pays ``fee_bips``
    of the output to ``fee_recipient`` and sweeps the rest to ``recipient``.

    Args:
        weth: Wrapped native token address
        token_out: Token to buy
        amount_in: Wei of ETH to wrap and swap
        recipient: Receiver of the swept output
        fee_recipient: Receiver of the portion
        fee_bips: Portion in basis points
        pool_fee: V3 pool fee tier (100 = 0.01%)
        min_amount_out: Minimum swap output
        sweep_min: Minimum amount the sweep must transfer
        deadline: Unix timestamp (defaults to 24h from now)
    """
    if amount_in <= 0:
        raise ValueError(f"amount_in must be positive, got {amount_in}")
    if not 0 <= fee_bips <= 10_000:
        raise ValueError(f"fee_bips must be between 0 and 10000, got {fee_bips}")

    if deadline is None:
        deadline = int(time.time()) + DEFAULT_DEADLINE_SECONDS

    commands = bytes([WRAP_ETH, V3_SWAP_EXACT_IN, PAY_PORTION, SWEEP])
    inputs = [
        encode(['address', 'uint256'], [ADDRESS_THIS, amount_in]),
        encode(
            ['address', 'uint256', 'uint256', 'bytes', 'bool'],
            [ADDRESS_THIS, amount_in, min_amount_out, encode_v3_path(weth, pool_fee, token_out), False],
        ),
        encode(
            ['address', 'address', 'uint256'],
            [to_checksum_address(token_out), to_checksum_address(fee_recipient), fee_bips],
        ),
        encode(
            ['address', 'address', 'uint256'],
            [to_checksum_address(token_out), to_checksum_address(recipient), sweep_min],
        ),
    ]
    return encode_execute(commands, inputs, deadline)
