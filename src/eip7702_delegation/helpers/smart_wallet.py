"""
Smart wallet calldata encoder.

Turns a list of planned calls into the calldata for the delegated wallet's
``execute(BatchedCall)`` entry point, where::

    struct Call        { address to; uint256 value; bytes data; }
    struct BatchedCall { Call[] calls; bool revertOnFailure; }
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_checksum_address

from eip7702_delegation.helpers.call_planner import Call

BATCHED_CALL_TYPE = "((address,uint256,bytes)[],bool)"
EXECUTE_BATCHED_SIGNATURE = f"execute({BATCHED_CALL_TYPE})"
EXECUTE_BATCHED_SELECTOR: bytes = function_signature_to_4byte_selector(EXECUTE_BATCHED_SIGNATURE)


class MethodParameters(NamedTuple):
    calldata: bytes
    value: int


class ExecutionCall(NamedTuple):
    to: str
    data: bytes
    value: int


def encode_batched_call(calls: Iterable[Call], revert_on_failure: bool = True) -> MethodParameters:
    """
    Encode calls for ``execute(BatchedCall)``.

    Args:
        calls: Planned calls, executed by the wallet in this order
        revert_on_failure: Revert the whole batch when any call fails

    Returns:
        MethodParameters with the calldata and the value the batch consumes
    """
    calls = tuple(calls)
    encoded = encode(
        [BATCHED_CALL_TYPE],
        [([call.as_tuple() for call in calls], revert_on_failure)],
    )
    return MethodParameters(
        calldata=EXECUTE_BATCHED_SELECTOR + encoded,
        value=sum(call.value for call in calls),
    )


def create_execute(method_parameters: MethodParameters, smart_wallet_address: str) -> ExecutionCall:
    """Wrap encoded parameters into the call made against the wallet implementation."""
    return ExecutionCall(
        to=to_checksum_address(smart_wallet_address),
        data=method_parameters.calldata,
        value=method_parameters.value,
    )
