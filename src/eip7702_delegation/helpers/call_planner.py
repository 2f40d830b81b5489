"""
Call Planner
============

Accumulates an ordered batch of outbound calls for a smart wallet and keeps
the total native value the batch needs. The planner only assembles data;
encoding lives in ``helpers.smart_wallet`` and broadcasting in
``executor.eip7702_sender``.

Usage::

    planner = CallPlanner()
    planner.add(router, 10**13, swap_calldata)
    planner.add(token, 0, "0x")
    encode_batched_call(planner.calls)
"""

from dataclasses import dataclass
import logging

from eth_typing import ChecksumAddress
from eth_utils import (
    decode_hex,
    is_address,
    is_checksum_address,
    remove_0x_prefix,
    to_checksum_address,
)

logger = logging.getLogger(__name__)

UINT256_MAX = 2**256 - 1


class InvalidCallError(ValueError):
    """A call was rejected before it reached the plan."""


@dataclass(frozen=True)
class Call:
    """One outbound invocation executed by the smart wallet."""

    target: ChecksumAddress
    value: int
    data: bytes = b""

    def as_tuple(self) -> tuple[ChecksumAddress, int, bytes]:
        """(to, value, data) in the order the batch ABI expects."""
        return (self.target, self.value, self.data)


def _normalize_target(target) -> ChecksumAddress:
    if not target or not is_address(target):
        raise InvalidCallError(f"Invalid target address: {target!r}")
    if isinstance(target, str):
        body = remove_0x_prefix(target)
        # mixed case must carry a valid EIP-55 checksum
        if body != body.lower() and body != body.upper() and not is_checksum_address(target):
            raise InvalidCallError(f"Bad EIP-55 checksum on target address: {target!r}")
    return to_checksum_address(target)


def _normalize_value(value) -> int:
    # bool is an int subclass but never a meaningful wei amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCallError(f"Call value must be an integer amount of wei, got {value!r}")
    if value < 0:
        raise InvalidCallError(f"Call value must not be negative, got {value}")
    if value > UINT256_MAX:
        raise InvalidCallError(f"Call value does not fit in uint256: {value}")
    return value


def _normalize_data(data) -> bytes:
    if data is None:
        return b""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return decode_hex(data)
        except ValueError:
            raise InvalidCallError(f"Call data is not valid hex: {data!r}") from None
    raise InvalidCallError(f"Call data must be bytes or a hex string, got {type(data).__name__}")


class CallPlanner:
    """Ordered list of calls plus their running native-value total.

    Calls are only ever appended. Duplicate targets are kept as separate
    entries because the wallet executes them in sequence.
    """

    def __init__(self):
        self._calls: list[Call] = []
        self._total_value = 0

    def add(self, target: str, value: int, data: str | bytes = b"") -> int:
        """
        Append a call to the plan.

        Args:
            target: Address the wallet will call
            value: Wei to attach to the call
            data: Calldata as hex string or bytes ("0x" for a plain transfer)

        Returns:
            The plan's total value after the call was added

        Raises:
            InvalidCallError: If the target, value or data is malformed, or
                the total would no longer fit in uint256. The plan is left
                untouched.
        """
        call = Call(
            target=_normalize_target(target),
            value=_normalize_value(value),
            data=_normalize_data(data),
        )
        if self._total_value + call.value > UINT256_MAX:
            raise InvalidCallError(
                f"Plan total would overflow uint256 ({self._total_value} + {call.value} wei)"
            )

        self._calls.append(call)
        self._total_value += call.value
        logger.debug(
            f"Planned call #{len(self._calls)} to {call.target} "
            f"(value={call.value} wei, {len(call.data)} bytes)"
        )
        return self._total_value

    @property
    def calls(self) -> tuple[Call, ...]:
        """Snapshot of the planned calls in insertion order."""
        return tuple(self._calls)

    @property
    def total_value(self) -> int:
        """Sum of the value of every planned call, in wei."""
        return self._total_value

    def __len__(self) -> int:
        return len(self._calls)

    def __repr__(self) -> str:
        return f"CallPlanner(calls={len(self._calls)}, total_value={self._total_value})"
