"""
EIP-7702 smart wallet delegation toolkit.

Plans batched smart-wallet calls, signs EIP-7702 authorizations and sends
Type-4 transactions that delegate an EOA to a smart wallet implementation.
"""

from eip7702_delegation.helpers.call_planner import Call, CallPlanner, InvalidCallError

__all__ = [
    'Call',
    'CallPlanner',
    'InvalidCallError',
]

__version__ = "0.1.0"
