"""
Web3 setup helper.

Public API
----------
get_web3_instance(config)
    Return a Web3 instance connected to ``config.rpc_url``.
load_account(private_key)
    Return the local signing account for a private key.
"""
from __future__ import annotations

import logging

from web3 import Web3
from eth_account import Account
from eth_account.signers.local import LocalAccount

from eip7702_delegation.config.network import NetworkConfig

__all__ = ["get_web3_instance", "load_account"]

logger = logging.getLogger(__name__)


def get_web3_instance(config: NetworkConfig) -> Web3:
    """
    Get a Web3 instance for the configured RPC endpoint.

    Raises:
        ConnectionError: If the endpoint is unreachable
        ValueError: If the endpoint serves a different chain than configured
    """
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    if not w3.is_connected():
        raise ConnectionError("Could not connect to RPC endpoint")

    chain_id = w3.eth.chain_id
    if chain_id != config.chain_id:
        raise ValueError(f"RPC endpoint serves chain {chain_id}, expected {config.chain_id}")

    logger.debug(f"Connected to chain {chain_id}")
    return w3


def load_account(private_key: str) -> LocalAccount:
    """Local account for signing authorizations and transactions."""
    return Account.from_key(private_key)
