"""
EIP-7702 Transaction Sender.
Handles authorization signing, Type 4 transaction construction, and broadcast.

The EOA always sponsors its own delegation: the transaction is sent from the
EOA to itself, so the authorization nonce is the transaction nonce + 1.
"""

import logging
from typing import Any

from web3 import Web3
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address

from eip7702_delegation.config.network import NetworkConfig

logger = logging.getLogger(__name__)

SET_CODE_TX_TYPE = 4


def sign_delegation(account: LocalAccount, contract_address: str, chain_id: int, nonce: int) -> dict[str, Any]:
    """
    Sign an EIP-7702 authorization tuple.

    Args:
        account: Local account that delegates its code
        contract_address: Implementation to delegate to (zero address revokes)
        chain_id: Chain the authorization is valid on
        nonce: Account nonce the authorization is bound to

    Returns:
        Authorization dict for a transaction's authorizationList
    """
    auth = {
        "chainId": chain_id,
        "address": to_checksum_address(contract_address),
        "nonce": nonce,
    }

    signed_auth = account.sign_authorization(auth)
    logger.debug(f"Signed authorization for {auth['address']} (chain {chain_id}, nonce {nonce})")

    return {
        'chainId': signed_auth.chain_id,
        'address': to_checksum_address(signed_auth.address),
        'nonce': signed_auth.nonce,
        'yParity': signed_auth.y_parity,
        'r': signed_auth.r,
        's': signed_auth.s,
    }


def fee_params(w3: Web3, priority_fee_gwei: float) -> dict[str, int]:
    """EIP-1559 fee fields from the latest base fee."""
    latest_block = w3.eth.get_block('latest')
    base_fee = latest_block.get('baseFeePerGas', w3.eth.gas_price)
    priority_fee = w3.to_wei(priority_fee_gwei, 'gwei')
    return {
        'maxFeePerGas': base_fee * 2 + priority_fee,
        'maxPriorityFeePerGas': priority_fee,
    }


def build_delegation_transaction(
    w3: Web3,
    account: LocalAccount,
    config: NetworkConfig,
    contract_address: str,
    data: bytes = b"",
    value: int = 0,
) -> dict[str, Any]:
    """
    Build a Type 4 transaction that delegates ``account`` and optionally
    executes ``data`` against the new code in the same transaction.

    Args:
        w3: Web3 instance
        account: EOA that signs both the authorization and the transaction
        config: Network settings (chain id, gas limit, priority fee)
        contract_address: Implementation to delegate to
        data: Calldata run on the delegated EOA (empty to only delegate)
        value: Wei sent along with the call

    Returns:
        Transaction dictionary ready for signing
    """
    if value < 0:
        raise ValueError(f"Transaction value must not be negative, got {value}")

    nonce = w3.eth.get_transaction_count(account.address)
    authorization = sign_delegation(account, contract_address, config.chain_id, nonce + 1)

    tx = {
        'type': SET_CODE_TX_TYPE,
        'chainId': config.chain_id,
        'nonce': nonce,
        'to': account.address,  # Send to self
        'value': value,
        'data': data,
        'gas': config.gas_limit,
        'authorizationList': [authorization],
        **fee_params(w3, config.priority_fee_gwei),
    }

    logger.info(
        f"Built EIP-7702 transaction: {account.address} -> {authorization['address']} "
        f"(nonce {nonce}, {len(data)} bytes calldata, value {value} wei)"
    )
    return tx


def send_delegation_transaction(w3: Web3, account: LocalAccount, tx: dict[str, Any]) -> str:
    """
    Sign and broadcast a Type 4 transaction.

    Returns:
        Transaction hash as 0x-prefixed hex string
    """
    signed_tx = account.sign_transaction(tx)
    tx_hash = w3.to_hex(w3.eth.send_raw_transaction(signed_tx.raw_transaction))

    logger.info(f"Sent EIP-7702 transaction: {tx_hash}")
    return tx_hash
