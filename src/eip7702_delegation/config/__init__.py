"""
Configuration package for the EIP-7702 delegation scripts.
"""

from eip7702_delegation.config.network import (
    CHAINS,
    CHAIN_ID_TO_NAME,
    NetworkConfig,
    get_chain_config,
    load_network_config,
    load_private_key,
)

from eip7702_delegation.config.contracts import (
    CONTRACT_ADDRESSES,
    ZERO_ADDRESS,
    get_contract_address,
)

__all__ = [
    # Network
    'CHAINS',
    'CHAIN_ID_TO_NAME',
    'NetworkConfig',
    'get_chain_config',
    'load_network_config',
    'load_private_key',

    # Contracts
    'CONTRACT_ADDRESSES',
    'ZERO_ADDRESS',
    'get_contract_address',
]
