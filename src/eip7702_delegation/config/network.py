"""
Network configuration for the EIP-7702 delegation scripts.

Contains chain metadata and the smart-wallet implementation each chain
delegates to. RPC endpoints are not embedded here: they come from the
RPC_URL environment variable or are passed in explicitly.
"""

import os
from dataclasses import dataclass
from typing import Any

from eth_utils import is_address, to_checksum_address


# =============================================================================
# CHAIN CONFIGURATIONS
# =============================================================================

# Uniswap Calibur smart wallet, deployed at the same address on every chain.
SMART_WALLET_ADDRESS_DEFAULT = "0x000000009b1d0af20d8c6d0a44e162d11f9b8f00"

CHAINS: dict[str, dict[str, Any]] = {
    "sepolia": {
        "chain_id": 11155111,
        "name": "Sepolia",
        "currency": "ETH",
        "explorer": {
            "name": "Etherscan Sepolia",
            "url": "https://sepolia.etherscan.io",
        },
        "smart_wallet": SMART_WALLET_ADDRESS_DEFAULT,
    },
    "mainnet": {
        "chain_id": 1,
        "name": "Ethereum",
        "currency": "ETH",
        "explorer": {
            "name": "Etherscan",
            "url": "https://etherscan.io",
        },
        "smart_wallet": SMART_WALLET_ADDRESS_DEFAULT,
    },
    "base_sepolia": {
        "chain_id": 84532,
        "name": "Base Sepolia",
        "currency": "ETH",
        "explorer": {
            "name": "Basescan Sepolia",
            "url": "https://sepolia.basescan.org",
        },
        "smart_wallet": SMART_WALLET_ADDRESS_DEFAULT,
    },
}

# Chain ID to name mapping
CHAIN_ID_TO_NAME: dict[int, str] = {
    config["chain_id"]: name for name, config in CHAINS.items()
}

DEFAULT_CHAIN = "sepolia"
DEFAULT_GAS_LIMIT: int = 500_000
DEFAULT_PRIORITY_FEE_GWEI: float = 2.0


@dataclass(frozen=True)
class NetworkConfig:
    """Explicit settings handed to every component that talks to a chain."""

    rpc_url: str
    chain_id: int
    explorer_url: str
    smart_wallet_address: str
    gas_limit: int = DEFAULT_GAS_LIMIT
    priority_fee_gwei: float = DEFAULT_PRIORITY_FEE_GWEI

    def tx_url(self, tx_hash: str) -> str:
        """Block explorer link for a transaction hash."""
        return f"{self.explorer_url}/tx/{tx_hash}"

    def address_url(self, address: str) -> str:
        """Block explorer link for an account."""
        return f"{self.explorer_url}/address/{address}"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_chain_config(chain: str | int | None = None) -> dict[str, Any]:
    """Get configuration for a specific chain.

    Args:
        chain: Chain name (e.g., 'sepolia') or chain ID.
               If None, uses CHAIN environment variable or defaults to 'sepolia'.

    Returns:
        Chain configuration dictionary.

    Raises:
        ValueError: If chain is not supported.
    """
    if chain is None:
        chain = os.getenv("CHAIN", DEFAULT_CHAIN)

    if isinstance(chain, int):
        name = CHAIN_ID_TO_NAME.get(chain)
        if name is None:
            raise ValueError(f"Unsupported chain ID: {chain}")
        chain = name

    chain = chain.lower()
    if chain not in CHAINS:
        raise ValueError(f"Unsupported chain: {chain}. Supported: {list(CHAINS.keys())}")

    return CHAINS[chain]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}") from None


def load_network_config(chain: str | int | None = None, rpc_url: str | None = None) -> NetworkConfig:
    """Build a NetworkConfig from arguments and the environment.

    Explicit arguments win over environment variables. RPC_URL has no
    fallback; SMART_WALLET_ADDRESS, GAS_LIMIT and PRIORITY_FEE_GWEI may
    override the chain table.

    Raises:
        ValueError: If the RPC URL is missing or a value is malformed.
    """
    chain_config = get_chain_config(chain)

    rpc_url = rpc_url or os.getenv("RPC_URL")
    if not rpc_url:
        raise ValueError("No RPC URL available. Set RPC_URL or pass --rpc-url.")

    smart_wallet = os.getenv("SMART_WALLET_ADDRESS") or chain_config["smart_wallet"]
    if not is_address(smart_wallet):
        raise ValueError(f"SMART_WALLET_ADDRESS is not a valid address: {smart_wallet}")

    gas_limit = _env_int("GAS_LIMIT", DEFAULT_GAS_LIMIT)
    if gas_limit <= 0:
        raise ValueError(f"GAS_LIMIT must be positive, got: {gas_limit}")

    priority_fee = _env_float("PRIORITY_FEE_GWEI", DEFAULT_PRIORITY_FEE_GWEI)
    if priority_fee < 0:
        raise ValueError(f"PRIORITY_FEE_GWEI must not be negative, got: {priority_fee}")

    return NetworkConfig(
        rpc_url=rpc_url,
        chain_id=chain_config["chain_id"],
        explorer_url=chain_config["explorer"]["url"],
        smart_wallet_address=to_checksum_address(smart_wallet),
        gas_limit=gas_limit,
        priority_fee_gwei=priority_fee,
    )


def load_private_key() -> str:
    """Return PRIVATE_KEY from the environment.

    Raises:
        ValueError: If PRIVATE_KEY is not set.
    """
    private_key = os.getenv("PRIVATE_KEY")
    if not private_key:
        raise ValueError("PRIVATE_KEY is required in .env")
    return private_key
