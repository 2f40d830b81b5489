"""
Contract addresses used by the delegation demos.

Only Sepolia deployments are listed; the swap demo is a testnet exercise.
"""

from eth_utils import to_checksum_address

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Contract addresses with documentation
CONTRACT_ADDRESSES: dict[str, dict[str, str]] = {
    "sepolia": {
        # Uniswap Universal Router V2
        "universalRouter": "0x3a9d48ab9751398bbfa63ad67599bb04e4bdf98b",

        # Token contracts
        "weth": "0xfff9976782d46cc05630d1f6ebab18b2324d6b14",
        "uni": "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
    },
}


def get_contract_address(chain: str, name: str) -> str:
    """Look up a named contract on a chain, checksummed.

    Raises:
        ValueError: If the chain or contract is unknown.
    """
    try:
        address = CONTRACT_ADDRESSES[chain.lower()][name]
    except KeyError:
        raise ValueError(f"No '{name}' contract configured for chain '{chain}'") from None
    return to_checksum_address(address)
