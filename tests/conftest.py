import logging
from unittest.mock import MagicMock

import pytest
from eth_account import Account
from web3 import Web3

from eip7702_delegation.commands.common import CommandContext
from eip7702_delegation.config.network import NetworkConfig

# Private key for testing (do not use in production)
TEST_PRIVATE_KEY = "0x0000000000000000000000000000000000000000000000000000000000000001"
SEPOLIA_CHAIN_ID = 11155111
SMART_WALLET = "0x000000009b1d0af20d8c6d0a44e162d11f9b8f00"


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    for name in ("eip7702_delegation", "tx_audit"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def account():
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def config():
    return NetworkConfig(
        rpc_url="http://localhost:8545",
        chain_id=SEPOLIA_CHAIN_ID,
        explorer_url="https://sepolia.etherscan.io",
        smart_wallet_address=Web3.to_checksum_address(SMART_WALLET),
        gas_limit=500_000,
        priority_fee_gwei=2.0,
    )


@pytest.fixture
def fake_w3():
    """Web3 stand-in answering the handful of RPC calls the sender makes."""
    w3 = MagicMock()
    w3.eth.chain_id = SEPOLIA_CHAIN_ID
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.get_block.return_value = {"baseFeePerGas": 1_000_000_000}
    w3.eth.gas_price = 3_000_000_000
    w3.eth.send_raw_transaction.return_value = b"\xab" * 32
    w3.to_wei.side_effect = Web3.to_wei
    w3.to_hex.side_effect = Web3.to_hex
    return w3


@pytest.fixture
def ctx(config, fake_w3, account):
    return CommandContext(
        config=config,
        w3=fake_w3,
        account=account,
        logger=logging.getLogger("eip7702_delegation"),
    )
