from unittest.mock import patch

import pytest

from eip7702_delegation.helpers.web3_setup import get_web3_instance, load_account


@pytest.fixture
def mock_web3():
    with patch("eip7702_delegation.helpers.web3_setup.Web3") as web3_cls:
        yield web3_cls


def test_get_web3_instance_connects(mock_web3, config):
    w3 = mock_web3.return_value
    w3.is_connected.return_value = True
    w3.eth.chain_id = config.chain_id

    assert get_web3_instance(config) is w3
    mock_web3.HTTPProvider.assert_called_once_with(config.rpc_url)


def test_get_web3_instance_unreachable(mock_web3, config):
    mock_web3.return_value.is_connected.return_value = False
    with pytest.raises(ConnectionError):
        get_web3_instance(config)


def test_get_web3_instance_wrong_chain(mock_web3, config):
    w3 = mock_web3.return_value
    w3.is_connected.return_value = True
    w3.eth.chain_id = 1
    with pytest.raises(ValueError, match="expected 11155111"):
        get_web3_instance(config)


def test_load_account():
    account = load_account("0x" + "00" * 31 + "01")
    assert account.address == "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
