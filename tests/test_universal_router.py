import pytest
from eth_abi import decode
from eth_utils import to_checksum_address

from eip7702_delegation.helpers.universal_router import (
    ADDRESS_THIS,
    EXECUTE_SELECTOR,
    build_eth_to_token_swap,
    encode_execute,
    encode_v3_path,
)

WETH = "0xfff9976782d46cc05630d1f6ebab18b2324d6b14"
UNI = "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984"
ME = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
FEE_TO = "0xe49acc3b16c097ec88dc9352ce4cd57ab7e35b95"


def test_execute_selector():
    assert EXECUTE_SELECTOR.hex() == "3593564c"


def test_v3_path_layout():
    path = encode_v3_path(WETH, 100, UNI)
    assert path.hex() == WETH[2:] + "000064" + UNI[2:]


def test_swap_calldata_runs_four_commands():
    calldata = build_eth_to_token_swap(
        weth=WETH,
        token_out=UNI,
        amount_in=10_000_000_000_000,
        recipient=ME,
        fee_recipient=FEE_TO,
        deadline=1_700_000_000,
    )

    assert calldata[:4] == EXECUTE_SELECTOR
    commands, inputs, deadline = decode(['bytes', 'bytes[]', 'uint256'], calldata[4:])
    assert commands.hex() == "0b000604"
    assert len(inputs) == 4
    assert deadline == 1_700_000_000

    wrap_recipient, wrap_amount = decode(['address', 'uint256'], inputs[0])
    assert to_checksum_address(wrap_recipient) == to_checksum_address(ADDRESS_THIS)
    assert wrap_amount == 10_000_000_000_000

    _, amount_in, min_out, path, payer_is_user = decode(
        ['address', 'uint256', 'uint256', 'bytes', 'bool'], inputs[1]
    )
    assert amount_in == 10_000_000_000_000
    assert min_out == 0
    assert path == encode_v3_path(WETH, 100, UNI)
    assert payer_is_user is False

    token, fee_recipient, bips = decode(['address', 'address', 'uint256'], inputs[2])
    assert (token.lower(), fee_recipient.lower(), bips) == (UNI, FEE_TO, 25)

    token, recipient, amount_min = decode(['address', 'address', 'uint256'], inputs[3])
    assert (token.lower(), to_checksum_address(recipient), amount_min) == (UNI, ME, 0)


def test_default_deadline_is_in_the_future():
    import time

    calldata = build_eth_to_token_swap(WETH, UNI, 1, ME, FEE_TO)
    _, _, deadline = decode(['bytes', 'bytes[]', 'uint256'], calldata[4:])
    assert deadline > time.time()


@pytest.mark.parametrize("kwargs", [
    {"amount_in": 0},
    {"amount_in": -5},
    {"amount_in": 1, "fee_bips": 10_001},
])
def test_invalid_swap_parameters(kwargs):
    with pytest.raises(ValueError):
        build_eth_to_token_swap(WETH, UNI, recipient=ME, fee_recipient=FEE_TO, **kwargs)


def test_commands_and_inputs_must_match():
    with pytest.raises(ValueError):
        encode_execute(b"\x0b\x00", [b""], 0)
