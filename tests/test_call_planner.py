import pytest
from web3 import Web3

from eip7702_delegation import Call, CallPlanner, InvalidCallError

TARGET_1 = "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA0001"
TARGET_2 = "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA0002"


def test_new_planner_is_empty():
    planner = CallPlanner()
    assert planner.calls == ()
    assert planner.total_value == 0
    assert len(planner) == 0


def test_two_calls_accumulate_in_order():
    planner = CallPlanner()
    assert planner.add(TARGET_1, 100, "0x") == 100
    assert planner.add(TARGET_2, 50, "0xBEEF") == 150

    assert planner.total_value == 150
    calls = planner.calls
    assert len(calls) == 2
    assert calls[0].target.lower() == TARGET_1.lower()
    assert calls[0].value == 100
    assert calls[0].data == b""
    assert calls[1].target.lower() == TARGET_2.lower()
    assert calls[1].data == b"\xbe\xef"


def test_total_matches_sum_of_values():
    values = [0, 1, 10**18, 2**255, 7, 0]
    planner = CallPlanner()
    for value in values:
        planner.add(TARGET_1, value, b"")
    assert planner.total_value == sum(values)
    assert planner.total_value == sum(call.value for call in planner.calls)


def test_duplicate_targets_are_kept_separately():
    planner = CallPlanner()
    planner.add(TARGET_1, 1, "0x01")
    planner.add(TARGET_1, 1, "0x01")
    assert len(planner.calls) == 2
    assert planner.calls[0] == planner.calls[1]


def test_calls_are_normalized():
    planner = CallPlanner()
    planner.add(TARGET_1.lower(), 5, bytearray(b"\x01\x02"))
    call = planner.calls[0]
    assert call.target == Web3.to_checksum_address(TARGET_1)
    assert call.target != TARGET_1.lower()
    assert call.data == b"\x01\x02"
    assert isinstance(call.data, bytes)


def test_bytes_and_hex_without_prefix_are_accepted():
    planner = CallPlanner()
    planner.add(TARGET_1, 0, "deadbeef")
    planner.add(TARGET_1, 0, b"\xde\xad\xbe\xef")
    assert planner.calls[0].data == planner.calls[1].data


def test_negative_value_is_rejected_without_mutation():
    planner = CallPlanner()
    with pytest.raises(InvalidCallError):
        planner.add(TARGET_1, -1, "0x")
    assert planner.total_value == 0
    assert planner.calls == ()


@pytest.mark.parametrize("target", [
    "",
    None,
    "0x",
    "0x1234",
    "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA00011",
    "0xZZZZAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA0001",
    # mixed case with a broken checksum
    "0xaAaAaAaaAaAaAaaAaAAAAAAAAaaaAaAaAaaA0001",
])
def test_malformed_target_is_rejected_without_mutation(target):
    planner = CallPlanner()
    planner.add(TARGET_2, 10, "0x")
    before = (planner.calls, planner.total_value)

    with pytest.raises(InvalidCallError):
        planner.add(target, 1, "0x")

    assert (planner.calls, planner.total_value) == before


def test_mistyped_checksum_is_not_silently_corrected():
    planner = CallPlanner()
    good = Web3.to_checksum_address(TARGET_1)
    # flip the case of the first letter in the body
    idx = next(i for i, ch in enumerate(good) if i > 1 and ch.isalpha())
    bad = good[:idx] + good[idx].swapcase() + good[idx + 1:]

    with pytest.raises(InvalidCallError, match="checksum"):
        planner.add(bad, 1, "0x")
    assert planner.calls == ()

    planner.add(good, 1, "0x")
    planner.add(good.lower(), 1, "0x")
    planner.add("0x" + good[2:].upper(), 1, "0x")
    assert {call.target for call in planner.calls} == {good}


def test_value_above_uint256_is_rejected():
    planner = CallPlanner()
    planner.add(TARGET_1, 2**256 - 1, "0x")
    with pytest.raises(InvalidCallError):
        planner.add(TARGET_2, 2**256, "0x")
    assert planner.total_value == 2**256 - 1
    assert len(planner) == 1


def test_total_overflowing_uint256_is_rejected_without_mutation():
    planner = CallPlanner()
    planner.add(TARGET_1, 2**255, "0x")
    with pytest.raises(InvalidCallError, match="overflow"):
        planner.add(TARGET_2, 2**255, "0x")
    assert planner.total_value == 2**255
    assert len(planner.calls) == 1


@pytest.mark.parametrize("value", [1.5, "100", None, True])
def test_non_integer_value_is_rejected(value):
    planner = CallPlanner()
    with pytest.raises(InvalidCallError):
        planner.add(TARGET_1, value, "0x")
    assert planner.total_value == 0


@pytest.mark.parametrize("data", ["0xabc", "0xzz", "not hex", 12])
def test_malformed_data_is_rejected(data):
    planner = CallPlanner()
    with pytest.raises(InvalidCallError):
        planner.add(TARGET_1, 1, data)
    assert planner.calls == ()


def test_invalid_call_error_is_a_value_error():
    with pytest.raises(ValueError):
        CallPlanner().add("nope", 0, "0x")


def test_reads_are_idempotent():
    planner = CallPlanner()
    planner.add(TARGET_1, 3, "0x00")
    assert planner.calls == planner.calls
    assert planner.total_value == planner.total_value == 3


def test_calls_snapshot_cannot_mutate_planner():
    planner = CallPlanner()
    planner.add(TARGET_1, 3, "0x00")
    snapshot = planner.calls

    with pytest.raises(AttributeError):
        snapshot.append(Call(TARGET_2, 1, b""))
    with pytest.raises(AttributeError):
        snapshot[0].value = 1000

    planner.add(TARGET_2, 4, "0x")
    assert len(snapshot) == 1
    assert len(planner.calls) == 2
