import pytest

from txref.constants import MagicCode
from txref.errors import InvalidPayloadSize, RangeError, UnsupportedVariant, UnsupportedVersion
from txref.packing import (
    TxrefFields,
    extract_txo_index,
    pack_extended,
    pack_standard,
    unpack,
)
from txref.ranges import (
    check_block_height_range,
    check_extended_magic_code,
    check_magic_code_range,
    check_transaction_position_range,
    check_txo_index_range,
)

STANDARD_PAYLOAD = [3, 18, 22, 15, 28, 0, 29, 4, 2]


def test_pack_standard_layout():
    assert pack_standard(MagicCode.BTC_MAIN, 466793, 2205) == STANDARD_PAYLOAD


def test_pack_extended_appends_txo_index():
    data = pack_extended(MagicCode.BTC_MAIN_EXTENDED, 466793, 2205, 10)
    assert data == [4] + STANDARD_PAYLOAD[1:] + [10, 0, 0]


def test_pack_extended_maximum_values():
    data = pack_extended(MagicCode.BTC_TEST_EXTENDED, 0xFFFFFF, 0x7FFF, 0x7FFF)
    assert data == [7, 30] + [31] * 10
    assert unpack(data) == TxrefFields(7, 0xFFFFFF, 0x7FFF, 0x7FFF)


def test_unpack_standard_payload():
    assert unpack(STANDARD_PAYLOAD) == TxrefFields(
        magic_code=3, block_height=466793, transaction_position=2205, txo_index=0
    )


def test_unpack_extended_payload():
    data = pack_extended(MagicCode.BTC_MAIN_EXTENDED, 1, 2, 3)
    assert unpack(data) == TxrefFields(4, 1, 2, 3)


def test_standard_payload_txo_index_is_zero():
    assert extract_txo_index(STANDARD_PAYLOAD) == 0


def test_unpack_rejects_unknown_version():
    data = list(STANDARD_PAYLOAD)
    data[1] |= 1
    with pytest.raises(UnsupportedVersion):
        unpack(data)


@pytest.mark.parametrize("size", [0, 8, 10, 11, 13])
def test_unpack_rejects_payload_sizes(size):
    with pytest.raises(InvalidPayloadSize):
        unpack([3] + [0] * (size - 1) if size else [])


def test_magic_codes_are_path_specific():
    with pytest.raises(UnsupportedVariant):
        pack_extended(MagicCode.BTC_MAIN, 0, 0, 1)
    with pytest.raises(UnsupportedVariant):
        pack_standard(MagicCode.BTC_TEST_EXTENDED, 0, 0)


def test_magic_code_out_of_range():
    with pytest.raises(RangeError):
        pack_standard(32, 0, 0)


@pytest.mark.parametrize(
    "check, maximum",
    [
        (check_block_height_range, 0xFFFFFF),
        (check_transaction_position_range, 0x7FFF),
        (check_txo_index_range, 0x7FFF),
        (check_magic_code_range, 0x1F),
    ],
)
def test_range_checks_accept_bounds_and_reject_outside(check, maximum):
    check(0)
    check(maximum)
    with pytest.raises(RangeError):
        check(maximum + 1)
    with pytest.raises(RangeError):
        check(-1)


def test_check_extended_magic_code():
    check_extended_magic_code(MagicCode.BTC_MAIN_EXTENDED)
    check_extended_magic_code(7)
    with pytest.raises(UnsupportedVariant):
        check_extended_magic_code(3)
