"""Pack txref fields into 5-bit symbols and back.

Layout, one 5-bit symbol per list entry::

    [0]      magic code
    [1]      bit 0: version (always 0), bits 1-4: block height bits 0-3
    [2..5]   block height bits 4-23, five bits per symbol
    [6..8]   transaction position, least significant symbol first
    [9..11]  txo index, extended payloads only

Fields are packed straight into symbols because the checksum codec consumes
5-bit values, so no regrouping from 8-bit bytes is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .constants import DATA_EXTENDED_SIZE, DATA_SIZE
from .errors import InvalidPayloadSize, UnsupportedVersion
from .ranges import (
    check_block_height_range,
    check_extended_magic_code,
    check_magic_code_range,
    check_standard_magic_code,
    check_transaction_position_range,
    check_txo_index_range,
)

VERSION = 0


@dataclass(frozen=True)
class TxrefFields:
    """Numeric content of a txref payload."""

    magic_code: int
    block_height: int
    transaction_position: int
    txo_index: int = 0


def is_standard_size(size: int) -> bool:
    return size == DATA_SIZE


def is_extended_size(size: int) -> bool:
    return size == DATA_EXTENDED_SIZE


def is_data_size_valid(size: int) -> bool:
    return is_standard_size(size) or is_extended_size(size)


def _pack_common(data: list[int], magic_code: int, block_height: int, transaction_position: int) -> None:
    data[0] = magic_code
    data[1] = VERSION & 0x1

    data[1] |= (block_height & 0xF) << 1
    data[2] = (block_height & 0x1F0) >> 4
    data[3] = (block_height & 0x3E00) >> 9
    data[4] = (block_height & 0x7C000) >> 14
    data[5] = (block_height & 0xF80000) >> 19

    data[6] = transaction_position & 0x1F
    data[7] = (transaction_position & 0x3E0) >> 5
    data[8] = (transaction_position & 0x7C00) >> 10


def pack_standard(magic_code: int, block_height: int, transaction_position: int) -> list[int]:
    """Return the 9-symbol payload for a standard txref."""

    check_block_height_range(block_height)
    check_transaction_position_range(transaction_position)
    check_magic_code_range(magic_code)
    check_standard_magic_code(magic_code)

    data = [0] * DATA_SIZE
    _pack_common(data, magic_code, block_height, transaction_position)
    return data


def pack_extended(
    magic_code: int, block_height: int, transaction_position: int, txo_index: int
) -> list[int]:
    """Return the 12-symbol payload for an extended txref."""

    check_block_height_range(block_height)
    check_transaction_position_range(transaction_position)
    check_txo_index_range(txo_index)
    check_magic_code_range(magic_code)
    check_extended_magic_code(magic_code)

    data = [0] * DATA_EXTENDED_SIZE
    _pack_common(data, magic_code, block_height, transaction_position)
    data[9] = txo_index & 0x1F
    data[10] = (txo_index & 0x3E0) >> 5
    data[11] = (txo_index & 0x7C00) >> 10
    return data


def extract_magic_code(data: Sequence[int]) -> int:
    return data[0]


def extract_version(data: Sequence[int]) -> int:
    return data[1] & 0x1


def _require_known_version(data: Sequence[int]) -> None:
    version = extract_version(data)
    if version != VERSION:
        raise UnsupportedVersion(f"Unknown txref version detected: {version}")


def extract_block_height(data: Sequence[int]) -> int:
    _require_known_version(data)
    return (data[1] >> 1) | (data[2] << 4) | (data[3] << 9) | (data[4] << 14) | (data[5] << 19)


def extract_transaction_position(data: Sequence[int]) -> int:
    _require_known_version(data)
    return data[6] | (data[7] << 5) | (data[8] << 10)


def extract_txo_index(data: Sequence[int]) -> int:
    # standard payloads have no stored txo index
    if len(data) < DATA_EXTENDED_SIZE:
        return 0
    _require_known_version(data)
    return data[9] | (data[10] << 5) | (data[11] << 10)


def unpack(data: Sequence[int]) -> TxrefFields:
    """Read every field out of a 9 or 12 symbol payload."""

    if not is_data_size_valid(len(data)):
        raise InvalidPayloadSize(f"decoded payload size {len(data)} is incorrect")
    return TxrefFields(
        magic_code=extract_magic_code(data),
        block_height=extract_block_height(data),
        transaction_position=extract_transaction_position(data),
        txo_index=extract_txo_index(data),
    )
