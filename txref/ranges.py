"""Bounds checks applied to txref fields before any bit packing."""

from __future__ import annotations

from .constants import (
    EXTENDED_MAGIC_CODES,
    MAX_BLOCK_HEIGHT,
    MAX_MAGIC_CODE,
    MAX_TRANSACTION_POSITION,
    MAX_TXO_INDEX,
)
from .errors import RangeError, UnsupportedVariant


def _check_range(name: str, value: int, maximum: int) -> None:
    if value < 0 or value > maximum:
        raise RangeError(f"{name} {value} is outside the range 0..{maximum}")


def check_block_height_range(block_height: int) -> None:
    _check_range("block height", block_height, MAX_BLOCK_HEIGHT)


def check_transaction_position_range(transaction_position: int) -> None:
    _check_range("transaction position", transaction_position, MAX_TRANSACTION_POSITION)


def check_txo_index_range(txo_index: int) -> None:
    _check_range("txo index", txo_index, MAX_TXO_INDEX)


def check_magic_code_range(magic_code: int) -> None:
    _check_range("magic code", magic_code, MAX_MAGIC_CODE)


def check_extended_magic_code(magic_code: int) -> None:
    """Reject magic codes that are not reserved for extended txrefs."""

    if magic_code not in EXTENDED_MAGIC_CODES:
        raise UnsupportedVariant(f"magic code {magic_code} does not support extended txrefs")


def check_standard_magic_code(magic_code: int) -> None:
    """Reject the extended magic codes on the standard encoding path."""

    if magic_code in EXTENDED_MAGIC_CODES:
        raise UnsupportedVariant(f"magic code {magic_code} is reserved for extended txrefs")
