"""Guess what kind of identifier a user pasted.

Classification only looks at the shape of the input (its length once
separators are stripped, and its first characters); it never validates a
checksum. Txid and address checks run first because their lengths overlap
with the txref lengths.
"""

from __future__ import annotations

from enum import Enum

from .checksum import strip_unknown_chars
from .constants import (
    BECH32_HRP_MAIN,
    BECH32_SEPARATOR,
    TXREF_EXT_STRING_MIN_LENGTH,
    TXREF_EXT_STRING_MIN_LENGTH_TESTNET,
    TXREF_EXT_STRING_NO_HRP_MIN_LENGTH,
    TXREF_STRING_MIN_LENGTH,
    TXREF_STRING_MIN_LENGTH_TESTNET,
    TXREF_STRING_NO_HRP_MIN_LENGTH,
)

TXID_LENGTH = 64
ADDRESS_PREFIXES = frozenset("13mn2")
ADDRESS_MIN_LENGTH = 26
ADDRESS_MAX_LENGTH = 36  # exclusive


class InputKind(Enum):
    TXREF = "txref"
    TXREF_EXT = "txrefext"
    TXID = "txid"
    ADDRESS = "address"
    UNKNOWN = "unknown"


_WITH_HRP_LENGTHS: dict[int, InputKind] = {
    TXREF_STRING_MIN_LENGTH: InputKind.TXREF,
    TXREF_STRING_MIN_LENGTH_TESTNET: InputKind.TXREF,
    TXREF_EXT_STRING_MIN_LENGTH: InputKind.TXREF_EXT,
    TXREF_EXT_STRING_MIN_LENGTH_TESTNET: InputKind.TXREF_EXT,
}

_NO_HRP_LENGTHS: dict[int, InputKind] = {
    TXREF_STRING_NO_HRP_MIN_LENGTH: InputKind.TXREF,
    TXREF_EXT_STRING_NO_HRP_MIN_LENGTH: InputKind.TXREF_EXT,
}


def classify_with_hrp(value: str) -> InputKind:
    """Classify ``value`` assuming it still carries its HRP."""

    return _WITH_HRP_LENGTHS.get(len(strip_unknown_chars(value)), InputKind.UNKNOWN)


def classify_missing_hrp(value: str) -> InputKind:
    """Classify ``value`` assuming its HRP was dropped."""

    return _NO_HRP_LENGTHS.get(len(strip_unknown_chars(value)), InputKind.UNKNOWN)


def resolve_ambiguity(value: str, with_hrp: InputKind, missing_hrp: InputKind) -> InputKind:
    """Pick between the two length-based guesses.

    The only collision is a mainnet standard txref with its HRP (18 symbols)
    against an extended txref without one (also 18). A leading ``tx1`` means
    the HRP is present.
    """

    if with_hrp is not InputKind.UNKNOWN and missing_hrp is InputKind.UNKNOWN:
        return with_hrp
    if with_hrp is InputKind.UNKNOWN and missing_hrp is not InputKind.UNKNOWN:
        return missing_hrp
    if with_hrp is InputKind.TXREF and missing_hrp is InputKind.TXREF_EXT:
        if value[:3].lower() == BECH32_HRP_MAIN + BECH32_SEPARATOR:
            return InputKind.TXREF
        return InputKind.TXREF_EXT
    return InputKind.UNKNOWN


def classify_input_string(value: str) -> InputKind:
    """Return the most likely :class:`InputKind` for ``value``."""

    if not value:
        return InputKind.UNKNOWN

    if len(value) == TXID_LENGTH:
        return InputKind.TXID

    if value[0] in ADDRESS_PREFIXES and ADDRESS_MIN_LENGTH <= len(value) < ADDRESS_MAX_LENGTH:
        return InputKind.ADDRESS

    return resolve_ambiguity(value, classify_with_hrp(value), classify_missing_hrp(value))
