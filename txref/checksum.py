"""Checksummed string codec used underneath txrefs.

The ``bech32`` package supplies the BIP-173 primitives (alphabet, polymod
and HRP expansion). Txrefs are always
written with the BIP-350 "bech32m" constant, but strings carrying the original
checksum still decode so callers can migrate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from bech32 import CHARSET, bech32_hrp_expand, bech32_polymod

from .constants import BECH32_SEPARATOR, CHECKSUM_LENGTH, MAX_HRP_LENGTH
from .errors import FormatError

BECH32_CONST = 1
BECH32M_CONST = 0x2BC830A3

_CHARSET_WITH_SEPARATOR = frozenset(CHARSET + CHARSET.upper() + BECH32_SEPARATOR)


class Encoding(Enum):
    """Checksum variant detected on decode."""

    BECH32 = "bech32"  # legacy
    BECH32M = "bech32m"


@dataclass(frozen=True)
class DecodedChecksum:
    """Result of :func:`decode`; empty ``hrp`` and ``data`` signal failure."""

    hrp: str = ""
    data: list[int] = field(default_factory=list)
    encoding: Encoding | None = None

    @property
    def is_empty(self) -> bool:
        return not self.hrp and not self.data


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise FormatError("HRP must not be empty")
    if len(hrp) > MAX_HRP_LENGTH:
        raise FormatError(f"HRP must be less than {MAX_HRP_LENGTH + 1} characters long")
    if any(ord(char) < 33 or ord(char) > 126 for char in hrp):
        raise FormatError(f"HRP contains characters outside printable ASCII: {hrp!r}")


def _create_checksum(hrp: str, data: Sequence[int]) -> list[int]:
    values = bech32_hrp_expand(hrp) + list(data)
    polymod = bech32_polymod(values + [0] * CHECKSUM_LENGTH) ^ BECH32M_CONST
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def encode(hrp: str, data: Sequence[int]) -> str:
    """Return ``hrp`` and ``data`` as a string with a bech32m checksum."""

    _check_hrp(hrp)
    if any(value < 0 or value > 31 for value in data):
        raise FormatError("data values must be 5-bit symbols")
    hrp = hrp.lower()
    combined = list(data) + _create_checksum(hrp, data)
    return hrp + BECH32_SEPARATOR + "".join(CHARSET[value] for value in combined)


def decode(bech: str) -> DecodedChecksum:
    """Validate a checksummed string and split it into HRP and data symbols.

    Returns an empty :class:`DecodedChecksum` when the string is malformed or
    its checksum matches neither variant.
    """

    if any(ord(char) < 33 or ord(char) > 126 for char in bech):
        return DecodedChecksum()
    if bech.lower() != bech and bech.upper() != bech:
        return DecodedChecksum()
    bech = bech.lower()
    pos = bech.rfind(BECH32_SEPARATOR)
    if pos < 1 or pos > MAX_HRP_LENGTH or pos + CHECKSUM_LENGTH + 1 > len(bech):
        return DecodedChecksum()
    if not all(char in CHARSET for char in bech[pos + 1 :]):
        return DecodedChecksum()

    hrp = bech[:pos]
    data = [CHARSET.find(char) for char in bech[pos + 1 :]]
    constant = bech32_polymod(bech32_hrp_expand(hrp) + data)
    if constant == BECH32_CONST:
        encoding = Encoding.BECH32
    elif constant == BECH32M_CONST:
        encoding = Encoding.BECH32M
    else:
        return DecodedChecksum()
    return DecodedChecksum(hrp=hrp, data=data[:-CHECKSUM_LENGTH], encoding=encoding)


def strip_unknown_chars(value: str) -> str:
    """Drop every character that is neither in the alphabet nor the separator."""

    return "".join(char for char in value if char in _CHARSET_WITH_SEPARATOR)
