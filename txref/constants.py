"""Fixed values shared by the txref encoder, decoder, and classifier.

Magic codes identify both the network and whether the payload carries a TXO
index. They are kept in a single closed table so the main/test and
standard/extended axes cannot drift apart.
"""

from __future__ import annotations

from enum import Enum, IntEnum

MAX_BLOCK_HEIGHT = 0xFFFFFF  # 24 bits
MAX_TRANSACTION_POSITION = 0x7FFF  # 15 bits
MAX_TXO_INDEX = 0x7FFF  # 15 bits
MAX_MAGIC_CODE = 0x1F  # one symbol

DATA_SIZE = 9
DATA_EXTENDED_SIZE = 12

# Checksum codec limits.
MAX_HRP_LENGTH = 83
CHECKSUM_LENGTH = 6
BECH32_SEPARATOR = "1"

COLON = ":"
HYPHEN = "-"
GROUP_SIZE = 4

BECH32_HRP_MAIN = "tx"
BECH32_HRP_TEST = "txtest"


class Network(Enum):
    MAIN = "main"
    TEST = "test"

    @property
    def hrp(self) -> str:
        return BECH32_HRP_MAIN if self is Network.MAIN else BECH32_HRP_TEST


class MagicCode(IntEnum):
    """The four reserved magic codes and their reverse lookup."""

    BTC_MAIN = 0x3
    BTC_MAIN_EXTENDED = 0x4
    BTC_TEST = 0x6
    BTC_TEST_EXTENDED = 0x7

    @property
    def network(self) -> Network:
        return _MAGIC_TABLE[self][0]

    @property
    def extended(self) -> bool:
        return _MAGIC_TABLE[self][1]

    @classmethod
    def for_network(cls, network: Network, extended: bool) -> "MagicCode":
        for magic, entry in _MAGIC_TABLE.items():
            if entry == (network, extended):
                return magic
        raise KeyError((network, extended))  # pragma: no cover - table is total

    @classmethod
    def lookup(cls, value: int) -> "MagicCode | None":
        """Return the table entry for ``value`` or ``None`` when unreserved."""

        try:
            return cls(value)
        except ValueError:
            return None


_MAGIC_TABLE: dict[MagicCode, tuple[Network, bool]] = {
    MagicCode.BTC_MAIN: (Network.MAIN, False),
    MagicCode.BTC_MAIN_EXTENDED: (Network.MAIN, True),
    MagicCode.BTC_TEST: (Network.TEST, False),
    MagicCode.BTC_TEST_EXTENDED: (Network.TEST, True),
}

EXTENDED_MAGIC_CODES = frozenset(magic for magic in MagicCode if magic.extended)

# First data symbol of a reference whose HRP was dropped, keyed to the HRP
# that must be restored. These are the alphabet characters of the magic codes.
HRP_SIGILS: dict[str, str] = {
    "r": BECH32_HRP_MAIN,
    "y": BECH32_HRP_MAIN,
    "x": BECH32_HRP_TEST,
    "8": BECH32_HRP_TEST,
}

# Lengths of unformatted references, separators stripped.
TXREF_STRING_MIN_LENGTH = len(BECH32_HRP_MAIN) + 1 + DATA_SIZE + CHECKSUM_LENGTH  # 18
TXREF_STRING_NO_HRP_MIN_LENGTH = DATA_SIZE + CHECKSUM_LENGTH  # 15
TXREF_EXT_STRING_MIN_LENGTH = len(BECH32_HRP_MAIN) + 1 + DATA_EXTENDED_SIZE + CHECKSUM_LENGTH  # 21
TXREF_EXT_STRING_NO_HRP_MIN_LENGTH = DATA_EXTENDED_SIZE + CHECKSUM_LENGTH  # 18
TXREF_STRING_MIN_LENGTH_TESTNET = len(BECH32_HRP_TEST) + 1 + DATA_SIZE + CHECKSUM_LENGTH  # 22
TXREF_EXT_STRING_MIN_LENGTH_TESTNET = (
    len(BECH32_HRP_TEST) + 1 + DATA_EXTENDED_SIZE + CHECKSUM_LENGTH
)  # 25

# Longest formatted reference: extended testnet plus a colon and a hyphen
# between every group of four data symbols.
TXREF_MAX_LENGTH = (
    TXREF_EXT_STRING_MIN_LENGTH_TESTNET
    + 1
    + (TXREF_EXT_STRING_NO_HRP_MIN_LENGTH - 1) // GROUP_SIZE
)  # 30


def published_limits() -> dict[str, int]:
    """Return the numeric limits a host boundary needs to size its buffers."""

    return {
        "max_length": TXREF_MAX_LENGTH,
        "standard_length": TXREF_STRING_MIN_LENGTH,
        "standard_length_no_hrp": TXREF_STRING_NO_HRP_MIN_LENGTH,
        "standard_length_testnet": TXREF_STRING_MIN_LENGTH_TESTNET,
        "extended_length": TXREF_EXT_STRING_MIN_LENGTH,
        "extended_length_no_hrp": TXREF_EXT_STRING_NO_HRP_MIN_LENGTH,
        "extended_length_testnet": TXREF_EXT_STRING_MIN_LENGTH_TESTNET,
    }
