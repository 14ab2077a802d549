"""Transaction position references (txrefs) for confirmed transactions."""

from .checksum import Encoding
from .classifier import InputKind, classify_input_string
from .codec import DecodedTxref, decode, encode, encode_for_network, encode_testnet
from .constants import (
    BECH32_HRP_MAIN,
    BECH32_HRP_TEST,
    TXREF_MAX_LENGTH,
    MagicCode,
    Network,
    published_limits,
)
from .errors import (
    ChecksumError,
    FormatError,
    InvalidPayloadSize,
    RangeError,
    TxrefError,
    UnsupportedVariant,
    UnsupportedVersion,
)

__all__ = [
    "BECH32_HRP_MAIN",
    "BECH32_HRP_TEST",
    "TXREF_MAX_LENGTH",
    "DecodedTxref",
    "Encoding",
    "InputKind",
    "MagicCode",
    "Network",
    "classify_input_string",
    "decode",
    "encode",
    "encode_for_network",
    "encode_testnet",
    "published_limits",
    "ChecksumError",
    "FormatError",
    "InvalidPayloadSize",
    "RangeError",
    "TxrefError",
    "UnsupportedVariant",
    "UnsupportedVersion",
]
