"""Encode block positions as txrefs and decode txrefs back into positions.

A txref ("transaction position reference", BIP-136) names a confirmed
transaction by its block height and its position inside that block, and
optionally one of its outputs. Encoding always writes the bech32m checksum.
Decoding also accepts the original bech32 checksum; such results carry a
``commentary`` pointing at the re-encoded, up to date string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from . import checksum
from .checksum import Encoding
from .constants import (
    BECH32_HRP_MAIN,
    BECH32_HRP_TEST,
    BECH32_SEPARATOR,
    EXTENDED_MAGIC_CODES,
    HRP_SIGILS,
    TXREF_EXT_STRING_NO_HRP_MIN_LENGTH,
    TXREF_STRING_NO_HRP_MIN_LENGTH,
    MagicCode,
    Network,
)
from .errors import ChecksumError, FormatError
from .formatting import pretty_print
from .packing import pack_extended, pack_standard, unpack

logger = logging.getLogger(__name__)

MIGRATION_URL = "https://github.com/dcdpr/libtxref#regarding-bech32-checksums"


@dataclass(frozen=True)
class DecodedTxref:
    """Everything recovered from a txref string.

    ``txref`` is the input, normalised and pretty printed; it keeps the
    input's checksum, so a legacy reference stays legacy here and the modern
    equivalent only appears in ``commentary``.
    """

    txref: str
    hrp: str
    magic_code: int
    block_height: int
    transaction_position: int
    txo_index: int
    encoding: Encoding
    commentary: str | None = None

    @property
    def network(self) -> Network | None:
        magic = MagicCode.lookup(self.magic_code)
        return magic.network if magic is not None else None

    @property
    def is_extended(self) -> bool:
        return self.magic_code in EXTENDED_MAGIC_CODES

    @property
    def is_legacy(self) -> bool:
        return self.encoding is Encoding.BECH32

    def to_dict(self) -> dict[str, Any]:
        network = self.network
        return {
            "txref": self.txref,
            "hrp": self.hrp,
            "network": network.value if network is not None else None,
            "magic_code": self.magic_code,
            "block_height": self.block_height,
            "transaction_position": self.transaction_position,
            "txo_index": self.txo_index,
            "encoding": self.encoding.value,
            "commentary": self.commentary,
        }


def _txref_encode(hrp: str, magic_code: int, block_height: int, transaction_position: int) -> str:
    data = pack_standard(magic_code, block_height, transaction_position)
    return pretty_print(checksum.encode(hrp, data), len(hrp))


def _txref_ext_encode(
    hrp: str, magic_code: int, block_height: int, transaction_position: int, txo_index: int
) -> str:
    data = pack_extended(magic_code, block_height, transaction_position, txo_index)
    return pretty_print(checksum.encode(hrp, data), len(hrp))


def encode_for_network(
    network: Network,
    block_height: int,
    transaction_position: int,
    txo_index: int = 0,
    force_extended: bool = False,
    hrp: str | None = None,
) -> str:
    """Encode a txref for ``network``.

    An extended txref is produced when ``txo_index`` is non-zero or
    ``force_extended`` is set. ``hrp`` defaults to the network's canonical
    prefix and may only use alphabet characters, as decoding strips the rest.
    """

    hrp = network.hrp if hrp is None else hrp
    if checksum.strip_unknown_chars(hrp) != hrp:
        raise FormatError(f"HRP {hrp!r} contains characters outside the txref alphabet")
    extended = txo_index != 0 or force_extended
    magic_code = MagicCode.for_network(network, extended)
    logger.debug(
        "Encoding %s txref on %s network with magic code %d",
        "extended" if extended else "standard",
        network.value,
        magic_code,
    )
    if extended:
        return _txref_ext_encode(hrp, magic_code, block_height, transaction_position, txo_index)
    return _txref_encode(hrp, magic_code, block_height, transaction_position)


def encode(
    block_height: int,
    transaction_position: int,
    txo_index: int = 0,
    force_extended: bool = False,
    hrp: str = BECH32_HRP_MAIN,
) -> str:
    """Return the mainnet txref for a confirmed transaction (or one of its outputs)."""

    return encode_for_network(
        Network.MAIN, block_height, transaction_position, txo_index, force_extended, hrp
    )


def encode_testnet(
    block_height: int,
    transaction_position: int,
    txo_index: int = 0,
    force_extended: bool = False,
    hrp: str = BECH32_HRP_TEST,
) -> str:
    """Return the testnet txref for a confirmed transaction (or one of its outputs)."""

    return encode_for_network(
        Network.TEST, block_height, transaction_position, txo_index, force_extended, hrp
    )


def add_hrp_if_needed(txref: str) -> str:
    """Prepend the canonical HRP to a txref that lost it.

    Some transports cannot carry the ``1`` separator, so a txref may arrive
    as its data part alone. That is recognised by its length together with
    its first symbol, which is the magic code. ``txref`` must already be
    stripped of unknown characters.
    """

    if len(txref) not in (TXREF_STRING_NO_HRP_MIN_LENGTH, TXREF_EXT_STRING_NO_HRP_MIN_LENGTH):
        return txref
    hrp = HRP_SIGILS.get(txref[0].lower())
    if hrp is None:
        return txref
    if txref.isupper():
        hrp = hrp.upper()
    return hrp + BECH32_SEPARATOR + txref


def _migration_commentary(result: DecodedTxref) -> str:
    if result.magic_code in EXTENDED_MAGIC_CODES:
        updated = _txref_ext_encode(
            result.hrp,
            result.magic_code,
            result.block_height,
            result.transaction_position,
            result.txo_index,
        )
    else:
        updated = _txref_encode(
            result.hrp, result.magic_code, result.block_height, result.transaction_position
        )
    return (
        f"The txref {result.txref} uses an old encoding scheme and should be updated to "
        f"{updated} See {MIGRATION_URL} for more information."
    )


def decode(txref: str) -> DecodedTxref:
    """Decode a txref, with or without separators or its HRP."""

    clean = add_hrp_if_needed(checksum.strip_unknown_chars(txref))
    decoded = checksum.decode(clean)
    if decoded.is_empty:
        raise ChecksumError("checksum is invalid")

    fields = unpack(decoded.data)
    result = DecodedTxref(
        txref=pretty_print(clean, len(decoded.hrp)),
        hrp=decoded.hrp,
        magic_code=fields.magic_code,
        block_height=fields.block_height,
        transaction_position=fields.transaction_position,
        txo_index=fields.txo_index,
        encoding=decoded.encoding,
    )
    logger.debug("Decoded %s with %s checksum", result.txref, decoded.encoding.value)

    if decoded.encoding is Encoding.BECH32:
        logger.warning("txref %s uses the legacy bech32 checksum", result.txref)
        result = replace(result, commentary=_migration_commentary(result))
    return result
