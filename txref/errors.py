"""Exceptions raised while encoding, decoding, or formatting txrefs."""

from __future__ import annotations


class TxrefError(ValueError):
    """Base class for every txref failure.

    ``code`` is a short, stable identifier that front ends can surface
    instead of parsing the message text.
    """

    code = "txref-error"


class RangeError(TxrefError):
    """Raised when a numeric field does not fit its bit width."""

    code = "range"


class UnsupportedVariant(TxrefError):
    """Raised when a magic code does not match the requested encoding path."""

    code = "unsupported-variant"


class UnsupportedVersion(TxrefError):
    """Raised when a decoded payload carries an unknown version bit."""

    code = "unsupported-version"


class InvalidPayloadSize(TxrefError):
    """Raised when a decoded payload is neither the standard nor extended size."""

    code = "invalid-payload-size"


class ChecksumError(TxrefError):
    """Raised when the checksum codec cannot validate a string."""

    code = "checksum"


class FormatError(TxrefError):
    """Raised when a string cannot be pretty printed or checksummed."""

    code = "format"
