"""Display formatting for raw checksummed txref strings."""

from __future__ import annotations

from .constants import COLON, GROUP_SIZE, HYPHEN, MAX_HRP_LENGTH
from .errors import FormatError


def add_group_separators(
    raw: str,
    prefix_length: int,
    separator_offset: int = GROUP_SIZE,
    separator: str = HYPHEN,
) -> str:
    """Insert ``separator`` after every ``separator_offset`` characters past a prefix.

    The first ``prefix_length`` characters are copied untouched. No separator is
    appended after a final group, even when it is full.
    """

    if separator_offset < 1:
        raise FormatError("separator_offset must be > 0")
    if len(raw) < 2:
        raise FormatError("Can't add separator characters to strings with length < 2")
    if len(raw) == prefix_length:
        return raw
    if len(raw) < prefix_length:
        raise FormatError("prefix length can't be greater than input length")

    body = raw[prefix_length:]
    groups = [body[i : i + separator_offset] for i in range(0, len(body), separator_offset)]
    return raw[:prefix_length] + separator.join(groups)


def pretty_print(plain: str, hrp_length: int) -> str:
    """Return ``plain`` with a colon after the HRP and hyphens every four symbols.

    ``hrp_length`` excludes the checksum codec's ``1`` separator, which stays
    in place ahead of the colon: ``tx1rjk0uqayz9l7m9m`` becomes
    ``tx1:rjk0-uqay-z9l7-m9m``.
    """

    if hrp_length > MAX_HRP_LENGTH:
        raise FormatError(f"HRP must be less than {MAX_HRP_LENGTH + 1} characters long")
    if len(plain) < 2:
        raise FormatError("Can't add separator characters to strings with length < 2")

    prefix_length = hrp_length + 1
    with_colon = plain[:prefix_length] + COLON + plain[prefix_length:]
    return add_group_separators(with_colon, prefix_length + 1)
