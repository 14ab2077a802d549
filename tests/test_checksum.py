import pytest

from txref.checksum import Encoding, decode, encode, strip_unknown_chars
from txref.errors import FormatError


def test_encode_uses_bech32m_constant():
    # BIP-350 test vector
    assert encode("a", []) == "a1lqfn3a"


def test_decode_reports_modern_and_legacy_checksums():
    modern = decode("A1LQFN3A")
    assert modern.hrp == "a"
    assert modern.data == []
    assert modern.encoding is Encoding.BECH32M

    legacy = decode("a12uel5l")
    assert legacy.hrp == "a"
    assert legacy.encoding is Encoding.BECH32


def test_decode_returns_payload_without_checksum():
    decoded = decode("tx1rjk0uqayz9l7m9m")
    assert decoded.hrp == "tx"
    assert decoded.data == [3, 18, 22, 15, 28, 0, 29, 4, 2]
    assert not decoded.is_empty


@pytest.mark.parametrize(
    "value",
    [
        "tx1rjk0uqayz9l7m9n",  # one symbol changed
        "Tx1rjk0uqayz9l7m9m",  # mixed case
        "txrjk0uqayz9l7m9m",  # no separator
        "1rjk0uqayz9l7m9m",  # empty hrp
        "tx1m9m",  # shorter than a checksum
        "tx1rjk0uqayz9l7mbm",  # character outside the alphabet
    ],
)
def test_decode_rejects_invalid_strings(value):
    assert decode(value).is_empty


def test_encode_rejects_bad_hrp_and_symbols():
    with pytest.raises(FormatError):
        encode("", [0])
    with pytest.raises(FormatError):
        encode("a" * 84, [0])
    with pytest.raises(FormatError):
        encode("t x", [0])
    with pytest.raises(FormatError):
        encode("tx", [32])


def test_strip_unknown_chars_keeps_alphabet_and_separator():
    assert strip_unknown_chars("tx1:rjk0-uqay-z9l7-m9m") == "tx1rjk0uqayz9l7m9m"
    assert strip_unknown_chars("TX1:RJK0 UQAY") == "TX1RJK0UQAY"
    assert strip_unknown_chars("b-i.o") == ""
