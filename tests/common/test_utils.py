import pytest

from eip712_signer import InvalidFieldValue
from eip712_signer.utils import bytes_to_hex, hex_to_bytes, to_integer


class _Index:
    def __init__(self, value):
        self._value = value

    def __index__(self):
        return self._value


@pytest.mark.parametrize("value", [12, "12", "0xc", "0x0C", _Index(12)])
def test_to_integer_normalizes_equal_values(value):
    """Test every accepted form of 12 normalizes to the same int"""
    assert to_integer(value) == 12


def test_to_integer_big_values():
    """Test values beyond 64 bits are kept exact"""
    assert to_integer(str(2**256 - 1)) == 2**256 - 1
    assert to_integer(hex(2**200)) == 2**200
    assert to_integer("-5", "int256") == -5
    assert to_integer("-0x10", "int256") == -16


@pytest.mark.parametrize("value", [True, 1.5, "twelve", None, [1]])
def test_to_integer_rejects_non_integers(value):
    """Test bools, floats and garbage are rejected"""
    with pytest.raises(InvalidFieldValue):
        to_integer(value)


def test_hex_helpers():
    assert bytes_to_hex(b"\x19\x01") == "0x1901"
    assert bytes_to_hex(b"\x19\x01", prefix=False) == "1901"
    assert hex_to_bytes("0x1243") == b"\x12\x43"
    assert hex_to_bytes("abc") == b"\x0a\xbc"
    assert hex_to_bytes(b"\x01") == b"\x01"
    with pytest.raises(ValueError):
        hex_to_bytes("0xzz")
