"""
Value conversion helpers shared by the encoders and the signer
"""

import operator
from typing import Any

from eth_utils import is_hexstr, to_int

from eip712_signer.exceptions import InvalidFieldValue


def to_integer(value: Any, field_type: str = "uint256") -> int:
    """Normalize a numeric field value to a Python int.

    Accepts ints (any size), objects implementing ``__index__``, decimal
    strings and ``0x``-prefixed hex strings. Equal numeric values always
    normalize to the same int, whatever form they arrive in.

    Args:
        value: Raw field value
        field_type: Declared type, used for error reporting

    Returns:
        The integer value

    Raises:
        InvalidFieldValue: If value is a bool, a float or an unparseable string
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidFieldValue(field_type, value, "expected an integer")

    if isinstance(value, str):
        text = value.strip()
        try:
            if text.lower().startswith(("0x", "-0x")):
                if text.startswith("-"):
                    return -to_int(hexstr=text[1:])
                return to_int(hexstr=text)
            return int(text, 10)
        except ValueError as e:
            raise InvalidFieldValue(field_type, value, str(e)) from e

    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidFieldValue(field_type, value, "expected an integer") from e


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """Convert bytes to hex string"""
    hex_str = bytes(data).hex()
    return f"0x{hex_str}" if prefix else hex_str


def hex_to_bytes(value: str | bytes) -> bytes:
    """Convert hex string to bytes, passing bytes through"""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not is_hexstr(value):
        raise ValueError(f"Invalid hex string: {value!r}")
    if value.startswith(("0x", "0X")):
        value = value[2:]
    if len(value) % 2:
        value = "0" + value
    return bytes.fromhex(value)
