"""
Shared EIP-712 constants and the ABI tuple encoding adapter
"""

import re
from typing import Any, Sequence

from eth_abi import encode
from eth_utils import keccak

from eip712_signer.utils.encoding import hex_to_bytes

# Reserved domain type, always registered
EIP712_DOMAIN_NAME = "EIP712Domain"

# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
EIP712_DOMAIN_TYPE: list[dict[str, str]] = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

# Top-level keys of a typed data payload
PAYLOAD_FIELDS: list[str] = ["domain", "types", "message", "primaryType"]

# EIP-191 version byte 0x01 (structured data)
EIP191_TYPED_DATA_PREFIX = b"\x19\x01"

# Encoded word of a null struct
ZERO_WORD = b"\x00" * 32

_FIXED_BYTES_TYPE = re.compile(r"^bytes(\d+)$")


def keccak256(data: bytes) -> bytes:
    """Keccak256 hash"""
    return keccak(data)


def _adapt_value(abi_type: str, value: Any) -> Any:
    if _FIXED_BYTES_TYPE.match(abi_type) and isinstance(value, str):
        return hex_to_bytes(value)
    return value


def encode_abi(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """ABI-encode a tuple of (type, value) columns.

    Values are handed to eth_abi unchanged, except that hex strings given
    for ``bytes<N>`` become bytes.

    Args:
        types: Elementary ABI type names
        values: Values, one per type

    Returns:
        Canonical ABI encoding of the tuple
    """
    if len(types) != len(values):
        raise ValueError(f"Got {len(types)} types for {len(values)} values")
    adapted = [_adapt_value(t, v) for t, v in zip(types, values)]
    return encode(list(types), adapted)
