"""
Utility functions for eip712_signer
"""

from eip712_signer.utils.encoding import bytes_to_hex, hex_to_bytes, to_integer

__all__ = [
    "bytes_to_hex",
    "hex_to_bytes",
    "to_integer",
]
