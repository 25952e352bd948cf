"""
LocalPreImageSigner - signs pre-images with an in-process private key
"""

import logging
from typing import Any

from eth_account import Account
from eth_account.messages import SignableMessage

from eip712_signer.abi import EIP191_TYPED_DATA_PREFIX
from eip712_signer.exceptions import SignatureCreationError
from eip712_signer.signers.base import PreImageSigner
from eip712_signer.types import TypedDataSignature
from eip712_signer.utils.encoding import hex_to_bytes

logger = logging.getLogger(__name__)


def signable_from_pre_image(pre_image: bytes) -> SignableMessage:
    """Split a pre-image into the EIP-191 parts eth_account hashes.

    keccak256(0x19 || version || header || body) is keccak256(pre_image).
    """
    if pre_image[:2] != EIP191_TYPED_DATA_PREFIX or len(pre_image) not in (34, 66):
        raise ValueError(f"Invalid typed data pre-image: 0x{pre_image.hex()}")
    return SignableMessage(
        version=pre_image[1:2],
        header=pre_image[2:34],
        body=pre_image[34:],
    )


def normalize_private_key(private_key: Any) -> Any:
    """Add the 0x prefix to hex string keys"""
    if isinstance(private_key, str) and not private_key.startswith("0x"):
        return "0x" + private_key
    return private_key


def sign_pre_image(private_key: Any, pre_image: bytes) -> TypedDataSignature:
    """Sign keccak256(pre_image) with a raw private key.

    r and s are rendered as 64 hex characters; v is rendered as hex without
    padding, and the wire form is ``0x`` + r + s + v.

    Raises:
        SignatureCreationError: If the key is invalid or signing fails
    """
    signable = signable_from_pre_image(pre_image)
    try:
        signed = Account.sign_message(signable, private_key=normalize_private_key(private_key))
    except Exception as e:
        raise SignatureCreationError(f"Failed to sign typed data: {e}") from e

    r = signed.r.to_bytes(32, "big").hex()
    s = signed.s.to_bytes(32, "big").hex()
    v = signed.v
    return TypedDataSignature(r=r, s=s, v=v, hex=f"0x{r}{s}{v:x}")


def signature_to_bytes(signature: str | bytes) -> bytes:
    """Decode a wire signature, tolerating a single hex digit for v"""
    if isinstance(signature, (bytes, bytearray)):
        return bytes(signature)
    body = signature[2:] if signature.startswith(("0x", "0X")) else signature
    if len(body) == 129:
        body = body[:128] + "0" + body[128:]
    return hex_to_bytes(body)


def recover_pre_image_signer(pre_image: bytes, signature: str | bytes) -> str:
    """Recover the address that signed keccak256(pre_image)"""
    signable = signable_from_pre_image(pre_image)
    return Account.recover_message(signable, signature=signature_to_bytes(signature))


class LocalPreImageSigner(PreImageSigner):
    """External signer backed by a local private key, mostly for tests and tooling"""

    def __init__(self, private_key: str) -> None:
        self._private_key = normalize_private_key(private_key)
        self._address = Account.from_key(self._private_key).address
        logger.debug("LocalPreImageSigner initialized", extra={"address": self._address})

    @classmethod
    def from_private_key(cls, private_key: str) -> "LocalPreImageSigner":
        """Create signer from private key."""
        return cls(private_key)

    def get_address(self) -> str:
        return self._address

    async def __call__(self, pre_image: bytes) -> TypedDataSignature:
        return sign_pre_image(self._private_key, pre_image)
