"""
Pre-image signer base interface
"""

from abc import ABC, abstractmethod

from eip712_signer.types import TypedDataSignature


class PreImageSigner(ABC):
    """
    Abstract base class for external signers.

    An external signer receives the unhashed EIP-712 pre-image
    (``0x1901`` + domain hash [+ message hash]) and is solely responsible
    for hashing and signing it.
    """

    @abstractmethod
    def get_address(self) -> str:
        """Get the signer's account address"""
        pass

    @abstractmethod
    async def __call__(self, pre_image: bytes) -> TypedDataSignature:
        """
        Sign a typed data pre-image.

        Args:
            pre_image: 34 or 66 raw bytes

        Returns:
            Signature of keccak256(pre_image)
        """
        pass
