"""
Signers
"""

from eip712_signer.signers.base import PreImageSigner
from eip712_signer.signers.local_signer import LocalPreImageSigner
from eip712_signer.signers.typed_data_signer import TypedDataSigner

__all__ = ["PreImageSigner", "LocalPreImageSigner", "TypedDataSigner"]
