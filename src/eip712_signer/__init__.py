"""
eip712_signer - EIP-712 typed data encoding, signing and verification
"""

__version__ = "0.1.0"

from eip712_signer.abi import EIP712_DOMAIN_NAME, EIP712_DOMAIN_TYPE
from eip712_signer.config import NetworkConfig
from eip712_signer.encoder import DataEncoder, TypeEncoder
from eip712_signer.exceptions import (
    ConfigurationError,
    DuplicateType,
    EIP712Error,
    EncodingError,
    FieldMismatch,
    InvalidFieldValue,
    InvalidPayloadShape,
    MissingDomainField,
    MissingField,
    SignatureCreationError,
    SignatureError,
    TypeCountMismatch,
    TypeRegistryError,
    TypeSetMismatch,
    UnknownPrimaryType,
    UnknownType,
    UnsupportedNetworkError,
    ValidationError,
)
from eip712_signer.registry import TypeRegistry, resolve_dependencies
from eip712_signer.signers import LocalPreImageSigner, PreImageSigner, TypedDataSigner
from eip712_signer.types import (
    StructField,
    TypedDataDomain,
    TypedDataPayload,
    TypedDataSignature,
)
from eip712_signer.validator import PayloadValidator

__all__ = [
    "__version__",
    # Constants
    "EIP712_DOMAIN_NAME",
    "EIP712_DOMAIN_TYPE",
    # Types
    "StructField",
    "TypedDataDomain",
    "TypedDataPayload",
    "TypedDataSignature",
    # Core
    "TypeRegistry",
    "resolve_dependencies",
    "TypeEncoder",
    "DataEncoder",
    "PayloadValidator",
    # Signers
    "TypedDataSigner",
    "PreImageSigner",
    "LocalPreImageSigner",
    # Config
    "NetworkConfig",
    # Exceptions
    "EIP712Error",
    "TypeRegistryError",
    "DuplicateType",
    "UnknownType",
    "EncodingError",
    "MissingField",
    "InvalidFieldValue",
    "ValidationError",
    "InvalidPayloadShape",
    "TypeSetMismatch",
    "TypeCountMismatch",
    "FieldMismatch",
    "MissingDomainField",
    "UnknownPrimaryType",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "SignatureError",
    "SignatureCreationError",
]
