"""
TypedDataSigner - EIP-712 encode, sign and verify facade
"""

import copy
import inspect
import logging
from typing import Any, Mapping, Union

from eip712_signer.abi import EIP712_DOMAIN_NAME, keccak256
from eip712_signer.encoder import DataEncoder, TypeEncoder
from eip712_signer.exceptions import UnknownPrimaryType
from eip712_signer.registry import TypeRegistry, resolve_dependencies
from eip712_signer.signers.local_signer import recover_pre_image_signer, sign_pre_image
from eip712_signer.types import (
    ExternalSigner,
    SchemaLike,
    TypedDataDomain,
    TypedDataPayload,
    TypedDataSignature,
)
from eip712_signer.utils.encoding import bytes_to_hex
from eip712_signer.validator import PayloadValidator

logger = logging.getLogger(__name__)


class TypedDataSigner:
    """Holds a domain and a set of struct types, and encodes, signs and
    verifies payloads against them.

    Applications usually subclass it::

        class EtherMail(TypedDataSigner):
            def __init__(self):
                super().__init__(DOMAIN, ("Mail", MAIL), ("Person", PERSON))

    The domain and types are fixed at construction; every other method is
    free of side effects and safe to call concurrently.
    """

    def __init__(
        self,
        domain: Union[TypedDataDomain, Mapping[str, Any]],
        *types: tuple[str, SchemaLike],
    ) -> None:
        if isinstance(domain, TypedDataDomain):
            domain = domain.to_message()
        self._domain: dict[str, Any] = dict(domain)

        registry = TypeRegistry()
        for name, schema in types:
            registry.register(name, schema)
        registry.freeze()
        self._registry = registry

        self._type_encoder = TypeEncoder(registry)
        self._data_encoder = DataEncoder(registry, self._type_encoder)
        self._validator = PayloadValidator(registry, self._data_encoder)
        logger.debug(
            "TypedDataSigner initialized",
            extra={"types": registry.names(), "domain_name": self._domain.get("name")},
        )

    @property
    def domain(self) -> dict[str, Any]:
        """Copy of the configured domain"""
        return copy.deepcopy(self._domain)

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def encode_type(self, type_name: str) -> str:
        return self._type_encoder.encode_type(type_name)

    def hash_type(self, type_name: str) -> bytes:
        return self._type_encoder.hash_type(type_name)

    def encode_data(self, type_name: str, record: Any) -> bytes:
        return self._data_encoder.encode_data(type_name, record)

    def hash_struct(self, type_name: str, record: Any) -> bytes:
        return self._data_encoder.hash_struct(type_name, record)

    def validate_payload(self, payload: TypedDataPayload) -> None:
        """
        Raise if payload does not match this signer's types and domain.

        Args:
            payload: Payload to validate

        Raises:
            ValidationError: On the first failed check
            MissingField: If the message lacks a declared field
        """
        self._validator.validate(payload)

    def encode_bytes(self, payload: TypedDataPayload, verify: bool = False) -> bytes:
        """Pre-image bytes: ``0x1901`` + domain hash [+ message hash].

        The payload shape is always checked; the other checks run only
        when verify is True.
        """
        if verify:
            self._validator.check(payload)
        else:
            self._validator.check_shape(payload)

        return self._data_encoder.encode_pre_image(
            payload["domain"], payload["primaryType"], payload["message"]
        )

    def encode(self, payload: TypedDataPayload, verify: bool = False) -> str:
        """
        Encode the given payload.

        Args:
            payload: Payload to encode
            verify: True if validation checks should run first

        Returns:
            0x-prefixed hex of the 34 or 66 byte pre-image
        """
        return bytes_to_hex(self.encode_bytes(payload, verify))

    def hash_payload(self, payload: TypedDataPayload, verify: bool = False) -> bytes:
        """Signing digest: keccak256 of the pre-image"""
        return keccak256(self.encode_bytes(payload, verify))

    async def sign(
        self,
        key: Union[str, bytes, ExternalSigner],
        payload: TypedDataPayload,
        verify: bool = False,
    ) -> TypedDataSignature:
        """
        Sign the given payload.

        A raw private key signs keccak256(pre-image) in process. An external
        signer is called with the unhashed pre-image bytes, awaited if it
        returns an awaitable, and its signature is returned unchanged.

        Args:
            key: Private key, or an external signer capability
            payload: Payload to sign
            verify: True if validation checks should run first

        Returns:
            Signature with r, s, v and the concatenated hex form
        """
        pre_image = self.encode_bytes(payload, verify)

        if callable(key):
            logger.debug(
                "Delegating typed data signature to external signer",
                extra={"primary_type": payload["primaryType"]},
            )
            result = key(pre_image)
            if inspect.isawaitable(result):
                result = await result
            return result

        signature = sign_pre_image(key, pre_image)
        logger.debug("Signed typed data", extra={"primary_type": payload["primaryType"]})
        return signature

    async def verify(
        self,
        payload: TypedDataPayload,
        signature: Union[str, bytes],
        verify: bool = False,
    ) -> str:
        """
        Recover the signer of a payload signature.

        Args:
            payload: Payload used to generate the signature
            signature: Signature to verify (hex wire form)
            verify: True if validation checks should run first

        Returns:
            Recovered signer address
        """
        return recover_pre_image_signer(self.encode_bytes(payload, verify), signature)

    def generate_payload(self, message: Any, primary_type: str) -> TypedDataPayload:
        """
        Build a complete payload, ready for signature (works with wallets
        implementing eth_signTypedData_v4).

        Args:
            message: Message field of the payload
            primary_type: Main type of the message

        Raises:
            UnknownPrimaryType: If primary_type is not registered
        """
        if primary_type not in self._registry:
            raise UnknownPrimaryType(primary_type)

        types: dict[str, list[dict[str, str]]] = {}
        for dep in resolve_dependencies(self._registry, primary_type):
            types[dep] = [field.model_dump() for field in self._registry.get(dep)]
        types[EIP712_DOMAIN_NAME] = [
            field.model_dump() for field in self._registry.get(EIP712_DOMAIN_NAME)
        ]

        return {
            "domain": self.domain,
            "primaryType": primary_type,
            "types": types,
            "message": message,
        }
