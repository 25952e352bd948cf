"""
Typed data payload validation
"""

import logging
from typing import Any, Mapping

from eip712_signer.abi import EIP712_DOMAIN_NAME, PAYLOAD_FIELDS
from eip712_signer.encoder import DataEncoder
from eip712_signer.exceptions import (
    FieldMismatch,
    InvalidPayloadShape,
    MissingDomainField,
    TypeCountMismatch,
    TypeSetMismatch,
    UnknownPrimaryType,
    UnknownType,
)
from eip712_signer.registry import TypeRegistry, resolve_dependencies
from eip712_signer.types import StructField

logger = logging.getLogger(__name__)


class PayloadValidator:
    """Checks a caller supplied payload against the registry.

    Every check raises at the first violation; none of them mutates the
    payload or the registry, so validation is idempotent.
    """

    def __init__(self, registry: TypeRegistry, data_encoder: DataEncoder | None = None) -> None:
        self._registry = registry
        self._data_encoder = data_encoder or DataEncoder(registry)

    def required_types(self, primary_type: str) -> list[str]:
        """Domain type plus the dependency closure of primary_type"""
        required = [EIP712_DOMAIN_NAME]
        for dep in resolve_dependencies(self._registry, primary_type):
            if dep != EIP712_DOMAIN_NAME:
                required.append(dep)
        return required

    def check_shape(self, payload: Any) -> None:
        """Payload must have exactly the domain, types, message and primaryType keys"""
        keys = list(payload) if isinstance(payload, Mapping) else []
        if len(keys) != len(PAYLOAD_FIELDS) or set(keys) != set(PAYLOAD_FIELDS):
            logger.debug("Invalid payload shape", extra={"keys": keys})
            raise InvalidPayloadShape(keys, list(PAYLOAD_FIELDS))

    def check_types(self, payload: Mapping[str, Any]) -> None:
        """Payload types must restate the registry for the primary type's closure.

        A payload type may list fewer fields than the registry, but every
        field it lists must exist there with the same declared type.
        """
        types: Mapping[str, Any] = payload["types"]
        required = self.required_types(payload["primaryType"])

        if len(types) != len(required):
            logger.debug(
                "Type count mismatch", extra={"got": list(types), "expected": required}
            )
            raise TypeCountMismatch(list(types), required)

        for type_name, claimed in types.items():
            registered = self._registry.lookup(type_name)
            if registered is None:
                logger.debug("Unknown type in payload", extra={"type_name": type_name})
                raise UnknownType(type_name)

            if type_name not in required:
                logger.debug(
                    "Type set mismatch", extra={"got": list(types), "expected": required}
                )
                raise TypeSetMismatch(list(types), required)

            registered_fields = {field.name: field.type for field in registered}
            for field in claimed:
                field = StructField.coerce(field)
                if field.name not in registered_fields:
                    raise FieldMismatch(type_name, field.name)
                if field.type != registered_fields[field.name]:
                    raise FieldMismatch(
                        type_name, field.name, field.type, registered_fields[field.name]
                    )

    def check_domain(self, payload: Mapping[str, Any]) -> None:
        """Every domain schema field must be present in payload domain"""
        domain = payload["domain"]
        if hasattr(domain, "model_dump"):
            domain = domain.model_dump(by_alias=True)

        for field in self._registry.get(EIP712_DOMAIN_NAME):
            if field.name not in domain:
                logger.debug("Missing domain field", extra={"field_name": field.name})
                raise MissingDomainField(field.name)

    def check_primary_type(self, payload: Mapping[str, Any]) -> None:
        """Primary type must be a registered struct"""
        primary_type = payload["primaryType"]
        if primary_type not in self._registry:
            logger.debug("Unknown primary type", extra={"primary_type": primary_type})
            raise UnknownPrimaryType(primary_type)

    def check(self, payload: Any) -> None:
        """Run the shape, types, domain and primary type checks in order"""
        self.check_shape(payload)
        self.check_types(payload)
        self.check_domain(payload)
        self.check_primary_type(payload)

    def validate(self, payload: Any) -> None:
        """Run every check, then a full encode pass so message errors surface.

        Raises:
            ValidationError: On the first failed check
            MissingField: If the message lacks a declared field
        """
        self.check(payload)
        self._data_encoder.encode_pre_image(
            payload["domain"], payload["primaryType"], payload["message"]
        )
