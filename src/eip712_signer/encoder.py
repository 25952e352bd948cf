"""
EIP-712 type and data encoders
"""

from typing import Any, Mapping

from eip712_signer.abi import (
    EIP191_TYPED_DATA_PREFIX,
    EIP712_DOMAIN_NAME,
    ZERO_WORD,
    encode_abi,
    keccak256,
)
from eip712_signer.exceptions import InvalidFieldValue, MissingField
from eip712_signer.field_types import FieldKind, FieldType, parse_field_type
from eip712_signer.registry import TypeRegistry, resolve_dependencies
from eip712_signer.utils.encoding import hex_to_bytes, to_integer

# (ABI type, value) pair ready for the ABI tuple encoder
EncodedField = tuple[str, Any]


def _as_record(value: Any) -> Mapping[str, Any]:
    if hasattr(value, "model_dump"):
        return value.model_dump(by_alias=True)
    return value


class TypeEncoder:
    """Builds canonical type signatures and their hashes"""

    def __init__(self, registry: TypeRegistry) -> None:
        self._registry = registry

    def encode_type(self, type_name: str) -> str:
        """Canonical type signature of type_name.

        The primary type comes first, followed by every struct it depends on
        sorted by name, e.g.
        ``Mail(Person from,Person to,string contents)Person(string name,address wallet)``.

        Raises:
            UnknownType: If type_name is not a registered struct
        """
        self._registry.get(type_name)
        dependencies = sorted(
            dep for dep in resolve_dependencies(self._registry, type_name) if dep != type_name
        )

        blocks = []
        for name in [type_name] + dependencies:
            fields = ",".join(f"{field.type} {field.name}" for field in self._registry.get(name))
            blocks.append(f"{name}({fields})")
        return "".join(blocks)

    def hash_type(self, type_name: str) -> bytes:
        """keccak256 of the UTF-8 type signature"""
        return keccak256(self.encode_type(type_name).encode("utf-8"))


class DataEncoder:
    """Recursively encodes struct records into ABI tuples and struct hashes"""

    def __init__(self, registry: TypeRegistry, type_encoder: TypeEncoder | None = None) -> None:
        self._registry = registry
        self._type_encoder = type_encoder or TypeEncoder(registry)
        # Classification is only stable once no more structs can be registered
        self._field_types: dict[str, FieldType] = {}
        if registry.frozen:
            self._field_types = {
                field.type: parse_field_type(field.type, registry.is_struct)
                for name in registry
                for field in registry.get(name)
            }

    def field_type(self, type_name: str) -> FieldType:
        """Parsed form of a declared type string"""
        parsed = self._field_types.get(type_name)
        if parsed is None:
            parsed = parse_field_type(type_name, self._registry.is_struct)
        return parsed

    def encode_field(self, type_name: str, value: Any) -> EncodedField:
        """Encode one field value into an (ABI type, value) pair.

        Structs, strings, dynamic bytes and arrays are reduced to a 32-byte
        word; a null struct encodes to the all-zero word. Integers are
        normalized; other elementary values pass through unchanged.
        """
        return self._encode_value(self.field_type(type_name), value)

    def _encode_value(self, field_type: FieldType, value: Any) -> EncodedField:
        kind = field_type.kind

        if kind is FieldKind.STRUCT:
            if value is None:
                return field_type.abi_type, ZERO_WORD
            return field_type.abi_type, self.hash_struct(field_type.name, value)

        if kind is FieldKind.BYTES:
            return field_type.abi_type, keccak256(hex_to_bytes(value))

        if kind is FieldKind.STRING:
            return field_type.abi_type, keccak256(value.encode("utf-8"))

        if kind is FieldKind.INTEGER:
            return field_type.abi_type, to_integer(value, field_type.name)

        if kind is FieldKind.ARRAY:
            if field_type.length is not None and len(value) != field_type.length:
                raise InvalidFieldValue(
                    field_type.name, value, f"expected {field_type.length} elements"
                )
            encoded = [self._encode_value(field_type.element, item) for item in value]
            return field_type.abi_type, keccak256(
                encode_abi([abi_type for abi_type, _ in encoded], [word for _, word in encoded])
            )

        return field_type.abi_type, value

    def encode_struct(self, type_name: str, record: Any) -> list[EncodedField]:
        """Ordered (ABI type, value) pairs of a struct: type hash, then fields.

        Raises:
            MissingField: If a declared field is absent from record (None is allowed)
        """
        record = _as_record(record)
        encoded: list[EncodedField] = [("bytes32", self._type_encoder.hash_type(type_name))]

        for field in self._registry.get(type_name):
            if field.name not in record:
                raise MissingField(type_name, field.name)
            encoded.append(self.encode_field(field.type, record[field.name]))

        return encoded

    def encode_data(self, type_name: str, record: Any) -> bytes:
        """ABI encoding of encode_struct"""
        encoded = self.encode_struct(type_name, record)
        return encode_abi([abi_type for abi_type, _ in encoded], [value for _, value in encoded])

    def hash_struct(self, type_name: str, record: Any) -> bytes:
        """keccak256 of encode_data"""
        return keccak256(self.encode_data(type_name, record))

    def encode_pre_image(self, domain: Any, primary_type: str, message: Any) -> bytes:
        """``0x1901`` + domain struct hash, + message struct hash unless the
        primary type is the domain itself.
        """
        result = EIP191_TYPED_DATA_PREFIX + self.hash_struct(EIP712_DOMAIN_NAME, domain)
        if primary_type != EIP712_DOMAIN_NAME:
            result += self.hash_struct(primary_type, message)
        return result
