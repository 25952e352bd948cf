"""
Struct type registry and dependency resolution
"""

import logging
from typing import Iterator, Optional

from eip712_signer.abi import EIP712_DOMAIN_NAME, EIP712_DOMAIN_TYPE
from eip712_signer.exceptions import DuplicateType, TypeRegistryError, UnknownType
from eip712_signer.field_types import base_type_name
from eip712_signer.types import SchemaLike, StructSchema, coerce_schema

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Append-only mapping of struct type name to its ordered field list.

    ``EIP712Domain`` is always registered. Once frozen, the registry rejects
    further registrations and can be shared freely between readers.
    """

    def __init__(self) -> None:
        self._structs: dict[str, StructSchema] = {
            EIP712_DOMAIN_NAME: coerce_schema(EIP712_DOMAIN_TYPE),
        }
        self._frozen = False

    def register(self, name: str, schema: SchemaLike) -> None:
        """Register a struct type.

        Args:
            name: Name of the type
            schema: Fields of the type

        Raises:
            DuplicateType: If name is already registered
            TypeRegistryError: If the registry is frozen
        """
        if self._frozen:
            raise TypeRegistryError(f"Registry is frozen, cannot register {name}")
        if name in self._structs:
            raise DuplicateType(name)
        self._structs[name] = coerce_schema(schema)
        logger.debug("Registered type", extra={"type_name": name})

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Optional[StructSchema]:
        """Schema of name, or None if not registered"""
        return self._structs.get(name)

    def get(self, name: str) -> StructSchema:
        """Schema of name; raises UnknownType if not registered"""
        schema = self._structs.get(name)
        if schema is None:
            raise UnknownType(name)
        return schema

    def is_struct(self, name: str) -> bool:
        return name in self._structs

    def names(self) -> list[str]:
        return list(self._structs)

    def __contains__(self, name: object) -> bool:
        return name in self._structs

    def __iter__(self) -> Iterator[str]:
        return iter(self._structs)

    def __len__(self) -> int:
        return len(self._structs)


def resolve_dependencies(
    registry: TypeRegistry,
    type_name: str,
    seen: Optional[set[str]] = None,
) -> list[str]:
    """Struct types reachable from type_name, type_name included.

    Walks field types depth first with an explicit worklist, in field
    declaration order. Array suffixes are stripped before lookup; names
    already in ``seen`` are not descended again, which terminates cycles.
    Elementary types contribute nothing.

    Args:
        registry: Registry to resolve against
        type_name: Starting type, possibly an array type
        seen: Names already visited; updated in place

    Returns:
        Struct names in discovery order
    """
    if seen is None:
        seen = set()

    result: list[str] = []
    worklist = [type_name]
    while worklist:
        current = base_type_name(worklist.pop())
        schema = registry.lookup(current)
        if current in seen or schema is None:
            continue

        seen.add(current)
        result.append(current)
        worklist.extend(field.type for field in reversed(schema))

    return result
