"""
Field type classification

Each declared field type string is parsed once into a FieldType, so encoding
dispatches on a closed set of kinds instead of re-inspecting type strings.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

_ARRAY_TYPE = re.compile(r"^(?P<element>.+)\[(?P<length>\d*)\]$")
_INTEGER_TYPE = re.compile(r"^u?int(\d{0,3})$")


class FieldKind(str, Enum):
    STRUCT = "struct"
    ARRAY = "array"
    BYTES = "bytes"
    STRING = "string"
    INTEGER = "integer"
    ELEMENTARY = "elementary"


@dataclass(frozen=True)
class FieldType:
    """Parsed field type.

    ``element`` is set for arrays only; ``length`` is set for fixed-size
    arrays (``T[N]``) only.
    """

    kind: FieldKind
    name: str
    element: Optional["FieldType"] = None
    length: Optional[int] = None

    @property
    def abi_type(self) -> str:
        """ABI type of the encoded word"""
        if self.kind in (FieldKind.INTEGER, FieldKind.ELEMENTARY):
            return self.name
        return "bytes32"


def strip_array_suffix(type_name: str) -> str:
    """Strip one trailing ``[]`` (or ``[N]``); other names are returned unchanged"""
    match = _ARRAY_TYPE.match(type_name)
    return match.group("element") if match else type_name


def base_type_name(type_name: str) -> str:
    """Strip every trailing array suffix"""
    stripped = strip_array_suffix(type_name)
    while stripped != type_name:
        type_name = stripped
        stripped = strip_array_suffix(type_name)
    return type_name


def parse_field_type(type_name: str, is_struct: Callable[[str], bool]) -> FieldType:
    """Classify a declared field type.

    Args:
        type_name: Declared type, e.g. "Person[]" or "uint256"
        is_struct: Predicate telling whether a name is a registered struct

    Returns:
        Parsed FieldType
    """
    match = _ARRAY_TYPE.match(type_name)
    if match:
        length = match.group("length")
        return FieldType(
            kind=FieldKind.ARRAY,
            name=type_name,
            element=parse_field_type(match.group("element"), is_struct),
            length=int(length) if length else None,
        )
    if is_struct(type_name):
        return FieldType(FieldKind.STRUCT, type_name)
    if type_name == "bytes":
        return FieldType(FieldKind.BYTES, type_name)
    if type_name == "string":
        return FieldType(FieldKind.STRING, type_name)
    if _INTEGER_TYPE.match(type_name):
        return FieldType(FieldKind.INTEGER, type_name)
    return FieldType(FieldKind.ELEMENTARY, type_name)
