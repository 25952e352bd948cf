"""
Type definitions for EIP-712 typed data
"""

from typing import Any, Awaitable, Callable, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from eip712_signer.config import NetworkConfig


class StructField(BaseModel):
    """Field of a user defined struct type"""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str

    @classmethod
    def coerce(cls, field: Union["StructField", Mapping[str, Any]]) -> "StructField":
        """Build a StructField from a model or a ``{"name", "type"}`` mapping"""
        if isinstance(field, StructField):
            return field
        return cls(name=field["name"], type=field["type"])


# Ordered list of fields; order defines both encoding and type signature order
StructSchema = tuple[StructField, ...]

# Schemas as accepted from callers
SchemaLike = Sequence[Union[StructField, Mapping[str, Any]]]


def coerce_schema(fields: SchemaLike) -> StructSchema:
    """Normalize a caller supplied field list to a StructSchema"""
    return tuple(StructField.coerce(field) for field in fields)


class TypedDataDomain(BaseModel):
    """EIP712Domain value"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str
    chain_id: int = Field(alias="chainId")
    verifying_contract: str = Field(alias="verifyingContract")

    @classmethod
    def for_network(
        cls,
        name: str,
        version: str,
        network: str,
        verifying_contract: str,
    ) -> "TypedDataDomain":
        """Build a domain whose chain ID is resolved from a network identifier.

        Args:
            name: Application name
            version: Application version
            network: Network identifier (e.g., "eip155:1")
            verifying_contract: Verifying contract address

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        return cls(
            name=name,
            version=version,
            chainId=NetworkConfig.get_chain_id(network),
            verifyingContract=verifying_contract,
        )

    def to_message(self) -> dict[str, Any]:
        """Domain as a camelCase dict, ready to be hashed or put in a payload"""
        return self.model_dump(by_alias=True)


class TypedDataSignature(BaseModel):
    """Signature of a typed data payload"""

    model_config = ConfigDict(frozen=True)

    r: str
    s: str
    v: int
    hex: str


# Payloads are kept as plain dicts: their top-level shape is itself validated
TypedDataPayload = dict[str, Any]

# External signer capability: receives the unhashed pre-image bytes, may be sync or async
ExternalSigner = Callable[[bytes], Union[TypedDataSignature, Awaitable[TypedDataSignature]]]
