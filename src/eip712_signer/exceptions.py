"""
eip712_signer custom exception hierarchy
"""


class EIP712Error(Exception):
    """eip712_signer base exception"""

    pass


class TypeRegistryError(EIP712Error):
    """Type registry related error"""

    pass


class DuplicateType(TypeRegistryError):
    """Raised when a type name is registered twice"""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Type already exists: {type_name}")


class EncodingError(EIP712Error):
    """Encoding-related error"""

    pass


class MissingField(EncodingError):
    """A field declared by the schema is absent from the record"""

    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"Invalid payload: at type {type_name}, missing field {field_name}")


class InvalidFieldValue(EncodingError):
    """A field value cannot be normalized for its declared type"""

    def __init__(self, field_type: str, value: object, reason: str | None = None):
        self.field_type = field_type
        self.value = value
        super().__init__(
            f"Invalid value {value!r} for type {field_type}" + (f": {reason}" if reason else "")
        )


class ValidationError(EIP712Error):
    """Payload validation error"""

    pass


class InvalidPayloadShape(ValidationError):
    """Payload does not have exactly the recognized top-level keys"""

    def __init__(self, keys: list[str], expected: list[str]):
        self.keys = keys
        self.expected = expected
        super().__init__(f"Invalid payload: has fields {keys}, should have {expected}")


class UnknownType(TypeRegistryError, ValidationError):
    """Type name is not registered"""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown type {type_name}")


class TypeSetMismatch(ValidationError):
    """Payload types differ from the types required by the primary type"""

    def __init__(self, got: list[str], expected: list[str]):
        self.got = got
        self.expected = expected
        super().__init__(f"Invalid types in given payload: got {got}, expect {expected}")


class TypeCountMismatch(TypeSetMismatch):
    """Payload declares a different number of types than required"""

    pass


class FieldMismatch(ValidationError):
    """A payload type declares a field unknown to, or typed differently from, the registry"""

    def __init__(
        self,
        type_name: str,
        field_name: str,
        got: str | None = None,
        expected: str | None = None,
    ):
        self.type_name = type_name
        self.field_name = field_name
        self.got = got
        self.expected = expected
        if expected is None:
            message = f"Error in {type_name} type: unknown field with name {field_name}"
        else:
            message = (
                f"Error in {type_name} type: mismatch in field types for {field_name}: "
                f"got {got}, expected {expected}"
            )
        super().__init__(message)


class MissingDomainField(ValidationError):
    """Domain record lacks a field of the domain schema"""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing field in domain: {field_name}")


class UnknownPrimaryType(ValidationError):
    """Primary type does not name a registered struct"""

    def __init__(self, primary_type: str):
        self.primary_type = primary_type
        super().__init__(f"Invalid primary type {primary_type}: unknown type")


class ConfigurationError(EIP712Error):
    """Configuration-related error"""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    pass


class SignatureError(EIP712Error):
    """Signature-related error"""

    pass


class SignatureCreationError(SignatureError):
    """Signature creation failed"""

    pass
