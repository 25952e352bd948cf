import itertools

import pytest
from eth_utils import keccak
from typed_data_vectors import MAIL, MAIL_TYPE_HASH, PERSON, RICH_PERSON, USELESS_TYPE

from eip712_signer import TypeEncoder, TypeRegistry, UnknownType


def _type_encoder(*types):
    registry = TypeRegistry()
    for name, schema in types:
        registry.register(name, schema)
    registry.freeze()
    return TypeEncoder(registry)


def test_encode_type_mail():
    """Test the canonical signature of the reference Mail type"""
    encoder = _type_encoder(("Mail", MAIL), ("Person", PERSON))

    assert encoder.encode_type("Mail") == (
        "Mail(Person from,Person to,string contents)Person(string name,address wallet)"
    )
    assert encoder.encode_type("Person") == "Person(string name,address wallet)"


def test_hash_type_mail():
    encoder = _type_encoder(("Mail", MAIL), ("Person", PERSON))

    assert encoder.hash_type("Mail").hex() == MAIL_TYPE_HASH
    assert encoder.hash_type("Person") == keccak(text="Person(string name,address wallet)")


def test_encode_type_domain():
    encoder = _type_encoder()

    assert encoder.encode_type("EIP712Domain") == (
        "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
    )


def test_encode_type_lists_each_dependency_once():
    """Test struct types used by several fields appear once, sorted after the primary type"""
    encoder = _type_encoder(
        ("Mail", MAIL), ("Person", RICH_PERSON), ("UselessType", USELESS_TYPE)
    )

    assert encoder.encode_type("Mail") == (
        "Mail(Person from,Person to,string contents)"
        "Person(string name,address wallet,bytes32[] usernames,bytes points,"
        "UselessType useless_one,UselessType useless_two,uint256 integer_value)"
        "UselessType(bool useless)"
    )


def test_encode_type_sorts_dependencies_by_name():
    """Test dependencies are sorted regardless of discovery order"""
    encoder = _type_encoder(
        ("Order", [
            {"name": "taker", "type": "Zebra"},
            {"name": "maker", "type": "Asset[]"},
        ]),
        ("Zebra", [{"name": "stripes", "type": "uint8"}]),
        ("Asset", [{"name": "token", "type": "address"}]),
    )

    assert encoder.encode_type("Order") == (
        "Order(Zebra taker,Asset[] maker)Asset(address token)Zebra(uint8 stripes)"
    )


def test_encode_type_independent_of_registration_order():
    """Test every registration order yields the same signature"""
    types = [("Mail", MAIL), ("Person", RICH_PERSON), ("UselessType", USELESS_TYPE)]

    signatures = {
        _type_encoder(*order).encode_type("Mail") for order in itertools.permutations(types)
    }

    assert len(signatures) == 1


def test_encode_type_self_reference():
    """Test a recursive type lists itself once"""
    encoder = _type_encoder(
        ("Node", [{"name": "value", "type": "uint256"}, {"name": "children", "type": "Node[]"}])
    )

    assert encoder.encode_type("Node") == "Node(uint256 value,Node[] children)"


def test_encode_type_unknown():
    encoder = _type_encoder()

    with pytest.raises(UnknownType):
        encoder.encode_type("Mail")
