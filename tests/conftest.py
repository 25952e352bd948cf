"""
Pytest configuration and shared fixtures
"""

import pytest
from typed_data_vectors import (
    MAIL,
    MAIL_DOMAIN,
    MAIL_MESSAGE,
    PERSON,
    RICH_DOMAIN,
    RICH_PERSON,
    USELESS_TYPE,
    EtherMail,
    RichEtherMail,
)

from eip712_signer import EIP712_DOMAIN_TYPE


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def ether_mail():
    return EtherMail()


@pytest.fixture
def mail_payload():
    return {
        "domain": dict(MAIL_DOMAIN),
        "types": {
            "EIP712Domain": list(EIP712_DOMAIN_TYPE),
            "Person": list(PERSON),
            "Mail": list(MAIL),
        },
        "primaryType": "Mail",
        "message": MAIL_MESSAGE,
    }


@pytest.fixture
def rich_ether_mail():
    return RichEtherMail()


@pytest.fixture
def rich_message():
    return {
        "from": {
            "name": "lol",
            "wallet": "0xe4937b3fead67f09f5f15b0a1991a588f7be54ca",
            "usernames": [],
            "points": "0x1243",
            "useless_one": {"useless": True},
            "useless_two": None,
            "integer_value": 12,
        },
        "to": {
            "name": "lele",
            "wallet": "0xc7449fedabef2cf2749b7c83448fba9bc8dc273d",
            "usernames": [
                "0x0000000000000000000000000000000000000000000000000000000000000001",
                "0x1000000000000000000000000000000000000000000000000000000000000000",
            ],
            "points": "0xabbc",
            "useless_one": {"useless": True},
            "useless_two": {"useless": False},
            "integer_value": 12,
        },
        "contents": "Hello lele",
    }


@pytest.fixture
def rich_payload(rich_message):
    return {
        "domain": dict(RICH_DOMAIN),
        "message": rich_message,
        "primaryType": "Mail",
        "types": {
            "Mail": list(MAIL),
            "Person": list(RICH_PERSON),
            "UselessType": list(USELESS_TYPE),
            "EIP712Domain": list(EIP712_DOMAIN_TYPE),
        },
    }


@pytest.fixture
def mock_evm_private_key():
    """Mock EVM private key for tests"""
    return "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
