"""
Network configuration, domain model and logging setup tests
"""

import io
import logging

import pytest

from eip712_signer import NetworkConfig, TypedDataDomain, UnsupportedNetworkError
from eip712_signer.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


def test_get_chain_id_known_networks():
    assert NetworkConfig.get_chain_id(NetworkConfig.EVM_MAINNET) == 1
    assert NetworkConfig.get_chain_id("eip155:11155111") == 11155111
    assert NetworkConfig.get_chain_id(NetworkConfig.EVM_BASE) == 8453


def test_get_chain_id_any_eip155_reference():
    """Test unlisted eip155 networks resolve to their numeric reference"""
    assert NetworkConfig.get_chain_id("eip155:42161") == 42161


@pytest.mark.parametrize("network", ["tron:nile", "solana:mainnet", "eip155:abc", "1"])
def test_get_chain_id_unsupported(network):
    with pytest.raises(UnsupportedNetworkError):
        NetworkConfig.get_chain_id(network)


def test_domain_for_network():
    """Test domain built from a network identifier dumps with camelCase keys"""
    domain = TypedDataDomain.for_network(
        name="Ether Mail",
        version="1",
        network="eip155:1",
        verifying_contract="0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
    )

    assert domain.to_message() == {
        "name": "Ether Mail",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
    }


def test_setup_logging_is_idempotent():
    """Test repeated setup keeps a single handler on the package logger"""
    stream = io.StringIO()
    setup_logging(logging.DEBUG, stream=stream)
    logger = setup_logging(logging.DEBUG, stream=stream)

    try:
        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 1

        get_logger("tests").debug("hello")
        output = stream.getvalue()
        assert "DEBUG" in output
        assert "eip712_signer.tests" in output
        assert output.count("hello") == 1
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_get_logger_namespacing():
    assert get_logger("eip712_signer.encoder").name == "eip712_signer.encoder"
    assert get_logger("app").name == "eip712_signer.app"
