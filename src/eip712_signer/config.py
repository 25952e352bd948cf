"""
Network configuration
Chain IDs used to build EIP712Domain values from network identifiers
"""

from typing import Dict

from eip712_signer.exceptions import UnsupportedNetworkError


class NetworkConfig:
    """Network configuration for chain IDs"""

    EVM_MAINNET = "eip155:1"
    EVM_SEPOLIA = "eip155:11155111"
    EVM_BSC = "eip155:56"
    EVM_BSC_TESTNET = "eip155:97"
    EVM_BASE = "eip155:8453"

    CHAIN_IDS: Dict[str, int] = {
        "eip155:1": 1,
        "eip155:11155111": 11155111,
        "eip155:56": 56,
        "eip155:97": 97,
        "eip155:8453": 8453,
    }

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """Get chain ID for network

        Any "eip155:<id>" identifier resolves to its numeric reference,
        even when it is not listed in CHAIN_IDS.

        Args:
            network: Network identifier (e.g., "eip155:1", "eip155:8453")

        Returns:
            Chain ID as integer

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        chain_id = cls.CHAIN_IDS.get(network)
        if chain_id is not None:
            return chain_id

        namespace, _, reference = network.partition(":")
        if namespace == "eip155" and reference.isdigit():
            return int(reference)

        raise UnsupportedNetworkError(f"Unsupported network: {network}")
