import asyncio
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from eip712_signer import TypedDataDomain, TypedDataSigner
from eip712_signer.logging_config import setup_logging
from eip712_signer.signers import LocalPreImageSigner

setup_logging(logging.DEBUG)

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

# Falls back to keccak256("cow"), the key of the EIP-712 reference example
EVM_PRIVATE_KEY = os.getenv(
    "EVM_PRIVATE_KEY", "0xc85ef7d79691fe79573b1a7064c19c1a9819ebdbd1faaab1a8ec92344438aaf4"
)
NETWORK = os.getenv("NETWORK", "eip155:1")

PERSON = [
    {"name": "name", "type": "string"},
    {"name": "wallet", "type": "address"},
]

MAIL = [
    {"name": "from", "type": "Person"},
    {"name": "to", "type": "Person"},
    {"name": "contents", "type": "string"},
]


class EtherMail(TypedDataSigner):
    def __init__(self):
        super().__init__(
            TypedDataDomain.for_network(
                name="Ether Mail",
                version="1",
                network=NETWORK,
                verifying_contract="0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
            ),
            ("Mail", MAIL),
            ("Person", PERSON),
        )


async def main():
    ether_mail = EtherMail()
    payload = ether_mail.generate_payload(
        {
            "from": {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"},
            "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
            "contents": "Hello, Bob!",
        },
        "Mail",
    )

    print(f"Type signature: {ether_mail.encode_type('Mail')}")
    print(f"Pre-image:      {ether_mail.encode(payload, verify=True)}")
    print(f"Digest:         0x{ether_mail.hash_payload(payload).hex()}")

    signature = await ether_mail.sign(EVM_PRIVATE_KEY, payload, verify=True)
    print(f"\nSignature: {signature.hex}")
    print(f"  r: {signature.r}")
    print(f"  s: {signature.s}")
    print(f"  v: {signature.v}")

    # Same signature through the external signer path
    external = LocalPreImageSigner.from_private_key(EVM_PRIVATE_KEY)
    external_signature = await ether_mail.sign(external, payload)
    assert external_signature == signature

    recovered = await ether_mail.verify(payload, signature.hex, verify=True)
    print(f"\nSigner:    {external.get_address()}")
    print(f"Recovered: {recovered}")


if __name__ == "__main__":
    asyncio.run(main())
