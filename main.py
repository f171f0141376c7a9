"""
API Stamp Library Usage Examples

This file demonstrates key features of the API stamp library.
"""

import json
import logging

from apistamp import (
    KeyMismatch,
    Stamper,
    StamperConfig,
    decode_stamp,
    generate_challenge,
    generate_key_pair,
    sign,
    verify,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def key_generation_example():
    """Example 1: Generate an API key pair."""
    print("\n=== Key Generation Example ===")

    pair = generate_key_pair()
    print(f"Public key:  {pair.public_key}")
    print(f"Private key: {pair.private_key[:4]}...{pair.private_key[-4:]}")
    return pair


def signing_example(pair):
    """Example 2: Sign a request body."""
    print("\n=== Signing Example ===")

    body = {"passkey": {"authenticatorName": "My Passkey", "challenge": generate_challenge()}}
    payload = json.dumps(body)

    result = sign(payload, pair.private_key, pair.public_key)
    print(f"Payload hash: {result.details.payload_hash}")
    print(f"Scheme:       {result.details.scheme}")
    print(f"DER (hex):    {result.details.signature}")
    print(f"Stamp:        {result.signature[:48]}...")

    # What a backend does with the stamp
    envelope = decode_stamp(result.signature)
    print(f"Envelope key: {envelope.public_key}")
    print(f"Verified:     {verify(payload, result.signature)}")


def mismatch_example(pair):
    """Example 3: Pairing keys from different key pairs fails."""
    print("\n=== Key Mismatch Example ===")

    other = generate_key_pair()
    try:
        sign("x", pair.private_key, other.public_key)
    except KeyMismatch as e:
        print(f"Rejected: expected {e.expected}, got {e.received}")


def configured_stamper_example(pair):
    """Example 4: Stamper configured from the environment."""
    print("\n=== Configured Stamper Example ===")

    stamper = Stamper(StamperConfig.from_env())
    print(f"Using {stamper!r}")

    first = stamper.sign("hello", pair.private_key, pair.public_key)
    second = stamper.sign("hello", pair.private_key, pair.public_key)
    print(f"Reproducible: {first.signature == second.signature}")


def main():
    """Run all examples."""
    pair = key_generation_example()
    signing_example(pair)
    mismatch_example(pair)
    configured_stamper_example(pair)


if __name__ == "__main__":
    main()
