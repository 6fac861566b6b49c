# assetledger/crypto/conditions.py
"""
Ed25519 single-signature crypto-condition, text encoding as understood by the ledger.

Condition URI:    cc:<type_id hex>:<bitmask hex>:<base64url public key>:<max fulfillment length>
Fulfillment URI:  cf:<type_id hex>:<base64url(public key || signature)>

For Ed25519 the condition hash is the public key itself and the fulfillment
payload is fixed-length, so no length prefixes are involved.
"""

import binascii
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from assetledger.core.encoding import b64url_decode, b64url_encode
from assetledger.core.errors import FulfillmentDecodingError
from assetledger.core.types import ED25519_BITMASK, ED25519_TYPE_ID
from assetledger.crypto.keys import PUBLIC_KEY_LENGTH, public_bytes_from_seed

SIGNATURE_LENGTH = 64
FULFILLMENT_LENGTH = PUBLIC_KEY_LENGTH + SIGNATURE_LENGTH


@dataclass(frozen=True)
class Ed25519Proof:
    public_key: bytes
    signature: bytes


def create_condition_uri(public_key: bytes) -> str:
    """Condition URI committing to a raw 32-byte Ed25519 public key."""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise ValueError(f"Ed25519 public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}")
    return f"cc:{ED25519_TYPE_ID:x}:{ED25519_BITMASK:x}:{b64url_encode(public_key)}:{FULFILLMENT_LENGTH}"


def decode_condition_uri(uri: str) -> bytes:
    """Public key committed to by an Ed25519 condition URI."""
    parts = uri.split(":") if isinstance(uri, str) else []
    if len(parts) != 5 or parts[0] != "cc":
        raise FulfillmentDecodingError(f"Not a condition URI: {uri!r}")
    if parts[1] != f"{ED25519_TYPE_ID:x}":
        raise FulfillmentDecodingError(f"Unsupported condition type {parts[1]!r}")
    try:
        public_key = b64url_decode(parts[3])
    except (binascii.Error, ValueError) as e:
        raise FulfillmentDecodingError(f"Malformed condition hash: {e}") from e
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise FulfillmentDecodingError(f"Condition hash must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}")
    return public_key


def sign(message: bytes, seed: bytes) -> Ed25519Proof:
    """Sign `message` with a 32-byte Ed25519 seed."""
    private_key = Ed25519PrivateKey.from_private_bytes(seed)
    return Ed25519Proof(public_key=public_bytes_from_seed(seed), signature=private_key.sign(message))


def encode_fulfillment_uri(proof: Ed25519Proof) -> str:
    return f"cf:{ED25519_TYPE_ID:x}:{b64url_encode(proof.public_key + proof.signature)}"


def decode_fulfillment_uri(uri: str) -> Ed25519Proof:
    parts = uri.split(":") if isinstance(uri, str) else []
    if len(parts) != 3 or parts[0] != "cf":
        raise FulfillmentDecodingError(f"Not a fulfillment URI: {uri!r}")
    if parts[1] != f"{ED25519_TYPE_ID:x}":
        raise FulfillmentDecodingError(f"Unsupported fulfillment type {parts[1]!r}")
    try:
        payload = b64url_decode(parts[2])
    except (binascii.Error, ValueError) as e:
        raise FulfillmentDecodingError(f"Malformed fulfillment payload: {e}") from e
    if len(payload) != FULFILLMENT_LENGTH:
        raise FulfillmentDecodingError(f"Fulfillment payload must be {FULFILLMENT_LENGTH} bytes, got {len(payload)}")
    return Ed25519Proof(public_key=payload[:PUBLIC_KEY_LENGTH], signature=payload[PUBLIC_KEY_LENGTH:])


def fulfillment_condition_uri(uri: str) -> str:
    """Condition URI that a fulfillment URI satisfies."""
    return create_condition_uri(decode_fulfillment_uri(uri).public_key)


def verify_fulfillment(uri: str, message: bytes, condition_uri: Optional[str] = None) -> bool:
    """
    True iff the fulfillment's signature over `message` is valid and, when
    given, the fulfillment satisfies `condition_uri`.
    Malformed URIs raise FulfillmentDecodingError; bad signatures return False.
    """
    proof = decode_fulfillment_uri(uri)
    if condition_uri is not None and create_condition_uri(proof.public_key) != condition_uri:
        return False
    try:
        Ed25519PublicKey.from_public_bytes(proof.public_key).verify(proof.signature, message)
    except InvalidSignature:
        return False
    return True
