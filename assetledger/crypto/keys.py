# assetledger/crypto/keys.py
from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from assetledger.core.encoding import b58_decode, b58_encode
from assetledger.core.errors import KeyDecodingError

PUBLIC_KEY_LENGTH = 32
SEED_LENGTH = 32
# NaCl-style secret key: seed || public key
SECRET_KEY_LENGTH = 64


def decode_public_key(public_key: str) -> bytes:
    """base58 public key → 32 raw bytes."""
    return b58_decode(public_key, (PUBLIC_KEY_LENGTH,), key_kind="public key")


def decode_private_key(private_key: str) -> bytes:
    """
    base58 private key → 32-byte Ed25519 seed.
    Accepts a bare seed or a 64-byte seed || public key; in the latter case
    the trailing half must match the public key derived from the seed.
    """
    raw = b58_decode(private_key, (SEED_LENGTH, SECRET_KEY_LENGTH), key_kind="private key")
    seed = raw[:SEED_LENGTH]
    if len(raw) == SECRET_KEY_LENGTH and raw[SEED_LENGTH:] != public_bytes_from_seed(seed):
        raise KeyDecodingError("private key's embedded public key does not match its seed", "private key")
    return seed


def public_bytes_from_seed(seed: bytes) -> bytes:
    return Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


@dataclass(frozen=True)
class Keypair:
    """Ed25519 keypair, both halves base58 encoded as the ledger expects."""
    public_key: str
    private_key: str

    @classmethod
    def generate(cls) -> "Keypair":
        seed = Ed25519PrivateKey.generate().private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return cls(public_key=b58_encode(public_bytes_from_seed(seed)), private_key=b58_encode(seed))

    @classmethod
    def from_private_key(cls, private_key: str) -> "Keypair":
        """Rebuild the pair from a base58 private key (seed or seed || public key)."""
        seed = decode_private_key(private_key)
        return cls(public_key=b58_encode(public_bytes_from_seed(seed)), private_key=b58_encode(seed))
