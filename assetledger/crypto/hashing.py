# assetledger/crypto/hashing.py
import hashlib
from typing import Any

from assetledger.core.canon import serialize_transaction


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def transaction_hash(tx: Any) -> str:
    """
    Content id of a transaction: hex sha256 of its canonical bytes.
    Independent of the current `id` and of any fulfillment proofs.
    """
    return sha256_hex(serialize_transaction(tx))
