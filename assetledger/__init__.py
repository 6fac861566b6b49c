# assetledger/__init__.py
"""
assetledger — build, canonically serialize, hash and sign asset ownership transactions.
CREATE mints an asset under Ed25519 conditions, TRANSFER spends those conditions
to new owners. Transaction ids are sha256 over RFC 8785 canonical JSON.
"""

import logging

from assetledger.config import TransactionConfig
from assetledger.core.types import (
    Asset,
    AssetLink,
    Condition,
    ConditionDetails,
    Fulfillment,
    Metadata,
    Transaction,
    TransactionBody,
    TransactionLink,
)
from assetledger.core.errors import (
    AssetLedgerError,
    FulfillmentDecodingError,
    KeyDecodingError,
    MissingPrivateKeyError,
)
from assetledger.crypto.keys import Keypair
from assetledger.chain.builders import make_ed25519_condition, make_ed25519_fulfillment
from assetledger.chain.transactions import (
    make_create_transaction,
    make_transaction,
    make_transfer_transaction,
    make_transfer_transaction_from_pairs,
)
from assetledger.chain.signing import sign_transaction
from assetledger.verify.verifier import TransactionVerifier, VerificationResult

__version__ = "0.1.0-dev"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Asset",
    "AssetLink",
    "AssetLedgerError",
    "Condition",
    "ConditionDetails",
    "Fulfillment",
    "FulfillmentDecodingError",
    "KeyDecodingError",
    "Keypair",
    "Metadata",
    "MissingPrivateKeyError",
    "Transaction",
    "TransactionBody",
    "TransactionConfig",
    "TransactionLink",
    "TransactionVerifier",
    "VerificationResult",
    "make_create_transaction",
    "make_ed25519_condition",
    "make_ed25519_fulfillment",
    "make_transaction",
    "make_transfer_transaction",
    "make_transfer_transaction_from_pairs",
    "sign_transaction",
]
