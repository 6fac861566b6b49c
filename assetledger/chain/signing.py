# assetledger/chain/signing.py
import logging
from dataclasses import replace

from assetledger.core.canon import serialize_transaction
from assetledger.core.errors import MissingPrivateKeyError
from assetledger.core.types import Transaction
from assetledger.crypto import conditions
from assetledger.crypto.hashing import sha256_hex
from assetledger.crypto.keys import decode_private_key

logger = logging.getLogger(__name__)


def sign_transaction(transaction: Transaction, *private_keys: str) -> Transaction:
    """
    Sign every fulfillment of an unsigned transaction.

    private_keys[i] (base58) signs fulfillment i, in list order. All keys are
    decoded before anything is signed, so a missing or malformed key leaves
    no partially signed result behind. Returns a new, signed Transaction with
    the same id; the input is not modified.

    Raises:
        MissingPrivateKeyError: fewer keys than fulfillments
        KeyDecodingError: a key is not base58 or has the wrong length
        ValueError: the transaction is already signed, or its content no
            longer hashes to its id
    """
    # Identical for every slot: proofs are nulled before serializing
    message = serialize_transaction(transaction)
    expected_id = sha256_hex(message)
    if transaction.id != expected_id:
        raise ValueError(
            f"Transaction content does not match its id: id is {transaction.id}, content hashes to {expected_id}"
        )

    fulfillments = transaction.transaction.fulfillments
    if fulfillments and transaction.is_signed:
        raise ValueError(f"Transaction {transaction.id} is already signed")
    if len(private_keys) < len(fulfillments):
        raise MissingPrivateKeyError(len(private_keys), len(fulfillments), len(private_keys))

    seeds = [decode_private_key(private_keys[i]) for i in range(len(fulfillments))]

    signed = []
    for fulfillment, seed in zip(fulfillments, seeds):
        proof = conditions.sign(message, seed)
        signed.append(replace(fulfillment, fulfillment=conditions.encode_fulfillment_uri(proof)))
        logger.debug("Signed fulfillment %d of transaction %s", fulfillment.fid, transaction.id)

    return transaction.with_fulfillments(signed)
