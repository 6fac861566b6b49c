# assetledger/verify/verifier.py
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from assetledger.core.canon import serialize_transaction
from assetledger.core.encoding import b58_encode
from assetledger.core.errors import FulfillmentDecodingError
from assetledger.core.types import Transaction
from assetledger.crypto.conditions import decode_fulfillment_uri, fulfillment_condition_uri, verify_fulfillment
from assetledger.crypto.hashing import transaction_hash

logger = logging.getLogger(__name__)


@dataclass
class VerificationFailure:
    index: int
    message: str
    category: str = "general"  # e.g. "id", "index", "signature", "condition"


@dataclass
class VerificationResult:
    is_valid: bool
    message: str = ""
    failures: List[VerificationFailure] = None

    def __post_init__(self):
        if self.failures is None:
            self.failures = []

    @property
    def first_failure(self) -> Optional[VerificationFailure]:
        return self.failures[0] if self.failures else None

    def fail(self, index: int, message: str, category: str) -> None:
        self.failures.append(VerificationFailure(index, message, category))
        self.is_valid = False

    def __bool__(self):
        return self.is_valid

    def __str__(self):
        if self.is_valid:
            return "Transaction is valid"
        lines = [f"Transaction rejected ({len(self.failures)} issues):"]
        for f in self.failures:
            lines.append(f"  - [{f.index}] {f.category}: {f.message}")
        return "\n".join(lines)


class TransactionVerifier:
    """
    Offline checks for an assembled or signed transaction.
    Bad signatures are reported as failures, never raised.
    """

    def __init__(self, spent_transactions: Iterable[Transaction] = ()):
        """
        spent_transactions: transactions whose conditions may be spent by the
        transactions being verified. TRANSFER inputs pointing elsewhere are
        only checked for signature validity.
        """
        self.spent: Dict[str, Transaction] = {tx.id: tx for tx in spent_transactions}

    def verify(self, tx: Transaction, require_signatures: bool = True) -> VerificationResult:
        result = VerificationResult(True)
        body = tx.transaction

        # 1. Content id
        expected_id = transaction_hash(tx)
        if tx.id != expected_id:
            result.fail(-1, f"id mismatch: expected {expected_id}, got {tx.id}", "id")

        # 2. Positional indices
        for i, condition in enumerate(body.conditions):
            if condition.cid != i:
                result.fail(i, f"cid mismatch: expected {i}, got {condition.cid}", "index")
        for i, fulfillment in enumerate(body.fulfillments):
            if fulfillment.fid != i:
                result.fail(i, f"fid mismatch: expected {i}, got {fulfillment.fid}", "index")

        # 3. Proofs
        message = serialize_transaction(tx)
        for i, fulfillment in enumerate(body.fulfillments):
            if fulfillment.fulfillment is None:
                if require_signatures:
                    result.fail(i, "Missing fulfillment proof", "signature")
                continue

            try:
                proof = decode_fulfillment_uri(fulfillment.fulfillment)
            except FulfillmentDecodingError as e:
                result.fail(i, f"Malformed fulfillment: {e}", "signature")
                continue

            if b58_encode(proof.public_key) not in fulfillment.owners_before:
                result.fail(i, "Proof key is not among owners_before", "signature")
            if not verify_fulfillment(fulfillment.fulfillment, message):
                result.fail(i, "Invalid signature", "signature")

            # 4. Spent condition, when the spent transaction is known
            link = fulfillment.input
            if link is None or link.txid not in self.spent:
                continue
            spent_conditions = self.spent[link.txid].transaction.conditions
            if not 0 <= link.cid < len(spent_conditions):
                result.fail(i, f"Spent transaction {link.txid} has no condition {link.cid}", "condition")
            elif spent_conditions[link.cid].uri != fulfillment_condition_uri(fulfillment.fulfillment):
                result.fail(i, f"Fulfillment does not satisfy condition {link.cid} of {link.txid}", "condition")

        if result.is_valid:
            result.message = "Valid transaction"
        else:
            result.message = f"Failed with {len(result.failures)} issues"
            logger.warning("Transaction %s failed verification: %s", tx.id, result.message)
        return result
