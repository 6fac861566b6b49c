# assetledger/core/canon.py
import copy
from typing import Any

try:
    import jcs
except ImportError:
    raise ImportError("Please install jcs: pip install jcs")


def canonical_json(obj: Any) -> bytes:
    """
    Produce deterministic UTF-8 bytes according to RFC 8785 (JSON Canonicalization Scheme).
    Returns bytes ready for hashing or signing.
    """
    return jcs.canonicalize(obj)


def canonical_json_str(obj: Any) -> str:
    """Same as above, but returns string (mostly for debugging)."""
    return canonical_json(obj).decode("utf-8")


def strip_transaction(tx: Any) -> dict:
    """
    Deep copy of a transaction (typed object or wire dict) with the top-level
    `id` removed and every fulfillment proof set to None. These are the two
    fields whose values are derived from the canonical bytes themselves.
    """
    d = copy.deepcopy(tx.to_dict() if hasattr(tx, "to_dict") else tx)

    d.pop("id", None)
    for fulfillment in d["transaction"]["fulfillments"]:
        fulfillment["fulfillment"] = None
    return d


def serialize_transaction(tx: Any) -> bytes:
    """Canonical bytes of a transaction; the input to both hashing and signing."""
    return canonical_json(strip_transaction(tx))
