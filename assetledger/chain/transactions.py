# assetledger/chain/transactions.py
import copy
import logging
from dataclasses import replace
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from assetledger.config import TransactionConfig
from assetledger.core.types import (
    Asset,
    AssetLink,
    Condition,
    Fulfillment,
    Metadata,
    Transaction,
    TransactionBody,
    TransactionLink,
)
from assetledger.crypto.hashing import transaction_hash

logger = logging.getLogger(__name__)

OPERATIONS = ("CREATE", "TRANSFER")


def make_transaction(
    operation: str,
    asset: Union[Asset, AssetLink],
    metadata: Optional[Any] = None,
    conditions: Iterable[Condition] = (),
    fulfillments: Iterable[Fulfillment] = (),
    config: Optional[TransactionConfig] = None,
) -> Transaction:
    """
    Assemble an unsigned transaction and assign its id.

    Conditions and fulfillments keep the given order; `cid` / `fid` are
    reassigned to their list positions. `metadata` is the raw payload and is
    wrapped with a fresh random id when not None; only None means "no
    metadata", other falsy payloads are kept. Asset and metadata payloads are
    deep-copied; the inputs are not modified.
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unsupported operation {operation!r}, expected one of {OPERATIONS}")
    config = config or TransactionConfig()

    wrapped_metadata = None
    if metadata is not None:
        wrapped_metadata = Metadata(id=config.id_factory(), data=copy.deepcopy(metadata))

    body = TransactionBody(
        operation=operation,
        asset=copy.deepcopy(asset),
        conditions=tuple(replace(c, cid=i) for i, c in enumerate(conditions)),
        fulfillments=tuple(replace(f, fid=i) for i, f in enumerate(fulfillments)),
        metadata=wrapped_metadata,
    )
    unhashed = Transaction(transaction=body, version=config.version, id=None)
    tx = replace(unhashed, id=transaction_hash(unhashed))

    logger.debug(
        "Assembled %s transaction %s (%d conditions, %d fulfillments)",
        operation, tx.id, len(body.conditions), len(body.fulfillments),
    )
    return tx


def make_create_transaction(
    asset_data: Any,
    metadata: Optional[Any] = None,
    conditions: Iterable[Condition] = (),
    fulfillments: Iterable[Fulfillment] = (),
    config: Optional[TransactionConfig] = None,
) -> Transaction:
    """
    CREATE transaction minting a new asset holding `asset_data`.
    Conditions are the owners after creation (usually the creator's own
    Ed25519 condition); fulfillments are the creator's slots to sign.
    `asset_data` is stored as given: None becomes null, other falsy values
    (0, "", False) are kept.
    """
    config = config or TransactionConfig()
    asset = Asset(id=config.id_factory(), data=asset_data)
    return make_transaction("CREATE", asset, metadata, conditions, fulfillments, config)


def _as_transaction(tx: Union[Transaction, dict]) -> Transaction:
    if isinstance(tx, dict):
        tx = Transaction.from_dict(tx)
    if tx.id is None:
        raise ValueError("Cannot spend a transaction that has no id")
    return tx


def make_transfer_transaction(
    unspent_transaction: Union[Transaction, dict],
    metadata: Optional[Any] = None,
    conditions: Iterable[Condition] = (),
    fulfillments: Sequence[Fulfillment] = (),
    config: Optional[TransactionConfig] = None,
) -> Transaction:
    """
    TRANSFER transaction moving the asset of `unspent_transaction`.

    Fulfillment i is linked to condition i of the spent transaction, so the
    caller must list fulfillments in the same order as the conditions they
    spend. The correspondence is not checked here; use
    make_transfer_transaction_from_pairs to name the conditions explicitly.
    """
    spent = _as_transaction(unspent_transaction)
    linked = [
        replace(f, input=TransactionLink(cid=i, txid=spent.id))
        for i, f in enumerate(fulfillments)
    ]
    asset_link = AssetLink(id=spent.transaction.asset.id)
    return make_transaction("TRANSFER", asset_link, metadata, conditions, linked, config)


def make_transfer_transaction_from_pairs(
    unspent_transaction: Union[Transaction, dict],
    pairs: Iterable[Tuple[Fulfillment, int]],
    metadata: Optional[Any] = None,
    conditions: Iterable[Condition] = (),
    config: Optional[TransactionConfig] = None,
) -> Transaction:
    """
    TRANSFER where each fulfillment names the `cid` it spends.
    Raises ValueError when a cid does not exist in the spent transaction or is spent twice.
    """
    spent = _as_transaction(unspent_transaction)
    known = {c.cid for c in spent.transaction.conditions}

    linked = []
    seen = set()
    for fulfillment, cid in pairs:
        if cid not in known:
            raise ValueError(f"Transaction {spent.id} has no condition {cid}")
        if cid in seen:
            raise ValueError(f"Condition {cid} of transaction {spent.id} is spent twice")
        seen.add(cid)
        linked.append(replace(fulfillment, input=TransactionLink(cid=cid, txid=spent.id)))

    asset_link = AssetLink(id=spent.transaction.asset.id)
    return make_transaction("TRANSFER", asset_link, metadata, conditions, linked, config)
