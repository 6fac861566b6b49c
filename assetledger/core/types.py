# assetledger/core/types.py
from dataclasses import dataclass, replace
from typing import Any, Literal, Optional, Tuple, Union

from assetledger.core.canon import canonical_json_str

Operation = Literal["CREATE", "TRANSFER"]

# Ed25519 single-signature predicate family
ED25519_TYPE_ID = 4
ED25519_BITMASK = 0x20


@dataclass(frozen=True)
class Asset:
    """Freshly minted asset carried by a CREATE transaction."""
    id: str
    data: Optional[Any] = None
    divisible: bool = False
    updatable: bool = False
    refillable: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "data": self.data,
            "divisible": self.divisible,
            "updatable": self.updatable,
            "refillable": self.refillable,
        }


@dataclass(frozen=True)
class AssetLink:
    """Back-reference to an existing asset, used by TRANSFER."""
    id: str

    def to_dict(self) -> dict:
        return {"id": self.id}


@dataclass(frozen=True)
class Metadata:
    id: str
    data: Any

    def to_dict(self) -> dict:
        return {"id": self.id, "data": self.data}


@dataclass(frozen=True)
class ConditionDetails:
    public_key: str
    type_id: int = ED25519_TYPE_ID
    bitmask: int = ED25519_BITMASK
    type: str = "fulfillment"
    signature: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "signature": self.signature,
            "type_id": self.type_id,
            "type": self.type,
            "bitmask": self.bitmask,
            "public_key": self.public_key,
        }


@dataclass(frozen=True)
class Condition:
    """Grant of future spending rights to the keys in `owners_after`."""
    owners_after: Tuple[str, ...]
    uri: str
    details: ConditionDetails
    cid: int = 0                    # positional, reassigned on assembly

    def to_dict(self) -> dict:
        return {
            "cid": self.cid,
            "owners_after": list(self.owners_after),
            "uri": self.uri,
            "details": self.details.to_dict(),
        }


@dataclass(frozen=True)
class TransactionLink:
    """Points at condition `cid` of transaction `txid`."""
    cid: int
    txid: str

    def to_dict(self) -> dict:
        return {"cid": self.cid, "txid": self.txid}


@dataclass(frozen=True)
class Fulfillment:
    """Claim against a prior condition; `fulfillment` stays None until signed."""
    owners_before: Tuple[str, ...]
    fid: int = 0                    # positional, reassigned on assembly
    input: Optional[TransactionLink] = None
    fulfillment: Optional[str] = None

    @property
    def is_signed(self) -> bool:
        return self.fulfillment is not None

    def to_dict(self) -> dict:
        return {
            "owners_before": list(self.owners_before),
            "fid": self.fid,
            "input": self.input.to_dict() if self.input is not None else None,
            "fulfillment": self.fulfillment,
        }


@dataclass(frozen=True)
class TransactionBody:
    operation: Operation
    asset: Union[Asset, AssetLink]
    conditions: Tuple[Condition, ...] = ()
    fulfillments: Tuple[Fulfillment, ...] = ()
    metadata: Optional[Metadata] = None

    def to_dict(self) -> dict:
        return {
            "operation": self.operation,
            "conditions": [c.to_dict() for c in self.conditions],
            "fulfillments": [f.to_dict() for f in self.fulfillments],
            "metadata": self.metadata.to_dict() if self.metadata is not None else None,
            "asset": self.asset.to_dict(),
        }


@dataclass(frozen=True)
class Transaction:
    """
    Envelope around a transaction body.
    `id` is sha256 over the canonical form (id removed, proofs nulled) and is
    never recomputed once assigned. Instances are immutable; signing returns a new one.
    """
    transaction: TransactionBody
    version: int = 1
    id: Optional[str] = None

    @property
    def is_signed(self) -> bool:
        return all(f.is_signed for f in self.transaction.fulfillments)

    def with_fulfillments(self, fulfillments) -> "Transaction":
        body = replace(self.transaction, fulfillments=tuple(fulfillments))
        return replace(self, transaction=body)

    def to_dict(self) -> dict:
        """Wire shape expected by the ledger API."""
        return {
            "id": self.id,
            "version": self.version,
            "transaction": self.transaction.to_dict(),
        }

    def to_json(self) -> str:
        """Canonical JSON text of the full transaction, id and proofs included."""
        return canonical_json_str(self.to_dict())

    @classmethod
    def from_dict(cls, d: dict) -> "Transaction":
        """Rebuild a typed transaction from its wire shape."""
        body = d["transaction"]
        return cls(
            id=d.get("id"),
            version=d.get("version", 1),
            transaction=TransactionBody(
                operation=body["operation"],
                asset=_asset_from_dict(body["asset"]),
                conditions=tuple(_condition_from_dict(c) for c in body.get("conditions") or []),
                fulfillments=tuple(_fulfillment_from_dict(f) for f in body.get("fulfillments") or []),
                metadata=Metadata(**body["metadata"]) if body.get("metadata") else None,
            ),
        )


def _asset_from_dict(d: dict) -> Union[Asset, AssetLink]:
    if set(d) == {"id"}:
        return AssetLink(id=d["id"])
    return Asset(
        id=d["id"],
        data=d.get("data"),
        divisible=d.get("divisible", False),
        updatable=d.get("updatable", False),
        refillable=d.get("refillable", False),
    )


def _condition_from_dict(d: dict) -> Condition:
    return Condition(
        cid=d["cid"],
        owners_after=tuple(d["owners_after"]),
        uri=d["uri"],
        details=ConditionDetails(**d["details"]),
    )


def _fulfillment_from_dict(d: dict) -> Fulfillment:
    link = d.get("input")
    return Fulfillment(
        owners_before=tuple(d["owners_before"]),
        fid=d["fid"],
        input=TransactionLink(**link) if link is not None else None,
        fulfillment=d.get("fulfillment"),
    )
