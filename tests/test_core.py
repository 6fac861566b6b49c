# tests/test_core.py
import pytest

from assetledger.config import TransactionConfig
from assetledger.core.canon import canonical_json, canonical_json_str, serialize_transaction, strip_transaction
from assetledger.core.encoding import b58_decode, b58_encode, b64url_decode, b64url_encode
from assetledger.core.errors import KeyDecodingError, MissingPrivateKeyError
from assetledger.core.types import Asset, AssetLink, Transaction


def sample_wire_tx(tx_id="ab" * 32, proof="cf:4:whatever"):
    return {
        "id": tx_id,
        "version": 1,
        "transaction": {
            "operation": "CREATE",
            "conditions": [{
                "cid": 0,
                "owners_after": ["PK1"],
                "uri": "cc:4:20:abc:96",
                "details": {
                    "signature": None,
                    "type_id": 4,
                    "type": "fulfillment",
                    "bitmask": 32,
                    "public_key": "PK1",
                },
            }],
            "fulfillments": [{
                "owners_before": ["PK1"],
                "fid": 0,
                "input": None,
                "fulfillment": proof,
            }],
            "metadata": None,
            "asset": {
                "id": "asset-1",
                "data": {"msg": "hello"},
                "divisible": False,
                "updatable": False,
                "refillable": False,
            },
        },
    }


def reorder(obj):
    """Same content, reversed key insertion order at every level."""
    if isinstance(obj, dict):
        return {k: reorder(obj[k]) for k in reversed(list(obj))}
    if isinstance(obj, list):
        return [reorder(v) for v in obj]
    return obj


def test_canonical_json_sorting():
    messy = {
        "z": 1,
        "a": "hello",
        "nested": {"b": 2, "a": 1},
    }
    canon = canonical_json_str(messy)
    assert canon == '{"a":"hello","nested":{"a":1,"b":2},"z":1}'


def test_canonical_json_literals():
    assert canonical_json({"b": [True, None], "a": 1}) == b'{"a":1,"b":[true,null]}'


def test_serialize_deterministic_across_key_order():
    tx = sample_wire_tx()
    assert serialize_transaction(tx) == serialize_transaction(reorder(tx))


def test_serialize_ignores_id_and_proofs():
    a = sample_wire_tx(tx_id="ab" * 32, proof="cf:4:one")
    b = sample_wire_tx(tx_id=None, proof=None)
    assert serialize_transaction(a) == serialize_transaction(b)

    canon = serialize_transaction(a).decode("utf-8")
    assert '"id":"' + "ab" * 32 not in canon
    assert '"fulfillment":null' in canon
    assert canon.startswith('{"transaction":')


def test_serialize_keeps_other_fields():
    a = sample_wire_tx()
    b = sample_wire_tx()
    b["transaction"]["asset"]["data"]["msg"] = "goodbye"
    assert serialize_transaction(a) != serialize_transaction(b)


def test_strip_does_not_mutate_input():
    tx = sample_wire_tx()
    stripped = strip_transaction(tx)
    stripped["transaction"]["asset"]["data"]["msg"] = "changed"

    assert tx["id"] == "ab" * 32
    assert tx["transaction"]["fulfillments"][0]["fulfillment"] == "cf:4:whatever"
    assert tx["transaction"]["asset"]["data"]["msg"] == "hello"


def test_typed_and_wire_forms_serialize_identically():
    wire = sample_wire_tx()
    typed = Transaction.from_dict(wire)
    assert serialize_transaction(typed) == serialize_transaction(wire)
    assert typed.to_dict() == wire


def test_from_dict_asset_link():
    wire = sample_wire_tx()
    wire["transaction"]["asset"] = {"id": "asset-1"}
    tx = Transaction.from_dict(wire)
    assert isinstance(tx.transaction.asset, AssetLink)
    assert tx.to_dict()["transaction"]["asset"] == {"id": "asset-1"}


def test_transaction_immutable():
    tx = Transaction.from_dict(sample_wire_tx())
    with pytest.raises(AttributeError):
        tx.id = "00" * 32


def test_asset_defaults():
    asset = Asset(id="x")
    assert asset.to_dict() == {
        "id": "x", "data": None, "divisible": False, "updatable": False, "refillable": False,
    }


def test_base64url_roundtrip():
    original = b'{"hello":"world"}'
    encoded = b64url_encode(original)
    assert b64url_decode(encoded) == original
    assert "=" not in encoded  # no padding


def test_base58_decode_rejects_invalid_characters():
    with pytest.raises(KeyDecodingError):
        b58_decode("0OIl")  # none of these are in the base58 alphabet


def test_base58_decode_rejects_wrong_length():
    with pytest.raises(KeyDecodingError, match="32 bytes"):
        b58_decode(b58_encode(b"\x01" * 31), (32,))


def test_base58_decode_rejects_empty():
    with pytest.raises(KeyDecodingError):
        b58_decode("")


def test_errors_are_value_errors():
    err = MissingPrivateKeyError(index=1, expected=2, supplied=1)
    assert isinstance(err, ValueError)
    assert err.index == 1
    assert "fulfillment 1" in str(err)


def test_config_defaults():
    config = TransactionConfig()
    assert config.version == 1
    assert len(config.id_factory()) == 36
    assert config.id_factory() != config.id_factory()

