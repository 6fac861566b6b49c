# tests/test_verify.py
from dataclasses import replace

import pytest

from assetledger.chain.builders import make_ed25519_condition, make_ed25519_fulfillment
from assetledger.chain.signing import sign_transaction
from assetledger.chain.transactions import make_create_transaction, make_transfer_transaction
from assetledger.core.canon import serialize_transaction
from assetledger.core.types import Transaction
from assetledger.crypto.conditions import verify_fulfillment
from assetledger.crypto.keys import Keypair
from assetledger.verify.verifier import TransactionVerifier, VerificationResult


@pytest.fixture
def alice():
    return Keypair.generate()


@pytest.fixture
def bob():
    return Keypair.generate()


def create_for(owner, data=None):
    return make_create_transaction(
        data or {"msg": "hello"},
        conditions=[make_ed25519_condition(owner.public_key)],
        fulfillments=[make_ed25519_fulfillment(owner.public_key)],
    )


def test_signed_fulfillment_verifies(alice):
    unsigned = create_for(alice)
    signed = sign_transaction(unsigned, alice.private_key)
    condition_uri = unsigned.transaction.conditions[0].uri

    assert verify_fulfillment(
        signed.transaction.fulfillments[0].fulfillment,
        serialize_transaction(signed),
        condition_uri,
    )


def test_wrong_key_is_detected_not_raised(alice, bob):
    unsigned = create_for(alice)
    signed = sign_transaction(unsigned, bob.private_key)
    condition_uri = unsigned.transaction.conditions[0].uri

    assert verify_fulfillment(
        signed.transaction.fulfillments[0].fulfillment,
        serialize_transaction(signed),
        condition_uri,
    ) is False

    result = TransactionVerifier().verify(signed)
    assert result.is_valid is False
    assert any(f.category == "signature" for f in result.failures)


def test_valid_create(alice):
    signed = sign_transaction(create_for(alice), alice.private_key)
    result = TransactionVerifier().verify(signed)
    assert result.is_valid is True
    assert bool(result)
    assert len(result.failures) == 0
    assert str(result) == "Transaction is valid"


def test_unsigned_transaction(alice):
    unsigned = create_for(alice)
    result = TransactionVerifier().verify(unsigned)
    assert result.is_valid is False
    assert result.first_failure.category == "signature"

    assert TransactionVerifier().verify(unsigned, require_signatures=False).is_valid


def test_tampered_asset(alice):
    signed = sign_transaction(create_for(alice), alice.private_key)
    wire = signed.to_dict()
    wire["transaction"]["asset"]["data"] = {"msg": "HACKED"}
    tampered = Transaction.from_dict(wire)

    result = TransactionVerifier().verify(tampered)
    assert result.is_valid is False
    categories = {f.category for f in result.failures}
    assert "id" in categories
    assert "signature" in categories


def test_tampered_id(alice):
    signed = sign_transaction(create_for(alice), alice.private_key)
    tampered = replace(signed, id="00" * 32)

    result = TransactionVerifier().verify(tampered)
    assert result.is_valid is False
    assert [f.category for f in result.failures] == ["id"]


def test_wrong_index(alice):
    signed = sign_transaction(create_for(alice), alice.private_key)
    wire = signed.to_dict()
    wire["transaction"]["conditions"][0]["cid"] = 5
    result = TransactionVerifier().verify(Transaction.from_dict(wire))
    assert result.is_valid is False
    assert any(f.category == "index" for f in result.failures)


def test_malformed_proof(alice):
    signed = sign_transaction(create_for(alice), alice.private_key)
    tampered = signed.with_fulfillments(
        [replace(signed.transaction.fulfillments[0], fulfillment="cf:4:AAAA")]
    )
    result = TransactionVerifier().verify(tampered)
    assert result.is_valid is False
    assert "Malformed" in result.first_failure.message


def test_valid_transfer_against_spent(alice, bob):
    create = sign_transaction(create_for(alice), alice.private_key)
    transfer = make_transfer_transaction(
        create,
        conditions=[make_ed25519_condition(bob.public_key)],
        fulfillments=[make_ed25519_fulfillment(alice.public_key)],
    )
    signed = sign_transaction(transfer, alice.private_key)

    result = TransactionVerifier(spent_transactions=[create]).verify(signed)
    assert result.is_valid is True, str(result)


def test_transfer_not_satisfying_spent_condition(alice, bob):
    create = sign_transaction(create_for(alice), alice.private_key)
    # bob claims alice's output with his own key
    transfer = make_transfer_transaction(
        create,
        conditions=[make_ed25519_condition(bob.public_key)],
        fulfillments=[make_ed25519_fulfillment(bob.public_key)],
    )
    signed = sign_transaction(transfer, bob.private_key)

    assert TransactionVerifier().verify(signed).is_valid is True
    result = TransactionVerifier(spent_transactions=[create]).verify(signed)
    assert result.is_valid is False
    assert [f.category for f in result.failures] == ["condition"]


def test_transfer_to_missing_condition(alice, bob):
    create = sign_transaction(create_for(alice), alice.private_key)
    transfer = make_transfer_transaction(
        create,
        conditions=[make_ed25519_condition(bob.public_key)],
        fulfillments=[make_ed25519_fulfillment(alice.public_key), make_ed25519_fulfillment(alice.public_key)],
    )
    signed = sign_transaction(transfer, alice.private_key, alice.private_key)

    result = TransactionVerifier(spent_transactions=[create]).verify(signed)
    assert result.is_valid is False
    assert result.first_failure.index == 1
    assert "no condition 1" in result.first_failure.message


def test_result_str_lists_failures():
    result = VerificationResult(True)
    result.fail(0, "Invalid signature", "signature")
    assert result.is_valid is False
    assert str(result).startswith("Transaction rejected (1 issues):")
    assert "[0] signature: Invalid signature" in str(result)
