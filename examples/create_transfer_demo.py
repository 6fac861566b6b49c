# examples/create_transfer_demo.py
# Run with: python examples/create_transfer_demo.py
#
# Mints an asset for alice, transfers it to bob, and shows tamper detection.

import json
from dataclasses import replace

from assetledger import (
    Keypair,
    TransactionVerifier,
    make_create_transaction,
    make_ed25519_condition,
    make_ed25519_fulfillment,
    make_transfer_transaction,
    sign_transaction,
)


if __name__ == "__main__":
    alice = Keypair.generate()
    bob = Keypair.generate()

    # CREATE: alice mints and keeps ownership
    create = make_create_transaction(
        {"msg": "hello"},
        metadata={"note": "first mint"},
        conditions=[make_ed25519_condition(alice.public_key)],
        fulfillments=[make_ed25519_fulfillment(alice.public_key)],
    )
    create = sign_transaction(create, alice.private_key)

    print("\n[CREATE]")
    print(json.dumps(create.to_dict(), indent=2))

    # TRANSFER: alice hands the asset to bob
    transfer = make_transfer_transaction(
        create,
        conditions=[make_ed25519_condition(bob.public_key)],
        fulfillments=[make_ed25519_fulfillment(alice.public_key)],
    )
    transfer = sign_transaction(transfer, alice.private_key)

    print("\n[TRANSFER]")
    print(f"  id:    {transfer.id}")
    print(f"  input: {transfer.transaction.fulfillments[0].input}")

    # Verify
    print("\n[Verification]")
    verifier = TransactionVerifier(spent_transactions=[create])
    print(f"  CREATE valid:   {verifier.verify(create).is_valid}")
    print(f"  TRANSFER valid: {verifier.verify(transfer).is_valid}")

    # Tamper detection
    print("\n[Tamper detection]")
    tampered = replace(transfer, id="00" * 32)
    print(verifier.verify(tampered))
