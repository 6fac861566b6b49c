# assetledger/chain/builders.py
from assetledger.core.types import Condition, ConditionDetails, Fulfillment
from assetledger.crypto.conditions import create_condition_uri
from assetledger.crypto.keys import decode_public_key


def make_ed25519_condition(public_key: str) -> Condition:
    """
    Condition granting spending rights to the holder of `public_key` (base58).
    `cid` is a placeholder; the assembler reassigns it by position.
    Raises KeyDecodingError if the key is not a 32-byte base58 value.
    """
    uri = create_condition_uri(decode_public_key(public_key))
    return Condition(
        cid=0,
        owners_after=(public_key,),
        uri=uri,
        details=ConditionDetails(public_key=public_key),
    )


def make_ed25519_fulfillment(public_key: str) -> Fulfillment:
    """
    Unsigned fulfillment slot for the previous owner `public_key`.
    `fid` and `input` are filled in on assembly, the proof on signing.
    """
    return Fulfillment(owners_before=(public_key,), fid=0, input=None, fulfillment=None)
