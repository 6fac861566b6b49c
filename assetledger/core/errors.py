# assetledger/core/errors.py
"""
Exception taxonomy. Everything subclasses ValueError so callers that already
guard with `except ValueError` keep working.
"""


class AssetLedgerError(ValueError):
    """Base class for errors raised by assetledger itself."""


class KeyDecodingError(AssetLedgerError):
    """A key string is not valid base58 or decodes to the wrong length."""

    def __init__(self, message: str, key_kind: str = "key"):
        super().__init__(message)
        self.key_kind = key_kind


class FulfillmentDecodingError(AssetLedgerError):
    """A condition or fulfillment URI could not be parsed."""


class MissingPrivateKeyError(AssetLedgerError):
    """Fewer private keys were supplied than the transaction has fulfillments."""

    def __init__(self, index: int, expected: int, supplied: int):
        super().__init__(
            f"No private key supplied for fulfillment {index}: "
            f"transaction has {expected} fulfillment(s), got {supplied} key(s)"
        )
        self.index = index
        self.expected = expected
        self.supplied = supplied
