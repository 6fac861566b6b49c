# assetledger/config.py
"""
Transaction construction settings.
"""

from dataclasses import dataclass
from typing import Callable
from uuid import uuid4

DEFAULT_TX_VERSION = 1


def new_id() -> str:
    """Random identifier for assets and metadata (UUID4, 122 random bits)."""
    return str(uuid4())


@dataclass(frozen=True)
class TransactionConfig:
    """
    version: value written to the envelope's `version` field; part of the hashed content.
    id_factory: random identifier generator for asset / metadata ids.
    """
    version: int = DEFAULT_TX_VERSION
    id_factory: Callable[[], str] = new_id
