# -*- coding: utf-8 -*-
"""bitcoinlib Transaction helpers shared by the funding and spending builders.

Transactions are legacy (non-witness), version 1, locktime 0. The txid is
computed over the legacy serialization, so the same logical transaction
always has the same txid.
"""

from __future__ import annotations

from bitcoinlib.transactions import Transaction

from .networks import NetworkParameters


def new_transaction(network: NetworkParameters) -> Transaction:
    """Create an empty legacy transaction on ``network``."""
    return Transaction(network=network.base58_network, witness_type="legacy")


def transaction_id(tx: Transaction) -> str:
    """Return the txid (big-endian hex) of the transaction's current content."""
    # signature_hash() without a sign_id hashes the legacy serialization
    return tx.signature_hash()[::-1].hex()


def finalize(tx: Transaction) -> Transaction:
    """Fix txid and size to the final serialized content."""
    tx.txid = transaction_id(tx)
    tx.size = len(tx.raw())
    return tx


def check_output_value(value: int) -> int:
    """Output values are non-negative integer sats; anything else is a contract violation."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Output value must be an integer number of sats, got {value!r}")
    if value < 0:
        raise ValueError(f"Output value must be non-negative, got {value}")
    return value
