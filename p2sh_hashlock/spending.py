# -*- coding: utf-8 -*-
"""
Spending transaction for a hash-locked P2SH output

What this module does:
- Takes the funding transaction and spends its first output (vout 0)
- Uses the caller's unlocking script (hex) verbatim as the input's scriptSig
- Pays ``previous value - fee`` to the configured destination address

It does NOT check that the unlocking script satisfies the locking script;
see ``p2sh_hashlock.verify`` for that.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bitcoinlib.transactions import Transaction

from .address import decode_hex, pay_to_address_script
from .errors import EmptyInput, EmptyUnlockBytes, InsufficientFunds
from .networks import NetworkParameters
from .transaction import finalize, new_transaction, transaction_id

_logger = logging.getLogger(__name__)

DEFAULT_DESTINATION = "mr6M79HZLa2R9r5KKJrtNK3VpqaiEQ8C2b"
DEFAULT_FEE = 1000


@dataclass(frozen=True)
class SpendConfig:
    """Destination address and fixed fee (sats) for the spend."""

    destination: str = DEFAULT_DESTINATION
    fee: int = DEFAULT_FEE

    def __post_init__(self):
        if self.fee < 0:
            raise ValueError(f"Fee must be non-negative, got {self.fee}")


def build_spending_tx(
    previous_tx: Transaction,
    locking_script_hex: str,
    unlocking_script_hex: str,
    network: NetworkParameters,
    config: SpendConfig | None = None,
) -> Transaction:
    """Build a 1-input / 1-output transaction spending ``previous_tx`` output 0.

    - Input: outpoint (txid of previous_tx, 0), scriptSig = decoded unlocking script
    - Output: previous_tx.outputs[0].value - fee to ``config.destination``
    """
    config = config or SpendConfig()

    if not unlocking_script_hex:
        raise EmptyInput("empty unlocking script")

    locking_script = decode_hex(locking_script_hex, "locking_script")
    unlocking_script = decode_hex(unlocking_script_hex, "unlocking_script")

    if len(unlocking_script) == 0:
        raise EmptyUnlockBytes("empty unlocking script bytes")

    if not previous_tx.outputs:
        raise InsufficientFunds("insufficient funds: previous transaction has no outputs")

    utxo_value = previous_tx.outputs[0].value
    send_value = utxo_value - config.fee
    if send_value < 0:
        raise InsufficientFunds(
            f"insufficient funds: output value {utxo_value} sats is less than fee {config.fee} sats"
        )

    dest_lock_script = pay_to_address_script(config.destination, network)
    prev_txid = transaction_id(previous_tx)

    tx = new_transaction(network)
    # txid in normal (big-endian) order; bitcoinlib reverses it when serializing
    tx.add_input(bytes.fromhex(prev_txid), 0, value=utxo_value, witness_type="legacy")
    tx.inputs[0].unlocking_script = unlocking_script
    tx.add_output(send_value, lock_script=dest_lock_script)
    finalize(tx)

    _logger.debug("Spending locking script: %s", locking_script.hex())
    _logger.info(
        "Spending tx %s: %d sats (utxo %d - fee %d) to %s",
        tx.txid, send_value, utxo_value, config.fee, config.destination,
    )
    return tx
