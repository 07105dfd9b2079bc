# -*- coding: utf-8 -*-
"""Check that a spend actually unlocks a P2SH hash-lock output.

P2SH evaluation in two steps:
  1. scriptSig must be push-only; its last push is the redeemScript and
     HASH160(redeemScript) must equal the hash in the previous output.
  2. The remaining pushes followed by the redeemScript are evaluated with
     bitcoinlib's script interpreter.
"""

from __future__ import annotations

import logging

from bitcoinlib.encoding import hash160
from bitcoinlib.scripts import Script
from bitcoinlib.transactions import Transaction

from .address import p2sh_script_pubkey
from .transaction import transaction_id

_logger = logging.getLogger(__name__)


def evaluate_redeem_script(stack_items: list[bytes], redeemscript: bytes) -> bool:
    """Run ``<stack_items...> <redeemScript>`` through the script interpreter."""
    script = Script(list(stack_items) + Script.parse(redeemscript).commands)
    try:
        return bool(script.evaluate())
    except Exception as e:  # noqa: BLE001
        _logger.info("Script evaluation failed: %s", e)
        return False


def verify_p2sh_spend(spending_tx: Transaction, previous_tx: Transaction) -> bool:
    """Return True if input 0 of ``spending_tx`` satisfies ``previous_tx`` output 0."""
    if not spending_tx.inputs or not previous_tx.outputs:
        return False

    txin = spending_tx.inputs[0]
    prev_txid = transaction_id(previous_tx)
    if txin.prev_txid.hex() != prev_txid or txin.output_n_int != 0:
        _logger.info("Input does not reference %s:0", prev_txid)
        return False

    try:
        pushes = Script.parse(txin.unlocking_script).commands
    except Exception as e:  # noqa: BLE001
        _logger.info("scriptSig does not parse: %s", e)
        return False

    if not pushes or not all(isinstance(c, bytes) for c in pushes):
        _logger.info("scriptSig is not push-only")
        return False

    redeemscript = pushes[-1]
    if p2sh_script_pubkey(redeemscript) != previous_tx.outputs[0].lock_script:
        _logger.info("HASH160 of redeemScript %s does not match the output", hash160(redeemscript).hex())
        return False

    return evaluate_redeem_script(pushes[:-1], redeemscript)
