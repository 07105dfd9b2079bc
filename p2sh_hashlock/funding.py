# -*- coding: utf-8 -*-
"""
Funding transaction: zero inputs, one output paying ``amount`` sats to an address.

The amount is not checked for being positive; callers are responsible for it.
A negative amount is a contract violation and raises ValueError.
"""

from __future__ import annotations

import logging

from bitcoinlib.transactions import Transaction

from .address import pay_to_address_script
from .networks import NetworkParameters
from .transaction import check_output_value, finalize, new_transaction

_logger = logging.getLogger(__name__)


def build_funding_tx(address: str, amount: int, network: NetworkParameters) -> Transaction:
    """Build a transaction whose single output locks ``amount`` to ``address``."""
    check_output_value(amount)
    lock_script = pay_to_address_script(address, network)

    tx = new_transaction(network)
    tx.add_output(amount, lock_script=lock_script)
    finalize(tx)

    _logger.info("Funding tx %s pays %d sats to %s", tx.txid, amount, address)
    return tx
