# -*- coding: utf-8 -*-
"""
Hash-lock P2SH pipeline

    preimage -> redeemScript -> P2SH address -> funding tx -> spending tx

One parameterized run replaces per-network copies of the same flow: the
network is an explicit argument and the spend is an optional final stage
(it runs only when a SpendConfig is given). Any failure raises and aborts
the remaining stages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bitcoinlib.transactions import Transaction

from .address import derive_p2sh_address
from .funding import build_funding_tx
from .networks import NetworkParameters
from .redeem_script import build_hashlock_redeem_script, build_redeem_script, build_unlocking_script
from .spending import SpendConfig, build_spending_tx

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    network: NetworkParameters
    redeem_script_hex: str
    address: str
    funding_tx: Transaction
    unlocking_script_hex: str | None = None
    spending_tx: Transaction | None = None


def run_pipeline(
    preimage: bytes | str,
    amount: int,
    network: NetworkParameters,
    spend: SpendConfig | None = None,
    hash_commitment: bool = False,
) -> PipelineResult:
    """Run every stage once and return all intermediate artifacts.

    With ``hash_commitment`` the redeemScript commits to SHA256(preimage) and
    the spend unlocks it. Without it the preimage bytes themselves are the
    commitment: SHA256(preimage) never equals the preimage, so that spend is
    well-formed but can never satisfy its own output. In both cases the
    unlocking script reveals the preimage.
    """
    if hash_commitment:
        redeemscript = build_hashlock_redeem_script(preimage)
    else:
        redeemscript = build_redeem_script(preimage)
    redeem_script_hex = redeemscript.hex()

    address = derive_p2sh_address(redeem_script_hex, network)
    funding_tx = build_funding_tx(address, amount, network)

    if spend is None:
        _logger.info("Spend stage skipped")
        return PipelineResult(network, redeem_script_hex, address, funding_tx)

    unlocking_script_hex = build_unlocking_script(preimage, redeemscript).hex()
    spending_tx = build_spending_tx(funding_tx, redeem_script_hex, unlocking_script_hex, network, spend)

    return PipelineResult(
        network=network,
        redeem_script_hex=redeem_script_hex,
        address=address,
        funding_tx=funding_tx,
        unlocking_script_hex=unlocking_script_hex,
        spending_tx=spending_tx,
    )
