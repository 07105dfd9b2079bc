#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Hash-lock P2SH demo (regtest by default)

This script:
- Builds the redeemScript  OP_SHA256 <commitment> OP_EQUAL  from a preimage
- Derives the corresponding P2SH address on the chosen network
- Builds a funding transaction paying ``--amount`` sats to that address
- Builds a spending transaction revealing the preimage, paying
  ``amount - fee`` to the destination address

Nothing is broadcast. Exits with status 1 on the first failing stage.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .networks import NetworkParameters
from .pipeline import run_pipeline
from .spending import DEFAULT_DESTINATION, DEFAULT_FEE, SpendConfig
from .verify import verify_p2sh_spend

DEFAULT_PREIMAGE = "Btrust Builders"
DEFAULT_AMOUNT = 100000


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build hash-locked P2SH funding and spending transactions")
    parser.add_argument("--preimage", default=DEFAULT_PREIMAGE, help="Secret preimage (UTF-8 string)")
    parser.add_argument("--amount", type=int, default=DEFAULT_AMOUNT, help="Funding amount in sats")
    parser.add_argument("--network", default="regtest", help="bitcoinlib network name (default: regtest)")
    parser.add_argument("--destination", default=DEFAULT_DESTINATION, help="Spend destination address")
    parser.add_argument("--fee", type=int, default=DEFAULT_FEE, help="Fixed spend fee in sats")
    parser.add_argument(
        "--hash-commitment",
        action="store_true",
        help=(
            "Commit to SHA256(preimage) instead of the raw preimage. Without this flag "
            "the spend reproduces the published test vector but is unspendable"
        ),
    )
    parser.add_argument("--no-spend", action="store_true", help="Stop after the funding transaction")
    parser.add_argument("--verify", action="store_true", help="Evaluate the spend against the funding output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=== Hash-lock P2SH Demo ===\n")

    try:
        network = NetworkParameters.from_name(args.network)
        spend = None if args.no_spend else SpendConfig(destination=args.destination, fee=args.fee)
        result = run_pipeline(
            args.preimage,
            args.amount,
            network,
            spend=spend,
            hash_commitment=args.hash_commitment,
        )
    except ValueError as e:  # HashLockError and invalid SpendConfig values
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=== Redeem Script ===")
    print(f"Network           : {result.network}")
    print(f"RedeemScript (hex): {result.redeem_script_hex}")

    print("\n=== P2SH Address ===")
    print(f"Derived Address   : {result.address}")

    print("\n=== Funding Transaction ===")
    print(f"TxID        : {result.funding_tx.txid}")
    print(f"Value       : {result.funding_tx.outputs[0].value} sats")
    print(f"Raw (hex)   : {result.funding_tx.raw_hex()}")

    if result.spending_tx is None:
        print("\n=== Demo Complete (spend skipped) ===")
        return 0

    print("\n=== Spending Transaction ===")
    print(f"scriptSig (hex): {result.unlocking_script_hex}")
    print(f"TxID           : {result.spending_tx.txid}")
    print(f"Send value     : {result.spending_tx.outputs[0].value} sats (fee {args.fee})")
    print(f"Raw (hex)      : {result.spending_tx.raw_hex()}")

    if args.verify:
        if not verify_p2sh_spend(result.spending_tx, result.funding_tx):
            print("Verification : FAILED", file=sys.stderr)
            return 1
        print("Verification : OK")

    print("\n=== Demo Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
