# -*- coding: utf-8 -*-
"""Build and validate hash-locked (OP_SHA256 ... OP_EQUAL) P2SH transactions with bitcoinlib."""

from .address import decode_address, derive_p2sh_address, p2sh_script_pubkey, pay_to_address_script
from .errors import (
    DecodeError,
    EmptyInput,
    EmptyUnlockBytes,
    HashLockError,
    InsufficientFunds,
    InvalidAddress,
    InvalidNetwork,
    ScriptConstructionError,
)
from .funding import build_funding_tx
from .networks import KNOWN_NETWORKS, MAINNET, REGTEST, SIGNET, TESTNET, NetworkParameters
from .pipeline import PipelineResult, run_pipeline
from .redeem_script import (
    MAX_SCRIPT_ELEMENT_SIZE,
    build_hashlock_redeem_script,
    build_redeem_script,
    build_unlocking_script,
)
from .spending import DEFAULT_DESTINATION, DEFAULT_FEE, SpendConfig, build_spending_tx
from .transaction import check_output_value, finalize, new_transaction, transaction_id
from .verify import verify_p2sh_spend

__version__ = "0.1.0"
