# -*- coding: utf-8 -*-
"""
Hash-lock redeem script construction

This module builds the scripts on both sides of a hash lock:

- The redeemScript, conceptually:

    OP_SHA256 <commitment> OP_EQUAL

- The P2SH unlocking script (scriptSig) that spends it:

    <preimage> <redeemScript>

``build_redeem_script`` embeds its argument byte-for-byte as the commitment.
``build_hashlock_redeem_script`` embeds SHA256(secret), which is the form a
spender can actually satisfy by revealing ``secret``.
"""

from __future__ import annotations

import hashlib
import logging

from bitcoinlib.config.opcodes import op
from bitcoinlib.scripts import Script

from .errors import EmptyInput, ScriptConstructionError

_logger = logging.getLogger(__name__)

# Consensus limit on a single stack element push
MAX_SCRIPT_ELEMENT_SIZE = 520


def _to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _check_push(data: bytes, what: str) -> bytes:
    if len(data) > MAX_SCRIPT_ELEMENT_SIZE:
        raise ScriptConstructionError(
            f"{what} push of {len(data)} bytes exceeds the {MAX_SCRIPT_ELEMENT_SIZE} byte element limit"
        )
    return data


def build_redeem_script(preimage: bytes | str) -> bytes:
    """Build ``OP_SHA256 <preimage> OP_EQUAL`` with the given bytes as operand.

    Strings are UTF-8 encoded. Deterministic: the same input always yields
    the same script bytes.
    """
    data = _to_bytes(preimage)
    if not data:
        raise EmptyInput("empty preImage")

    redeemscript = Script([op.op_sha256, _check_push(data, "preImage"), op.op_equal]).serialize()
    _logger.debug("redeemScript built: %s", redeemscript.hex())
    return redeemscript


def build_hashlock_redeem_script(secret: bytes | str) -> bytes:
    """Build ``OP_SHA256 <SHA256(secret)> OP_EQUAL``.

    Revealing ``secret`` in the unlocking script satisfies this script.
    """
    data = _to_bytes(secret)
    if not data:
        raise EmptyInput("empty preImage")
    return build_redeem_script(hashlib.sha256(data).digest())


def build_unlocking_script(preimage: bytes | str, redeemscript: bytes) -> bytes:
    """Return the P2SH scriptSig ``<preimage> <redeemScript>``."""
    data = _to_bytes(preimage)
    if not data:
        raise EmptyInput("empty preImage")
    if not redeemscript:
        raise EmptyInput("empty redeemScript")

    pushes = [_check_push(data, "preImage"), _check_push(bytes(redeemscript), "redeemScript")]
    unlocking_script = Script(pushes).serialize()
    _logger.debug("scriptSig built: %s", unlocking_script.hex())
    return unlocking_script
