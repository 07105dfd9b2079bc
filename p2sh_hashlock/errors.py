# -*- coding: utf-8 -*-
"""Errors raised while building hash-locked P2SH transactions.

All errors derive from ``HashLockError`` (itself a ``ValueError``), so callers
can abort a pipeline run on the first failure with a single ``except`` clause.
"""

from __future__ import annotations


class HashLockError(ValueError):
    """Base class for every hash-lock build failure."""


class EmptyInput(HashLockError):
    """A required byte/string input (preimage, script, unlocking script) was empty."""


class DecodeError(HashLockError):
    """Hex or address decoding failed for a named input field."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"invalid hex format in {field.replace('_', ' ')}: {reason}")


class InvalidAddress(HashLockError):
    """Address could not be decoded on the given network, or has an unknown format."""


class ScriptConstructionError(HashLockError):
    """A locking script could not be built for the decoded address type."""


class InsufficientFunds(HashLockError):
    """The spend output value would be negative after the fee is deducted."""


class EmptyUnlockBytes(HashLockError):
    """The unlocking script decoded to zero bytes."""


class InvalidNetwork(HashLockError):
    """The network name is not defined in bitcoinlib's network definitions."""
