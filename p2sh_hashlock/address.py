# -*- coding: utf-8 -*-
"""
P2SH address derivation and address -> locking script resolution

P2SH ScriptPubKey:
  OP_HASH160 <hash160(redeemscript)> OP_EQUAL

Every function takes the NetworkParameters explicitly; an address derived on
one network does not decode on another.
"""

from __future__ import annotations

import logging

from bitcoinlib.config.opcodes import op
from bitcoinlib.encoding import hash160
from bitcoinlib.keys import Address
from bitcoinlib.scripts import Script
from bitcoinlib.transactions import Output

from .errors import DecodeError, EmptyInput, InvalidAddress, ScriptConstructionError
from .networks import NetworkParameters

_logger = logging.getLogger(__name__)


def decode_hex(value: str, field: str) -> bytes:
    """Decode a hex string, raising DecodeError that names ``field`` on failure."""
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(field, str(e)) from e


def _script_bytes(redeemscript: bytes | str) -> bytes:
    if isinstance(redeemscript, str):
        if not redeemscript:
            raise EmptyInput("empty redeemScript")
        return decode_hex(redeemscript, "redeem_script")
    return bytes(redeemscript)


def p2sh_script_pubkey(redeemscript: bytes | str) -> bytes:
    """Return ``OP_HASH160 <hash160(redeemscript)> OP_EQUAL``."""
    script = _script_bytes(redeemscript)
    if not script:
        raise EmptyInput("empty redeemScript")
    return Script([op.op_hash160, hash160(script), op.op_equal]).serialize()


def derive_p2sh_address(redeemscript: bytes | str, network: NetworkParameters) -> str:
    """Derive the base58 P2SH address for a redeemScript (raw bytes or hex)."""
    script = _script_bytes(redeemscript)
    if not script:
        raise EmptyInput("empty redeemScript")

    redeem_hash = hash160(script)  # 20 bytes
    addr = Address(
        hashed_data=redeem_hash,
        script_type="p2sh",
        encoding="base58",
        network=network.base58_network,
    ).address

    _logger.debug("P2SH address on %s: %s (hash160 %s)", network, addr, redeem_hash.hex())
    return addr


def _address_network(address: str, network: NetworkParameters) -> tuple[str, str]:
    """Return (encoding, bitcoinlib network name) used to decode ``address``."""
    if network.is_bech32(address):
        return "bech32", network.bech32_network
    return "base58", network.base58_network


def decode_address(address: str, network: NetworkParameters) -> Address:
    """Decode an address string on ``network`` into a typed bitcoinlib Address.

    The decoded hash is re-encoded on the same network and must give back the
    original string; addresses from other networks are rejected.
    """
    if not address:
        raise InvalidAddress("empty address")

    encoding, network_name = _address_network(address, network)
    try:
        decoded = Address.parse(address, encoding=encoding, network=network_name)
        reencoded = Address(
            hashed_data=decoded.hash_bytes,
            script_type=decoded.script_type,
            encoding=encoding,
            witver=decoded.witver,
            network=network_name,
        ).address
    except Exception as e:  # noqa: BLE001
        raise InvalidAddress("decoded address is of unknown format") from e

    if not decoded.script_type or not decoded.hash_bytes:
        raise InvalidAddress("decoded address is of unknown format")
    if reencoded.lower() != address.lower():
        raise InvalidAddress(f"Address {address} does not belong to network {network}")
    return decoded


def pay_to_address_script(address: str, network: NetworkParameters) -> bytes:
    """Return the locking script (scriptPubKey) paying to ``address``."""
    decoded = decode_address(address, network)
    _, network_name = _address_network(address, network)

    try:
        lock_script = Output(0, address=address, network=network_name).lock_script
    except Exception as e:  # noqa: BLE001
        raise ScriptConstructionError(f"Error creating locking script for {address}: {e}") from e
    if not lock_script:
        raise ScriptConstructionError(
            f"Cannot build a locking script for address type {decoded.script_type!r}"
        )

    _logger.debug("Locking script for %s (%s): %s", address, decoded.script_type, lock_script.hex())
    return lock_script
