# -*- coding: utf-8 -*-
"""Network parameters threaded through every build step.

A ``NetworkParameters`` value says which bitcoinlib network definition encodes
and decodes base58 addresses and which one handles bech32 addresses. Regtest
shares testnet's base58 prefixes (0x6f P2PKH, 0xc4 P2SH) but has its own
bech32 prefix ``bcrt``, so the two are configured separately.

The same value must be used for address derivation, address decoding and
transaction construction: encodings are network-scoped and not interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass

from bitcoinlib.networks import Network

from .errors import InvalidNetwork


@dataclass(frozen=True)
class NetworkParameters:
    """Immutable network selection (e.g. regtest, signet)."""

    name: str
    base58_network: str
    bech32_network: str
    bech32_hrp: str

    @classmethod
    def from_name(cls, name: str) -> NetworkParameters:
        name = (name or "").strip().lower()
        if not name:
            raise InvalidNetwork("Network name is required.")
        if name in KNOWN_NETWORKS:
            return KNOWN_NETWORKS[name]
        try:
            network = Network(name)
        except Exception as e:  # noqa: BLE001
            raise InvalidNetwork(f"Unknown network {name!r}: {e}") from e
        return cls(name, name, name, network.prefix_bech32)

    @property
    def network(self) -> Network:
        """bitcoinlib network used for base58 addresses and transactions."""
        return Network(self.base58_network)

    def is_bech32(self, address: str) -> bool:
        return address.lower().startswith(self.bech32_hrp + "1")

    def __str__(self) -> str:
        return self.name


REGTEST = NetworkParameters("regtest", base58_network="testnet", bech32_network="regtest", bech32_hrp="bcrt")
TESTNET = NetworkParameters("testnet", base58_network="testnet", bech32_network="testnet", bech32_hrp="tb")
SIGNET = NetworkParameters("signet", base58_network="signet", bech32_network="signet", bech32_hrp="tb")
MAINNET = NetworkParameters("bitcoin", base58_network="bitcoin", bech32_network="bitcoin", bech32_hrp="bc")

KNOWN_NETWORKS = {n.name: n for n in (REGTEST, TESTNET, SIGNET, MAINNET)}
KNOWN_NETWORKS["mainnet"] = MAINNET
