"""
p2sh_hashlock/tests/test_networks.py

Tests for NetworkParameters.
"""

import pytest

from p2sh_hashlock import MAINNET, REGTEST, TESTNET, InvalidNetwork, NetworkParameters


class TestNetworkParameters:

    def test_from_name(self):
        assert NetworkParameters.from_name("Regtest ") is REGTEST

    def test_mainnet_alias(self):
        assert NetworkParameters.from_name("mainnet") is MAINNET

    def test_unknown(self):
        with pytest.raises(InvalidNetwork):
            NetworkParameters.from_name("nosuchnet")

    def test_empty(self):
        with pytest.raises(InvalidNetwork):
            NetworkParameters.from_name("")

    def test_regtest_prefixes(self):
        """Regtest shares testnet base58 versions but has its own bech32 prefix."""
        assert REGTEST.base58_network == "testnet"
        assert REGTEST.bech32_network == "regtest"
        assert REGTEST.bech32_hrp == "bcrt"
        assert REGTEST.network.name == "testnet"
        assert str(REGTEST) == "regtest"

    def test_is_bech32(self):
        assert REGTEST.is_bech32("bcrt1qxyz")
        assert not REGTEST.is_bech32("tb1qxyz")
        assert TESTNET.is_bech32("TB1QXYZ")
        assert not MAINNET.is_bech32("3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy")
