"""
p2sh_hashlock/tests/test_transaction.py

Tests for the bitcoinlib transaction helpers.
"""

import pytest

from p2sh_hashlock import MAINNET, REGTEST, check_output_value, finalize, new_transaction, transaction_id

LOCK_SCRIPT = bytes.fromhex("a914" + "11" * 20 + "87")


class TestNewTransaction:
    """Tests for new_transaction and finalize."""

    def test_legacy_on_base58_network(self):
        """Regtest transactions are built on bitcoinlib's testnet definition."""
        tx = new_transaction(REGTEST)
        assert tx.witness_type == "legacy"
        assert tx.network.name == "testnet"
        assert new_transaction(MAINNET).network.name == "bitcoin"

    def test_finalize_sets_txid_and_size(self):
        tx = new_transaction(REGTEST)
        tx.add_output(5000, lock_script=LOCK_SCRIPT)
        finalize(tx)
        assert tx.txid == transaction_id(tx)
        assert tx.size == len(tx.raw())

    def test_txid_content_addressed(self):
        """Equal content gives equal txids; different content differs."""
        a = new_transaction(REGTEST)
        a.add_output(5000, lock_script=LOCK_SCRIPT)
        b = new_transaction(REGTEST)
        b.add_output(5000, lock_script=LOCK_SCRIPT)
        c = new_transaction(REGTEST)
        c.add_output(5001, lock_script=LOCK_SCRIPT)
        assert transaction_id(a) == transaction_id(b)
        assert transaction_id(a) != transaction_id(c)


class TestCheckOutputValue:
    """Tests for output value validation."""

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            check_output_value(-1)

    def test_zero_allowed(self):
        assert check_output_value(0) == 0

    @pytest.mark.parametrize("value", [1.5, "100", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValueError):
            check_output_value(value)
