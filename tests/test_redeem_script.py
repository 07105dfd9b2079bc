"""
p2sh_hashlock/tests/test_redeem_script.py

Tests for redeemScript and scriptSig construction.
"""

import hashlib

import pytest

from p2sh_hashlock import (
    MAX_SCRIPT_ELEMENT_SIZE,
    EmptyInput,
    ScriptConstructionError,
    build_hashlock_redeem_script,
    build_redeem_script,
    build_unlocking_script,
)

from .vectors import PREIMAGE, REDEEM_SCRIPT_HEX, SHA256_PREIMAGE_HEX


class TestBuildRedeemScript:
    """Tests for OP_SHA256 <data> OP_EQUAL assembly."""

    def test_known_vector(self):
        """The scenario preimage produces the published script bytes."""
        assert build_redeem_script(PREIMAGE).hex() == REDEEM_SCRIPT_HEX

    def test_str_and_bytes_agree(self):
        """A string preimage is UTF-8 encoded before embedding."""
        assert build_redeem_script(PREIMAGE) == build_redeem_script(PREIMAGE.encode())

    def test_deterministic(self):
        """Building twice yields byte-identical scripts."""
        assert build_redeem_script(b"\x00\x01secret") == build_redeem_script(b"\x00\x01secret")

    def test_layout(self):
        """Script is OP_SHA256, a direct push of the data, OP_EQUAL."""
        script = build_redeem_script(b"abc")
        assert script[0] == 0xA8
        assert script[1] == 3
        assert script[2:5] == b"abc"
        assert script[-1] == 0x87

    @pytest.mark.parametrize("empty", ["", b""])
    def test_empty_preimage(self, empty):
        """Empty input is rejected."""
        with pytest.raises(EmptyInput, match="empty preImage"):
            build_redeem_script(empty)

    def test_oversized_push_rejected(self):
        """Operands above the 520 byte element limit cannot be pushed."""
        with pytest.raises(ScriptConstructionError, match="520"):
            build_redeem_script(b"x" * (MAX_SCRIPT_ELEMENT_SIZE + 1))

    def test_max_size_push_allowed(self):
        """A 520 byte operand is pushed with OP_PUSHDATA2."""
        script = build_redeem_script(b"x" * MAX_SCRIPT_ELEMENT_SIZE)
        assert script[1] == 0x4D
        assert script[2:4] == MAX_SCRIPT_ELEMENT_SIZE.to_bytes(2, "little")
        assert len(script) == 1 + 3 + MAX_SCRIPT_ELEMENT_SIZE + 1


class TestHashlockRedeemScript:
    """Tests for the SHA256 commitment variant."""

    def test_commits_to_digest(self):
        """The embedded operand is SHA256 of the secret."""
        script = build_hashlock_redeem_script(PREIMAGE)
        assert script.hex() == "a820" + SHA256_PREIMAGE_HEX + "87"

    def test_digest_matches_hashlib(self):
        digest = hashlib.sha256(b"other secret").digest()
        assert build_hashlock_redeem_script(b"other secret") == build_redeem_script(digest)

    def test_empty_secret(self):
        with pytest.raises(EmptyInput):
            build_hashlock_redeem_script("")


class TestUnlockingScript:
    """Tests for the P2SH scriptSig <preimage> <redeemScript>."""

    def test_layout(self):
        """Both items are direct data pushes in order."""
        redeem = bytes.fromhex(REDEEM_SCRIPT_HEX)
        script_sig = build_unlocking_script(PREIMAGE, redeem)
        assert script_sig == bytes([15]) + PREIMAGE.encode() + bytes([len(redeem)]) + redeem

    def test_empty_preimage(self):
        with pytest.raises(EmptyInput):
            build_unlocking_script("", bytes.fromhex(REDEEM_SCRIPT_HEX))

    def test_empty_redeem_script(self):
        with pytest.raises(EmptyInput):
            build_unlocking_script(PREIMAGE, b"")

    def test_oversized_preimage(self):
        with pytest.raises(ScriptConstructionError):
            build_unlocking_script(b"y" * 600, bytes.fromhex(REDEEM_SCRIPT_HEX))
