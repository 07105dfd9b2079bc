"""
p2sh_hashlock/tests/conftest.py

Shared fixtures for the regtest "Btrust Builders" scenario.
"""

import pytest

from p2sh_hashlock import REGTEST, build_funding_tx, build_redeem_script, derive_p2sh_address

from .vectors import PREIMAGE


@pytest.fixture
def network():
    return REGTEST


@pytest.fixture
def redeem_script():
    return build_redeem_script(PREIMAGE)


@pytest.fixture
def p2sh_address(redeem_script, network):
    return derive_p2sh_address(redeem_script.hex(), network)


@pytest.fixture
def funding_tx(p2sh_address, network):
    return build_funding_tx(p2sh_address, 100000, network)
