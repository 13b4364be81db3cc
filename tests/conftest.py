"""
Pytest configuration and fixtures for Open Assets codec tests.
"""

import os

import pytest

from openassets.marker import MarkerPayload
from openassets.script import TransactionOutput

from tests.vectors import MARKER_METADATA, MARKER_SCRIPT_HEX


@pytest.fixture(autouse=True)
def clean_oap_environment(monkeypatch):
    """Remove OAP_* variables so the host environment cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith('OAP_'):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_payload():
    """Payload of the reference marker output."""
    return MarkerPayload(quantities=[100, 0, 123], metadata=MARKER_METADATA)


@pytest.fixture
def marker_output():
    """Reference marker output."""
    return TransactionOutput(value=0, script=bytes.fromhex(MARKER_SCRIPT_HEX))


@pytest.fixture
def p2pkh_output():
    """Ordinary pay-to-pubkey-hash output."""
    return TransactionOutput(
        value=600,
        script=bytes.fromhex("76a91446c2fbfbecc99a63148fa076de58cf29b0bcf0b088ac")
    )
