"""Pytest configuration and fixtures."""

import os
from typing import Optional

import pytest
from algosdk import account, mnemonic, transaction

from nodesigner.signing.factory import reset_signer

# Testnet genesis hash; any 32-byte value works for offline signing
GENESIS_HASH = "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI="


def make_account() -> tuple[str, str]:
    """Generate a fresh account, returning (address, mnemonic)."""
    private_key, address = account.generate_account()
    return address, mnemonic.from_private_key(private_key)


@pytest.fixture
def account_a() -> tuple[str, str]:
    return make_account()


@pytest.fixture
def account_b() -> tuple[str, str]:
    return make_account()


@pytest.fixture
def account_c() -> tuple[str, str]:
    return make_account()


@pytest.fixture
def make_payment():
    """Build an unsigned payment transaction from a sender address."""

    def _make(sender: str, receiver: Optional[str] = None, amount: int = 100_000):
        params = transaction.SuggestedParams(
            fee=1000,
            first=1000,
            last=2000,
            gh=GENESIS_HASH,
            gen="testnet-v1.0",
            flat_fee=True,
        )
        return transaction.PaymentTxn(sender, params, receiver or sender, amount)

    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip mnemonics from the environment and point settings at an empty .env."""
    for name in list(os.environ):
        if "_MNEMONIC" in name:
            monkeypatch.delenv(name)
    monkeypatch.setenv("SECRETS_ENV_FILE", str(tmp_path / "missing.env"))
    reset_signer()
    yield monkeypatch
    reset_signer()


@pytest.fixture
def assert_no_phrase():
    """Check that text carries no trace of a mnemonic's words."""

    def _check(phrase: str, *texts: str):
        words = phrase.split()
        for text in texts:
            assert phrase not in text
            for word in words:
                assert f"'{word}'" not in text
            for first, second in zip(words, words[1:]):
                assert f"{first} {second}" not in text

    return _check
