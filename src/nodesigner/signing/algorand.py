"""Algorand key primitives.

Thin adapters over py-algorand-sdk. algosdk passes private keys around as
base64 strings; the key store holds raw bytes so they can be wiped, and
converts at this boundary only.
"""

import base64

from algosdk import account, encoding, error, mnemonic

from nodesigner.signing.base import SignedTransaction

# algosdk puts the mnemonic itself into some messages, so only the kind is kept
_FAILURE_KINDS = (
    (error.WrongMnemonicLengthError, "wrong word count"),
    (error.WrongChecksumError, "bad checksum"),
    (ValueError, "unknown word"),
)


def private_key_from_mnemonic(phrase: str) -> bytes:
    """Derive the ed25519 private key for a 25-word mnemonic.

    Raises:
        ValueError: If the phrase is malformed (word count, checksum, unknown
            word). The message names the failure kind only, never the words.
    """
    try:
        private_key = mnemonic.to_private_key(phrase)
    except (error.WrongMnemonicLengthError, error.WrongChecksumError, ValueError) as e:
        raise ValueError(f"invalid mnemonic: {_failure_kind(e)}") from e
    return base64.b64decode(private_key)


def _failure_kind(exc: Exception) -> str:
    for exc_type, kind in _FAILURE_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return exc.__class__.__name__


def address_from_private_key(key: bytes) -> str:
    """Derive the public account address for a private key."""
    return account.address_from_private_key(base64.b64encode(key).decode())


def sign_transaction(key: bytes, txn) -> SignedTransaction:
    """Sign an unsigned algosdk transaction.

    Returns:
        SignedTransaction with the transaction id, raw signature and the
        msgpack-encoded signed transaction
    """
    signed = txn.sign(base64.b64encode(key).decode())
    return SignedTransaction(
        txid=txn.get_txid(),
        signature=base64.b64decode(signed.signature),
        blob=base64.b64decode(encoding.msgpack_encode(signed)),
    )
