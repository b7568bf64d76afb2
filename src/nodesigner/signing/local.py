"""Local signing backend.

Uses in-memory private keys derived from 25-word mnemonics. Suitable for:
- Development/testing
- Node operators signing pool management transactions on the node host

WARNING: Private keys are stored in memory. They are never logged or
serialized, and close() wipes them on a best-effort basis.
"""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Union

from nodesigner.signing import algorand
from nodesigner.signing.base import (
    KeyDerivationError,
    KeyNotFoundError,
    MultipleWalletSigner,
    NoSignerFoundError,
    SignedTransaction,
    SigningError,
)

logger = logging.getLogger(__name__)

MnemonicSource = Union[Sequence[str], Mapping[str, str]]


class LocalKeyStore(MultipleWalletSigner):
    """Local signing backend using in-memory private keys.

    Keys are keyed by the account address derived from them, in insertion
    order. The store is populated once by from_mnemonics() and is read-only
    afterwards, so concurrent readers need no locking.
    """

    def __init__(self):
        self._keys: dict[str, bytearray] = {}
        self._view = MappingProxyType(self._keys)

    @classmethod
    def from_mnemonics(cls, phrases: MnemonicSource) -> "LocalKeyStore":
        """Build a key store from secret recovery phrases.

        Phrases are processed in order. An empty phrase ends the input:
        anything after it is not loaded (blank trailing slots in .env
        examples). A phrase loaded twice keeps a single entry.

        Args:
            phrases: Mnemonics, either as a sequence or as a mapping of
                configuration key name to mnemonic

        Returns:
            Populated LocalKeyStore

        Raises:
            KeyDerivationError: If any phrase is not a valid mnemonic
        """
        if isinstance(phrases, Mapping):
            entries = list(phrases.items())
        else:
            entries = [(f"#{idx}", phrase) for idx, phrase in enumerate(phrases)]

        store = cls()
        loaded = 0
        for idx, (label, phrase) in enumerate(entries):
            if not phrase:
                break
            try:
                store._add_mnemonic(phrase)
            except ValueError as e:
                logger.error(f"fatal error in mnemonic load, idx key:{label}, err:{e}")
                store.close()
                raise KeyDerivationError(label, idx, str(e)) from e
            loaded += 1

        logger.debug(f"loaded {loaded} mnemonics")
        return store

    def _add_mnemonic(self, phrase: str) -> None:
        key = algorand.private_key_from_mnemonic(phrase)
        address = algorand.address_from_private_key(key)

        previous = self._keys.get(address)
        if previous is not None:
            _wipe(previous)
        self._keys[address] = bytearray(key)
        logger.info(f"Mnemonics available for account:{address}")

    @property
    def accounts(self) -> tuple[str, ...]:
        """Addresses held by this store, in load order."""
        return tuple(self._view)

    def has_account(self, address: str) -> bool:
        return address in self._view

    def find_first_signer(self, addresses: Sequence[str]) -> str:
        """Find the first signer among the given addresses.

        With no candidates the first loaded account is returned. Otherwise
        candidates are checked in order and the first held one wins.
        """
        if not addresses:
            for address in self._view:
                return address
            raise NoSignerFoundError()

        for address in addresses:
            if self.has_account(address):
                return address
        raise NoSignerFoundError(addresses)

    async def sign_with_account(self, txn: Any, address: str) -> SignedTransaction:
        """Sign a transaction using the local key for address."""
        key = self._view.get(address)
        if key is None:
            raise KeyNotFoundError(address)

        try:
            return algorand.sign_transaction(bytes(key), txn)
        except Exception as e:
            logger.error(f"Local signing failed for {address}: {e}")
            raise SigningError(f"failed to sign with account {address}: {e}") from e

    async def health_check(self) -> bool:
        """Check if any keys are loaded."""
        return len(self._view) > 0

    def close(self) -> None:
        """Wipe key material and drop all accounts."""
        for key in self._keys.values():
            _wipe(key)
        self._keys.clear()

    def __enter__(self) -> "LocalKeyStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and self.has_account(address)

    def __len__(self) -> int:
        return len(self._view)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(accounts={len(self._view)})"


def _wipe(key: bytearray) -> None:
    for i in range(len(key)):
        key[i] = 0
