"""Base interfaces for transaction signing.

Signing flow:
1. Caller picks a signer address out of candidate addresses
2. Caller submits the unsigned transaction with that address
3. Signer returns the transaction id and signature (never the private key)
4. Caller submits the signed transaction blob to algod

Any backend implementing MultipleWalletSigner (local key store, remote
wallet, hardware signer) can be handed to the caller interchangeably.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SignedTransaction:
    """Result of a signing operation.

    Attributes:
        txid: Encoded transaction identifier
        signature: Raw ed25519 signature bytes (64 bytes)
        blob: msgpack-encoded signed transaction, ready for submission
    """
    txid: str
    signature: bytes = field(repr=False)
    blob: bytes = field(repr=False)


class MultipleWalletSigner(ABC):
    """Abstract base class for signing backends holding several accounts.

    Implementations should NEVER expose raw private keys.
    All signing operations return signatures only.
    """

    @abstractmethod
    def has_account(self, address: str) -> bool:
        """Check whether this signer can sign for an address.

        Args:
            address: Public account address

        Returns:
            True if a key for the address is held
        """
        pass

    @abstractmethod
    def find_first_signer(self, addresses: Sequence[str]) -> str:
        """Pick the address to sign with out of a list of candidates.

        Args:
            addresses: Candidate addresses in order of preference. If empty,
                any held address may be returned.

        Returns:
            The selected address

        Raises:
            NoSignerFoundError: If no candidate (or no key at all) is held
        """
        pass

    @abstractmethod
    async def sign_with_account(self, txn: Any, address: str) -> SignedTransaction:
        """Sign a transaction with the key for an address.

        Args:
            txn: Unsigned algosdk transaction
            address: Address whose key signs the transaction

        Returns:
            SignedTransaction with txid and signature

        Raises:
            KeyNotFoundError: If the address is not held by this signer
            SigningError: If the underlying signing call fails
        """
        pass

    async def health_check(self) -> bool:
        """Check if the signing backend is available.

        Returns:
            True if backend is ready to sign
        """
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SigningError(Exception):
    """Exception raised when signing fails."""
    pass


class KeyNotFoundError(SigningError):
    """Exception raised when signing key is not found."""

    def __init__(self, address: str):
        super().__init__(f"key not found for address {address}")
        self.address = address


class NoSignerFoundError(SigningError):
    """Exception raised when none of the candidate addresses can sign."""

    def __init__(self, addresses: Sequence[str] = ()):
        self.addresses = tuple(addresses)
        if self.addresses:
            message = f"no signer found for any of the addresses: {', '.join(self.addresses)}"
        else:
            message = "no signer found: no keys loaded"
        super().__init__(message)


class KeyDerivationError(SigningError):
    """Exception raised when a secret phrase cannot be turned into a key.

    Only the configuration label and position are kept, never the phrase.
    """

    def __init__(self, label: str, index: int, reason: Optional[str] = None):
        message = f"failed to add mnemonic {label} (index {index})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.label = label
        self.index = index
