"""Transaction signing services.

Provides the signer contract and its local implementation:
- MultipleWalletSigner: Interface every signing backend implements
- LocalKeyStore: In-memory keys derived from mnemonics
"""

from nodesigner.signing.base import (
    KeyDerivationError,
    KeyNotFoundError,
    MultipleWalletSigner,
    NoSignerFoundError,
    SignedTransaction,
    SigningError,
)
from nodesigner.signing.factory import get_signer, reset_signer
from nodesigner.signing.local import LocalKeyStore

__all__ = [
    "KeyDerivationError",
    "KeyNotFoundError",
    "LocalKeyStore",
    "MultipleWalletSigner",
    "NoSignerFoundError",
    "SignedTransaction",
    "SigningError",
    "get_signer",
    "reset_signer",
]
