"""Signer factory.

Creates the local key store from configured mnemonics. Construction errors
propagate to the caller; only the entry point decides to terminate.
"""

import logging
from typing import Optional

from nodesigner.config import get_settings
from nodesigner.signing.base import MultipleWalletSigner

logger = logging.getLogger(__name__)

_signer_instance: Optional[MultipleWalletSigner] = None


def get_signer() -> MultipleWalletSigner:
    """Get the configured signer instance.

    Returns singleton instance built on first call.

    Returns:
        MultipleWalletSigner instance

    Raises:
        KeyDerivationError: If a configured mnemonic is invalid
    """
    global _signer_instance

    if _signer_instance is not None:
        return _signer_instance

    from nodesigner.signing.local import LocalKeyStore

    settings = get_settings()
    logger.info("Initializing local signer")
    _signer_instance = LocalKeyStore.from_mnemonics(settings.get_mnemonics())

    return _signer_instance


def reset_signer():
    """Reset the signer instance (for testing)."""
    global _signer_instance
    if _signer_instance is not None and hasattr(_signer_instance, "close"):
        _signer_instance.close()
    _signer_instance = None
    get_settings.cache_clear()


async def get_signer_info() -> dict:
    """Get information about the current signer configuration.

    Returns:
        Dict with signer class, health status, and available accounts
    """
    signer = get_signer()
    health = await signer.health_check()

    return {
        "class": signer.__class__.__name__,
        "healthy": health,
        "accounts": list(getattr(signer, "accounts", ())),
    }
