"""Entry point helpers for applications embedding the signer."""

import logging
import sys

from nodesigner.config import Settings, get_settings
from nodesigner.signing.base import KeyDerivationError, MultipleWalletSigner
from nodesigner.signing.factory import get_signer

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    if settings.debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def init_signer() -> MultipleWalletSigner:
    """Configure logging and load the signer, exiting on bad key configuration.

    An invalid mnemonic must not leave the process running with fewer keys
    than the operator configured.
    """
    settings = get_settings()
    configure_logging(settings)

    try:
        signer = get_signer()
    except KeyDerivationError as e:
        logger.critical(f"Signer configuration invalid ({e.label}): {e}")
        sys.exit(1)

    logger.info(f"Signer ready: {signer!r}")
    return signer
