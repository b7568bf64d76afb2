"""In-memory Algorand key store and signer for node management tooling."""

__version__ = "0.1.0"
