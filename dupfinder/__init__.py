"""Find duplicate files by content hash and delete, move or hard-link them."""

__version__ = "0.1.0"
__all__ = ["cli", "handler", "hashing", "scanner"]