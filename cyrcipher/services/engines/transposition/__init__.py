"""Transposition cipher engines."""

from cyrcipher.services.engines.transposition.route import TransposeCipher

__all__ = [
    "TransposeCipher",
]
