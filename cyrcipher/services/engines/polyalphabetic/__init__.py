"""Polyalphabetic cipher engines."""

from cyrcipher.services.engines.polyalphabetic.gronsfeld import SubstitutionCipher

__all__ = [
    "SubstitutionCipher",
]
