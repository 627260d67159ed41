from abc import ABC, abstractmethod
from typing import Any

from cyrcipher.models.schemas import CipherFamily, CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is built around one validated key and stays immutable
    afterwards. Each cipher implementation must provide:
    - parse_key(): Turn raw console input into a constructor argument
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt ciphertext
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    @classmethod
    @abstractmethod
    def parse_key(cls, raw_key: str) -> Any:
        """
        Convert a raw key string into the value the constructor expects.

        Args:
            raw_key: Key as typed by the user

        Returns:
            Constructor argument
        """
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with the engine's key.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with the engine's key.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def explain(self, source: str, result: str) -> str:
        """
        Generate human-readable explanation of an operation.

        Args:
            source: Text given to the engine
            result: Text returned by the engine

        Returns:
            Explanation string
        """
        pass

    @property
    @abstractmethod
    def key_display(self) -> str:
        """Key rendered for output."""
        pass
