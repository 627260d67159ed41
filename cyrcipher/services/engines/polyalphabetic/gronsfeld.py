import logging
from types import MappingProxyType
from typing import ClassVar, Mapping

from cyrcipher.core.exceptions import SubstitutionCipherError
from cyrcipher.models.schemas import CipherFamily, CipherType, ErrorKind
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

RUSSIAN_ALPHABET = "АБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@EngineRegistry.register
class SubstitutionCipher(CipherEngine):
    """
    Gronsfeld cipher engine over the 32-letter Russian alphabet.

    Each letter of the keyword is replaced by its position in the alphabet,
    and those positions are used as cyclically repeated shifts:

    Key:    Д  О  Ж  Д  И   ->  4 14  6  4  8
    Text:   Т  И  М  П  Л  Б  Д  В  А
    Shift:  4 14  6  4  8  4 14  6  4
    Cipher: Ц  Ц  Т  У  У  Е  Т  И  Д

    Text is validated first (letters and spaces only), then upper-cased
    and mapped. Characters with no place in the alphabet, spaces included,
    are dropped by the mapping, so the ciphertext can be shorter than
    the plaintext.
    """

    name = "Gronsfeld Cipher"
    cipher_type = CipherType.GRONSFELD
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by the alphabet "
        "position of the matching letter of a repeating keyword. Trivially "
        "broken by Kasiski examination and frequency analysis."
    )

    ALPHABET: ClassVar[str] = RUSSIAN_ALPHABET
    ALPHABET_INDEX: ClassVar[Mapping[str, int]] = MappingProxyType(
        {letter: i for i, letter in enumerate(RUSSIAN_ALPHABET)}
    )

    def __init__(self, key_text: str):
        if not key_text:
            raise SubstitutionCipherError(
                "Key must not be an empty string",
                ErrorKind.EMPTY_KEY,
            )

        for position, char in enumerate(key_text):
            if not char.isalpha():
                raise SubstitutionCipherError(
                    "Key must contain letters only",
                    ErrorKind.INVALID_KEY_CHARACTER,
                    {"character": char, "position": position},
                )

        key = self._to_indices(key_text.upper())
        if not key:
            raise SubstitutionCipherError(
                "Key contains no letters of the Russian alphabet",
                ErrorKind.KEY_HAS_NO_VALID_LETTERS,
                {"key": key_text},
            )

        self._key: tuple[int, ...] = tuple(key)
        logger.debug("Gronsfeld key %r resolved to shifts %s", key_text, self._key)

    @classmethod
    def parse_key(cls, raw_key: str) -> str:
        """
        Trim surrounding whitespace from a keyword typed at the console.

        Only this console path trims: the constructor itself rejects a
        key with spaces, so SubstitutionCipher(" КОД ") raises
        INVALID_KEY_CHARACTER while EngineRegistry.create() accepts it.
        """
        return raw_key.strip()

    @property
    def numeric_key(self) -> tuple[int, ...]:
        """Shift sequence derived from the keyword."""
        return self._key

    @property
    def key_display(self) -> str:
        return "".join(self.ALPHABET[i] for i in self._key)

    def encrypt(self, plaintext: str) -> str:
        """Shift every letter forward by the repeating key."""
        work = self._prepare(plaintext, "plaintext")
        size = len(self.ALPHABET)
        result = [
            (value + self._key[i % len(self._key)]) % size
            for i, value in enumerate(work)
        ]
        logger.debug("Encrypted %d letters", len(result))
        return self._to_text(result)

    def decrypt(self, ciphertext: str) -> str:
        """Shift every letter back by the repeating key."""
        work = self._prepare(ciphertext, "ciphertext")
        size = len(self.ALPHABET)
        result = [
            (value + size - self._key[i % len(self._key)]) % size
            for i, value in enumerate(work)
        ]
        logger.debug("Decrypted %d letters", len(result))
        return self._to_text(result)

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        shifts = ", ".join(map(str, self._key))
        return (
            f"Gronsfeld cipher with keyword '{self.key_display}' "
            f"(shifts {shifts}, period {len(self._key)}). "
            f"{len(result)} of {len(source)} input characters were letters "
            f"of the alphabet; the rest were dropped."
        )

    def _prepare(self, text: str, label: str) -> list[int]:
        """Validate text and convert it to alphabet indices."""
        if not text:
            raise SubstitutionCipherError(
                f"Empty {label}",
                ErrorKind.EMPTY_TEXT,
            )

        for position, char in enumerate(text):
            if not char.isalpha() and char != " ":
                raise SubstitutionCipherError(
                    f"The {label} may contain only letters and spaces",
                    ErrorKind.INVALID_TEXT_CHARACTER,
                    {"character": char, "position": position},
                )

        work = self._to_indices(text.upper())
        if not work:
            raise SubstitutionCipherError(
                f"The {label} contains no letters of the Russian alphabet",
                ErrorKind.TEXT_HAS_NO_VALID_LETTERS,
            )
        return work

    def _to_indices(self, text: str) -> list[int]:
        """Map letters to positions, silently skipping anything outside the alphabet."""
        return [self.ALPHABET_INDEX[c] for c in text if c in self.ALPHABET_INDEX]

    def _to_text(self, indices: list[int]) -> str:
        """Map positions back to letters."""
        letters = []
        for index in indices:
            if not 0 <= index < len(self.ALPHABET):
                raise SubstitutionCipherError(
                    "Letter index is outside the alphabet",
                    ErrorKind.INDEX_OUT_OF_RANGE,
                    {"index": index},
                )
            letters.append(self.ALPHABET[index])
        return "".join(letters)
