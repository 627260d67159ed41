from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    GRONSFELD = "gronsfeld"
    ROUTE = "route"


class Operation(str, Enum):
    """Direction of a cipher operation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class ErrorKind(str, Enum):
    """Distinguishable reasons for a rejected key or text."""

    EMPTY_KEY = "empty_key"
    INVALID_KEY = "invalid_key"
    INVALID_KEY_CHARACTER = "invalid_key_character"
    KEY_HAS_NO_VALID_LETTERS = "key_has_no_valid_letters"
    KEY_TOO_LARGE = "key_too_large"
    EMPTY_TEXT = "empty_text"
    INVALID_TEXT_CHARACTER = "invalid_text_character"
    TEXT_HAS_NO_VALID_LETTERS = "text_has_no_valid_letters"
    KEY_EXCEEDS_TEXT_LENGTH = "key_exceeds_text_length"
    TABLE_TOO_LARGE = "table_too_large"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    ENGINE_NOT_FOUND = "engine_not_found"
    INPUT_TOO_LONG = "input_too_long"


ERROR_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_KEY: "Key is empty",
    ErrorKind.INVALID_KEY: "Column count is not a positive integer",
    ErrorKind.INVALID_KEY_CHARACTER: "Key contains a non-alphabetic character",
    ErrorKind.KEY_HAS_NO_VALID_LETTERS: "Key has no letters of the Cyrillic alphabet",
    ErrorKind.KEY_TOO_LARGE: "Column count is greater than 1000",
    ErrorKind.EMPTY_TEXT: "Text is empty",
    ErrorKind.INVALID_TEXT_CHARACTER: "Text contains a character that is neither a letter nor a space",
    ErrorKind.TEXT_HAS_NO_VALID_LETTERS: "Text has no letters of the Cyrillic alphabet",
    ErrorKind.KEY_EXCEEDS_TEXT_LENGTH: "Column count is greater than the text length",
    ErrorKind.TABLE_TOO_LARGE: "Text needs more than 10000 table rows",
    ErrorKind.INDEX_OUT_OF_RANGE: "Letter index fell outside the alphabet",
    ErrorKind.ENGINE_NOT_FOUND: "Cipher type is not registered",
    ErrorKind.INPUT_TOO_LONG: "Input exceeds the configured maximum length",
}


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """A single encrypt or decrypt request coming from the console."""

    cipher_type: CipherType
    operation: Operation
    key: str
    # Emptiness is reported by the engines, not by the schema
    text: str


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Result of a successful cipher operation."""

    cipher_type: CipherType
    operation: Operation
    key_used: str
    input_text: str
    output_text: str
    explanation: str | None = None


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorKind
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
