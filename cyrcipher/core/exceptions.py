from typing import Any

from cyrcipher.models.schemas import ErrorKind, ErrorResponse


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.kind = kind
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert the exception to the error schema used by the console."""
        return ErrorResponse(error=self.kind, message=self.message, details=self.details)


class SubstitutionCipherError(CipherError):
    """Raised when the Gronsfeld cipher rejects a key or text."""

    pass


class TransposeCipherError(CipherError):
    """Raised when the route transposition cipher rejects a key or text."""

    pass


class EngineNotFoundError(CipherError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            ErrorKind.ENGINE_NOT_FOUND,
            {"engine_name": engine_name},
        )


class InputTooLongError(CipherError):
    """Raised when input text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Input length {length} exceeds maximum {max_length}",
            ErrorKind.INPUT_TOO_LONG,
            {"length": length, "max_length": max_length},
        )
