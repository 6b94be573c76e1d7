from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key cannot be read as an integer shift."""

    def __init__(self, raw_key: str):
        super().__init__(
            f"Key must be an integer, got {raw_key!r}",
            {"key": raw_key},
        )


class UnknownLanguageError(ValidationError):
    """Raised when no reference frequency table exists for a language."""

    def __init__(self, language: str):
        super().__init__(
            f"No reference frequencies for language '{language}'",
            {"language": language},
        )


class FileProcessingError(CryptanalysisError):
    """Raised when an input or output file cannot be processed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot process '{path}': {reason}",
            {"path": path, "reason": reason},
        )
