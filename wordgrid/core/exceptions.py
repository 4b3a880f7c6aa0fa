"""Custom exception hierarchy for word grid generation."""


class WordGridError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordGridError):
    """Raised when grid dimensions or other settings are unusable."""


class DictionaryLoadError(WordGridError):
    """Raised when the dictionary file cannot be opened or read."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Error reading {path}: {reason}")
        self.path = path
        self.reason = reason


class ValidationError(WordGridError):
    """Raised when an emitted grid fails the integrity checks."""
