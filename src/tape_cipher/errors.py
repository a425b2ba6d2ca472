# file: src/tape_cipher/errors.py

"""
Tape cipher exception hierarchy.

The cipher core itself never raises for string input; these cover the
generator bounds, configuration loading and the file boundary.
"""


class TapeCipherError(Exception):
    """Base exception for all tape cipher errors."""
    pass


class UnknownModeError(TapeCipherError):
    """Raised when a transform mode is neither 'encrypt' nor 'decrypt'."""
    pass


class TapeGenerationError(TapeCipherError):
    """Raised when a random tape is requested outside the supported bounds."""

    def __init__(self, message: str, length: int = None, max_value: int = None):
        super().__init__(message)
        self.length = length
        self.max_value = max_value


class ConfigurationError(TapeCipherError):
    """Raised when a configuration file cannot be parsed."""
    pass


class TextSourceError(TapeCipherError):
    """Raised when text cannot be read from or written to a file."""
    pass
