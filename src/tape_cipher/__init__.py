# file: src/tape_cipher/__init__.py

"""
Tape Cipher

Reversible shift cipher over 16-bit code units, keyed by a "tape": a
sequence of integers reused cyclically along the text. Educational only,
not a secure cipher.

Public API:
    - parse_tape(raw: str) -> List[int]
    - encrypt(text: str, tape_raw: str) -> str
    - decrypt(text: str, tape_raw: str) -> str
    - generate_random_tape(length: int, max_value: int = 255, rng=None) -> str

Example usage:
    >>> from tape_cipher import encrypt, decrypt
    >>> encrypt("AB", "1,2")
    'BD'
    >>> decrypt("BD", "1,2")
    'AB'
"""

__version__ = "1.0.0"

from .tape import parse_tape, format_tape
from .cipher import encrypt, decrypt, transform, is_usable_tape
from .generator import generate_random_tape, clamp_tape_length, MAX_TAPE_LENGTH
from .errors import (
    TapeCipherError,
    UnknownModeError,
    TapeGenerationError,
    ConfigurationError,
    TextSourceError,
)

__all__ = [
    "parse_tape",
    "format_tape",
    "encrypt",
    "decrypt",
    "transform",
    "is_usable_tape",
    "generate_random_tape",
    "clamp_tape_length",
    "MAX_TAPE_LENGTH",
    "TapeCipherError",
    "UnknownModeError",
    "TapeGenerationError",
    "ConfigurationError",
    "TextSourceError",
]
