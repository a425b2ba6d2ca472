# file: src/tape_cipher/cipher.py

"""
Tape cipher engine.

Shifts every 16-bit code unit of the text by the tape value at the same
position, reusing the tape cyclically (position i uses tape[i % len(tape)]).
Encryption adds the shift modulo 65536, decryption subtracts it, so the
two are exact inverses for any non-empty tape.
"""

import logging
from typing import List, Optional

import numpy as np

from .code_units import CODE_UNIT_MODULUS, text_to_code_units, code_units_to_text
from .errors import UnknownModeError
from .tape import parse_tape

logger = logging.getLogger(__name__)


ENCRYPT = "encrypt"
DECRYPT = "decrypt"
MODES = (ENCRYPT, DECRYPT)


def normalize_shift(shift: int) -> int:
    """Reduce any integer shift into [0, 65535]."""
    return ((shift % CODE_UNIT_MODULUS) + CODE_UNIT_MODULUS) % CODE_UNIT_MODULUS


def expand_shifts(tape: List[int], count: int) -> np.ndarray:
    """
    Lay the tape out over `count` positions.

    Args:
        tape: Non-empty list of raw tape integers
        count: Number of code units to cover

    Returns:
        np.ndarray of shape (count,), dtype int64, values in [0, 65535]
    """
    normalized = np.array([normalize_shift(value) for value in tape], dtype=np.int64)
    return np.resize(normalized, count)


def is_usable_tape(tape_raw: Optional[str]) -> bool:
    """True when the tape string yields at least one value."""
    return len(parse_tape(tape_raw)) > 0


def _shift_text(text: str, tape_raw: Optional[str], direction: int) -> str:
    tape = parse_tape(tape_raw)
    if not tape:
        logger.debug("Empty tape, returning text unchanged")
        return text

    units = text_to_code_units(text).astype(np.int64)
    shifts = expand_shifts(tape, units.size)

    shifted = (units + direction * shifts + CODE_UNIT_MODULUS) % CODE_UNIT_MODULUS

    logger.debug(
        f"Shifted {units.size} code units with a tape of {len(tape)} values"
    )
    return code_units_to_text(shifted)


def encrypt(text: str, tape_raw: Optional[str]) -> str:
    """
    Encrypt text with a tape.

    Args:
        text: Plain text
        tape_raw: Tape string, e.g. "1,2,3"

    Returns:
        Cipher text with the same number of code units. If the tape parses
        to nothing the text is returned unchanged.

    Example:
        >>> encrypt("AB", "1,2")
        'BD'
    """
    return _shift_text(text, tape_raw, 1)


def decrypt(text: str, tape_raw: Optional[str]) -> str:
    """
    Decrypt text produced by encrypt() with the same tape.

    Args:
        text: Cipher text
        tape_raw: Tape string used for encryption

    Returns:
        Plain text. If the tape parses to nothing the text is returned
        unchanged.

    Example:
        >>> decrypt("BD", "1,2")
        'AB'
    """
    return _shift_text(text, tape_raw, -1)


def transform(text: str, tape_raw: Optional[str], mode: str) -> str:
    """
    Dispatch to encrypt() or decrypt() by mode name.

    Raises:
        UnknownModeError: If mode is not 'encrypt' or 'decrypt'
    """
    if mode == ENCRYPT:
        return encrypt(text, tape_raw)
    elif mode == DECRYPT:
        return decrypt(text, tape_raw)
    else:
        raise UnknownModeError(f"Unknown mode: {mode!r} (expected one of {MODES})")
