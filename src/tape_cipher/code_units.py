# file: src/tape_cipher/code_units.py

"""
Conversion between Python strings and 16-bit code units.

The cipher shifts UTF-16 code units, not code points: a character outside
the Basic Multilingual Plane becomes a surrogate pair and each half is
shifted on its own. Python strings hold code points, so text is encoded to
UTF-16-LE with 'surrogatepass' to get the units and decoded the same way,
which also keeps lone surrogates produced by a shift intact.
"""

import numpy as np


CODE_UNIT_MODULUS = 65536

# Little-endian uint16, independent of host byte order
CODE_UNIT_DTYPE = np.dtype("<u2")

_CODEC = "utf-16-le"
_ERRORS = "surrogatepass"


def text_to_code_units(text: str) -> np.ndarray:
    """
    Convert a string to its UTF-16 code units.

    Args:
        text: Any Python string, including lone surrogates

    Returns:
        np.ndarray of shape (N,), dtype uint16, N = number of code units
    """
    data = text.encode(_CODEC, _ERRORS)
    return np.frombuffer(data, dtype=CODE_UNIT_DTYPE).copy()


def code_units_to_text(units: np.ndarray) -> str:
    """
    Convert UTF-16 code units back to a string.

    Args:
        units: Array of values in [0, 65535]

    Returns:
        The decoded string. Valid surrogate pairs join into one character;
        unpaired surrogates are kept as-is.
    """
    units = np.asarray(units)
    if units.size and (units.min() < 0 or units.max() >= CODE_UNIT_MODULUS):
        raise ValueError(
            f"Code units must be in [0, {CODE_UNIT_MODULUS - 1}], "
            f"got range [{units.min()}, {units.max()}]"
        )
    return units.astype(CODE_UNIT_DTYPE).tobytes().decode(_CODEC, _ERRORS)


def code_unit_length(text: str) -> int:
    """Number of 16-bit code units in text (what JavaScript calls length)."""
    return len(text.encode(_CODEC, _ERRORS)) // 2
