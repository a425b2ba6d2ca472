# file: src/tape_cipher/tape.py

"""
Tape parsing.

A tape is written as free-form text: integers separated by any run of
commas, semicolons or whitespace. Parsing is total: a token that is not a
finite number contributes 0 instead of raising.
"""

import logging
import math
import re
from typing import List, Optional

logger = logging.getLogger(__name__)


TAPE_SEPARATOR = ","

# JavaScript's \s set; Python's Unicode \s lacks U+FEFF and adds \x1c-\x1f
_SPLIT_PATTERN = re.compile(
    r"[,;\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

# Numeric literal grammar accepted for a tape token (same as JavaScript Number())
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII
)
_RADIX_PATTERN = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def _token_to_float(token: str) -> float:
    """
    Read one token as a double precision value.

    Returns NaN for anything outside the literal grammar, including the
    spellings Python's float() is lenient about ('1_000', 'nan', 'inf').
    """
    if _DECIMAL_PATTERN.fullmatch(token):
        return float(token)

    match = _RADIX_PATTERN.fullmatch(token)
    if match:
        base = _RADIX_BASES[match.group(1).lower()]
        try:
            return float(int(match.group(2), base))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return math.nan


def parse_token(token: str) -> int:
    """
    Convert a single tape token to an integer.

    Finite values are floored ('2.7' -> 2, '-2.7' -> -3), everything
    else becomes 0.
    """
    value = _token_to_float(token)
    if not math.isfinite(value):
        logger.debug(f"Tape token {token!r} is not a finite number, using 0")
        return 0
    return math.floor(value)


def split_tape(raw: Optional[str]) -> List[str]:
    """Split a tape string into its non-empty tokens."""
    if not raw:
        return []
    return [token for token in _SPLIT_PATTERN.split(raw) if token]


def parse_tape(raw: Optional[str]) -> List[int]:
    """
    Parse a tape string into an ordered list of integers.

    Args:
        raw: Tape text such as "1, 2; 3 4". None and "" are allowed.

    Returns:
        Integers in token order (no deduplication). Empty list when the
        string holds no tokens.

    Example:
        >>> parse_tape("1, a, 3;;4   5")
        [1, 0, 3, 4, 5]
    """
    return [parse_token(token) for token in split_tape(raw)]


def format_tape(values) -> str:
    """Serialize integers back into the comma separated tape format."""
    return TAPE_SEPARATOR.join(str(int(value)) for value in values)
