# file: src/tape_cipher/generator.py

"""
Random tape generation.

Tapes are drawn from a numpy Generator that the caller may inject (a
Generator instance or an integer seed) so that generation is reproducible
in tests. The keystream is not meant to be secure.
"""

import logging
import re
from typing import Optional, Union

import numpy as np

from .errors import TapeGenerationError
from .tape import format_tape

logger = logging.getLogger(__name__)


DEFAULT_MAX_VALUE = 255
MAX_TAPE_LENGTH = 1000

_INT64_MAX = np.iinfo(np.int64).max

# Leading integer prefix, same rule as JavaScript parseInt(s, 10)
_INT_PREFIX_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Resolve a random source into a numpy Generator.

    Args:
        rng: Existing Generator (returned as-is), integer seed, or None
             for a freshly seeded generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def clamp_tape_length(value, default: int = 0, maximum: int = MAX_TAPE_LENGTH) -> int:
    """
    Turn a user-supplied length into a usable one in [1, maximum].

    Strings are read by their leading integer ('12abc' -> 12); anything
    unreadable falls back to `default` before clamping.

    Example:
        >>> clamp_tape_length("5000")
        1000
        >>> clamp_tape_length("abc")
        1
    """
    if isinstance(value, str):
        match = _INT_PREFIX_PATTERN.match(value)
        length = int(match.group(1)) if match else default
    elif value is None:
        length = default
    else:
        length = int(value)

    if not length:
        length = default

    return max(1, min(maximum, length))


def generate_random_tape(
    length: int,
    max_value: int = DEFAULT_MAX_VALUE,
    rng: RandomSource = None
) -> str:
    """
    Generate a random tape string.

    Args:
        length: Number of values. Zero or negative gives an empty tape.
        max_value: Inclusive upper bound of each value (lower bound is 0)
        rng: numpy Generator, integer seed, or None

    Returns:
        Comma separated decimal integers, e.g. "17,203,5"

    Raises:
        TapeGenerationError: If length exceeds MAX_TAPE_LENGTH or max_value
                             is negative or too large for int64 sampling

    Example:
        >>> tape = generate_random_tape(5, 9, rng=42)
        >>> len(tape.split(","))
        5
    """
    if length > MAX_TAPE_LENGTH:
        raise TapeGenerationError(
            f"Tape length {length} exceeds maximum of {MAX_TAPE_LENGTH}",
            length=length,
            max_value=max_value
        )
    if max_value < 0 or max_value >= _INT64_MAX:
        raise TapeGenerationError(
            f"max_value must be in [0, {_INT64_MAX - 1}], got {max_value}",
            length=length,
            max_value=max_value
        )
    if length <= 0:
        return ""

    generator = make_rng(rng)
    values = generator.integers(0, max_value, size=length, endpoint=True)

    logger.debug(f"Generated tape of {length} values in [0, {max_value}]")
    return format_tape(values)
