# file: src/tape_cipher/text_io.py

"""
Text file source and sink.

Cipher text can contain unpaired surrogates, which strict UTF-8 refuses
to encode; files are therefore written and read with 'surrogatepass' so
a saved result loads back to the same string.
"""

import codecs
import logging
from pathlib import Path
from typing import Union

from .cipher import ENCRYPT, DECRYPT
from .errors import TextSourceError, UnknownModeError

logger = logging.getLogger(__name__)


DEFAULT_ENCODING = "utf-8"

BOM = "\ufeff"

DEFAULT_OUTPUT_NAMES = {
    ENCRYPT: "encrypted.txt",
    DECRYPT: "decrypted.txt",
}

PathLike = Union[str, Path]


def default_output_name(mode: str) -> str:
    """File name used for a result when the caller gives none."""
    try:
        return DEFAULT_OUTPUT_NAMES[mode]
    except KeyError:
        raise UnknownModeError(f"Unknown mode: {mode!r}") from None


def read_text(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole text file.

    Raises:
        TextSourceError: If the file is missing, unreadable or not valid
                         in the given encoding
    """
    path = Path(path)
    if not path.is_file():
        raise TextSourceError(f"Text file not found: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise TextSourceError(f"Cannot read {path}: {e}") from e

    try:
        text = data.decode(encoding, "surrogatepass")
    except (UnicodeDecodeError, LookupError) as e:
        raise TextSourceError(f"Cannot decode {path} as {encoding}: {e}") from e

    # A leading byte order mark is not part of the text
    if codecs.lookup(encoding).name == "utf-8" and text.startswith(BOM):
        text = text[len(BOM):]

    logger.info(f"Loaded {len(text)} characters from {path}")
    return text


def write_text(path: PathLike, text: str, encoding: str = DEFAULT_ENCODING) -> Path:
    """
    Write text to a file, replacing any existing content.

    Returns:
        The path written
    """
    path = Path(path)
    try:
        data = text.encode(encoding, "surrogatepass")
    except (UnicodeEncodeError, LookupError) as e:
        raise TextSourceError(f"Cannot encode result as {encoding}: {e}") from e

    try:
        path.write_bytes(data)
    except OSError as e:
        raise TextSourceError(f"Cannot write {path}: {e}") from e

    logger.info(f"Saved {len(data)} bytes to {path}")
    return path
