"""
Line-oriented file utilities for embeddings files, word lists and text.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .constants import FILE_ENCODING
from .errors import LoadError
from .logging_utils import get_logger


logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _read_error(path: PathLike, exc: Exception) -> LoadError:
    if isinstance(exc, UnicodeDecodeError):
        message = f"'{path}' is not valid {FILE_ENCODING} text: {exc}"
    else:
        message = f"Could not read '{path}': {exc}"
    logger.error("%s", message)
    return LoadError(message)


def count_lines(path: PathLike) -> int:
    """
    Count the lines of a text file. Used to size load progress reporting.
    """
    try:
        with open(path, "r", encoding=FILE_ENCODING) as handle:
            return sum(1 for _ in handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise _read_error(path, exc) from exc


def iter_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, line)`` pairs, 1-indexed, with the line terminator
    removed. I/O failures surface as :class:`LoadError`.
    """
    try:
        with open(path, "r", encoding=FILE_ENCODING) as handle:
            for line_number, line in enumerate(handle, start=1):
                yield line_number, line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise _read_error(path, exc) from exc


def load_word_list(path: PathLike) -> List[str]:
    """
    Load a word list, one word per line.

    Surrounding whitespace is stripped and blank lines are ignored.
    """
    logger.info("Loading word list '%s'", path)
    words = [line.strip() for _, line in iter_lines(path) if line.strip()]
    logger.info("Loaded %d words from '%s'", len(words), path)
    return words


def load_text(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding=FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise _read_error(path, exc) from exc


def write_text_atomic(path: PathLike, text: str) -> None:
    """
    Write ``text`` to ``path`` through a temporary file in the same directory.

    The destination is replaced only once the whole content is on disk, so a
    failed write never truncates an existing file.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=FILE_ENCODING) as handle:
            handle.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    logger.info("Wrote %d characters to '%s'", len(text), target)
