"""
Source embedding store loaded from a flat, delimited text file.

Each line of the file holds one record::

    word,v1,v2,...,vD

with exactly ``D`` numeric fields after the word and no header row (the
GloVe 50d export uses ``D=50`` and commas).
"""

from __future__ import annotations

from contextlib import closing
from typing import Callable, Dict, List, Optional

import numpy as np

from ..constants import DEFAULT_EMBEDDING_DIM, DEFAULT_FIELD_DELIMITER
from ..data_loader import PathLike, count_lines, iter_lines
from ..errors import FormatError
from ..logging_utils import get_logger
from .base import InMemoryWordStore


logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


class EmbeddingStore(InMemoryWordStore):
    def __init__(
        self,
        dim: int = DEFAULT_EMBEDDING_DIM,
        delimiter: str = DEFAULT_FIELD_DELIMITER,
    ) -> None:
        if dim < 1:
            raise ValueError(f"Embedding dimension must be positive, got {dim}.")
        super().__init__(dim=dim)
        self.delimiter = delimiter

    def load(
        self,
        source: PathLike,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        """
        Load every record of ``source`` into the store.

        Args:
            source: Path to the embeddings file.
            progress_callback: Optional ``(items_done, items_total)`` hook,
                called once per line. Advisory only.

        Raises:
            FormatError: A record has the wrong number of fields or a field is
                not a number. Nothing is loaded.
            LoadError: The file could not be read. Nothing is loaded.
        """
        total = count_lines(source) if progress_callback is not None else 0
        logger.info("Loading embeddings from '%s' (dim=%d)", source, self.dim)

        vectors: Dict[str, np.ndarray] = {}
        with closing(iter_lines(source)) as lines:
            for line_number, line in lines:
                if line.strip():
                    try:
                        word, vector = self._parse_record(line, line_number)
                    except FormatError as exc:
                        logger.error("Rejected embeddings file '%s': %s", source, exc)
                        raise
                    vectors[word] = vector
                if progress_callback is not None:
                    progress_callback(line_number, max(total, line_number))

        self._publish(vectors, self.dim)
        logger.info("Loaded %d embeddings from '%s'", len(vectors), source)

    def _parse_record(self, line: str, line_number: int):
        parts: List[str] = line.split(self.delimiter)
        expected = self.dim + 1
        if len(parts) != expected:
            raise FormatError(
                f"Invalid record: expected {expected} fields, found {len(parts)}",
                line_number=line_number,
                record=line,
            )

        word = parts[0]
        if not word:
            raise FormatError("Invalid record: empty word", line_number=line_number, record=line)

        try:
            vector = np.array([float(value) for value in parts[1:]], dtype=np.float64)
        except ValueError as exc:
            raise FormatError(
                f"Invalid record: {exc}", line_number=line_number, record=line
            ) from exc
        return word, vector
