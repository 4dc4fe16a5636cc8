"""
Abstract base interface for word vector stores.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from ..errors import DimensionMismatchError


class WordVectorStore(ABC):
    """
    Read-only mapping from word to embedding vector.

    Stores are populated once by :meth:`load` and only read afterwards, so a
    loaded store can be shared between threads without locking.
    """

    @abstractmethod
    def load(self, *args, **kwargs) -> None:
        """
        Populate the store. Either the whole load succeeds or the store is
        left as it was before the call.
        """

    @property
    @abstractmethod
    def dim(self) -> Optional[int]:
        """Dimension of every vector in the store."""

    @abstractmethod
    def get_embedding(self, word: str) -> Optional[np.ndarray]:
        """Return the vector for ``word`` or ``None`` when it is unknown."""

    @abstractmethod
    def contains_word(self, word: str) -> bool:
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def items(self) -> Iterator[Tuple[str, np.ndarray]]:
        """Yield ``(word, vector)`` pairs in insertion order."""

    def as_matrix(self) -> Tuple[Tuple[str, ...], np.ndarray]:
        """
        Return the store as ``(words, matrix)`` with one row per word, in
        :meth:`items` order.
        """
        pairs = list(self.items())
        return _stack(pairs, self.dim)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        for word, _ in self.items():
            yield word


class InMemoryWordStore(WordVectorStore):
    """
    Dictionary-backed store shared by the concrete variants.

    Subclasses build a complete mapping during ``load`` and hand it to
    :meth:`_publish`; nothing is visible to readers before that.
    """

    def __init__(self, dim: Optional[int] = None) -> None:
        self._dim = dim
        self._vectors: Dict[str, np.ndarray] = {}
        self._matrix: Tuple[Tuple[str, ...], np.ndarray] = _stack([], dim)

    @property
    def dim(self) -> Optional[int]:
        return self._dim

    def get_embedding(self, word: str) -> Optional[np.ndarray]:
        return self._vectors.get(word)

    def contains_word(self, word: str) -> bool:
        return word in self._vectors

    def size(self) -> int:
        return len(self._vectors)

    def items(self) -> Iterator[Tuple[str, np.ndarray]]:
        return iter(self._vectors.items())

    def as_matrix(self) -> Tuple[Tuple[str, ...], np.ndarray]:
        return self._matrix

    def _publish(self, vectors: Dict[str, np.ndarray], dim: Optional[int]) -> None:
        for word, vector in vectors.items():
            if dim is not None and vector.shape != (dim,):
                raise DimensionMismatchError(
                    f"Vector for '{word}' has shape {vector.shape}, expected ({dim},)."
                )
            vector.setflags(write=False)
        matrix = _stack(list(vectors.items()), dim)
        # Swap in the finished structures together.
        self._vectors, self._matrix, self._dim = vectors, matrix, dim

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, dim={self.dim})"


def _stack(
    pairs: list, dim: Optional[int]
) -> Tuple[Tuple[str, ...], np.ndarray]:
    words = tuple(word for word, _ in pairs)
    if pairs:
        matrix = np.vstack([vector for _, vector in pairs]).astype(np.float64, copy=False)
    else:
        matrix = np.empty((0, dim or 0), dtype=np.float64)
    matrix.setflags(write=False)
    return words, matrix
