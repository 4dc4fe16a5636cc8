"""
Exact nearest-neighbour search by cosine similarity.

The search is a brute-force scan over every entry of a store, O(n * D) per
query. Two rules keep results deterministic:

* Ties go to the entry seen first in the store's iteration (insertion) order.
* A zero-magnitude vector has similarity ``-inf`` with everything, so it can
  never be selected; a zero query therefore matches nothing.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .constants import DEFAULT_TOP_K
from .errors import DimensionMismatchError
from .vector_store.base import WordVectorStore


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Cannot compare vectors of shape {a.shape} and {b.shape}."
        )
    denom = np.linalg.norm(a) * np.linalg.norm(b)
    if denom == 0.0:
        return float("-inf")
    return float(np.dot(a, b) / denom)


def _scores(query: np.ndarray, vocabulary: WordVectorStore) -> Tuple[Tuple[str, ...], np.ndarray]:
    words, matrix = vocabulary.as_matrix()
    if not words:
        return words, np.empty(0, dtype=np.float64)

    query = np.asarray(query, dtype=np.float64)
    if query.ndim != 1 or query.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(
            f"Query of shape {query.shape} does not match vocabulary dimension {matrix.shape[1]}."
        )

    query_norm = np.linalg.norm(query)
    if query_norm == 0.0:
        return words, np.full(len(words), -np.inf)

    norms = np.linalg.norm(matrix, axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        scores = (matrix @ query) / (norms * query_norm)
    scores[(norms == 0.0) | np.isnan(scores)] = -np.inf
    return words, scores


def find_nearest(query: np.ndarray, vocabulary: WordVectorStore) -> Optional[str]:
    """
    Return the vocabulary word most similar to ``query``.

    Returns ``None`` when the vocabulary is empty or no entry has a defined
    similarity with the query.
    """
    words, scores = _scores(query, vocabulary)
    if not words:
        return None
    # argmax returns the first maximum, i.e. insertion order breaks ties.
    best = int(np.argmax(scores))
    if scores[best] == -np.inf:
        return None
    return words[best]


def rank_nearest(
    query: np.ndarray,
    vocabulary: WordVectorStore,
    k: int = DEFAULT_TOP_K,
) -> List[Tuple[str, float]]:
    """
    Return up to ``k`` ``(word, similarity)`` pairs, best first.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}.")
    words, scores = _scores(query, vocabulary)
    order = np.argsort(-scores, kind="stable")
    results: List[Tuple[str, float]] = []
    for index in order[:k]:
        if scores[index] == -np.inf:
            break
        results.append((words[index], float(scores[index])))
    return results
