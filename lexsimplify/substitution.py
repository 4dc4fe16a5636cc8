"""
Per-word substitution policy.
"""

from __future__ import annotations

from .errors import DimensionMismatchError
from .similarity import find_nearest
from .vector_store.base import WordVectorStore


def substitute(
    word: str,
    source_store: WordVectorStore,
    restricted_vocabulary: WordVectorStore,
) -> str:
    """
    Map ``word`` onto the restricted vocabulary.

    1. Words already in the restricted vocabulary are kept.
    2. Words without an embedding in the source store are kept.
    3. Otherwise the most similar restricted word is returned, or ``word``
       itself when the vocabulary is empty.
    """
    if restricted_vocabulary.contains_word(word):
        return word

    vector = source_store.get_embedding(word)
    if vector is None:
        return word

    nearest = find_nearest(vector, restricted_vocabulary)
    return word if nearest is None else nearest


class WordSubstitutionPolicy:
    """
    :func:`substitute` bound to a pair of stores.
    """

    def __init__(self, source_store: WordVectorStore, restricted_vocabulary: WordVectorStore) -> None:
        if (
            source_store.dim is not None
            and restricted_vocabulary.dim is not None
            and source_store.dim != restricted_vocabulary.dim
        ):
            raise DimensionMismatchError(
                f"Source store dimension {source_store.dim} does not match "
                f"restricted vocabulary dimension {restricted_vocabulary.dim}."
            )
        self.source_store = source_store
        self.restricted_vocabulary = restricted_vocabulary

    def substitute(self, word: str) -> str:
        return substitute(word, self.source_store, self.restricted_vocabulary)

    __call__ = substitute
