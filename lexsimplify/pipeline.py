"""
Entry points used by the command line (and any other front end).

Load the two stores once, then call :func:`process_text` as often as needed.
"""

from __future__ import annotations

from typing import Optional

from .constants import DEFAULT_BATCH_SIZE, DEFAULT_EMBEDDING_DIM, DEFAULT_FIELD_DELIMITER
from .data_loader import PathLike
from .processor import ConcurrentTextProcessor, ProgressCallback
from .vector_store import EmbeddingStore, RestrictedVocabulary, WordVectorStore


def load_vector_store(
    path: PathLike,
    dim: int = DEFAULT_EMBEDDING_DIM,
    delimiter: str = DEFAULT_FIELD_DELIMITER,
    progress_callback: Optional[ProgressCallback] = None,
) -> EmbeddingStore:
    store = EmbeddingStore(dim=dim, delimiter=delimiter)
    store.load(path, progress_callback=progress_callback)
    return store


def load_restricted_vocabulary(path: PathLike, source_store: WordVectorStore) -> RestrictedVocabulary:
    vocabulary = RestrictedVocabulary(source_store)
    vocabulary.load(path)
    return vocabulary


def process_text(
    input_path: PathLike,
    output_path: PathLike,
    source_store: WordVectorStore,
    restricted_vocabulary: WordVectorStore,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_workers: Optional[int] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> int:
    processor = ConcurrentTextProcessor(
        source_store,
        restricted_vocabulary,
        batch_size=batch_size,
        max_workers=max_workers,
        progress_callback=progress_callback,
    )
    return processor.process_text(input_path, output_path)


def contains_word(store: WordVectorStore, word: str) -> bool:
    return store.contains_word(word)


def size(store: WordVectorStore) -> int:
    return store.size()
