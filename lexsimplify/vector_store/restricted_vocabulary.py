"""
Restricted vocabulary: the target words substitutions must resolve to.

The allowed words come from a plain word list while their vectors are taken
from a (usually much larger) source store. Words of the list the source does
not know are dropped.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from ..data_loader import PathLike, load_word_list
from ..logging_utils import get_logger
from .base import InMemoryWordStore, WordVectorStore


logger = get_logger(__name__)


class RestrictedVocabulary(InMemoryWordStore):
    def __init__(self, source_store: Optional[WordVectorStore] = None) -> None:
        super().__init__(dim=source_store.dim if source_store is not None else None)
        self.source_store = source_store
        self.skipped = 0

    def load(
        self,
        word_list_source: PathLike,
        source_store: Optional[WordVectorStore] = None,
    ) -> None:
        """
        Keep every word of ``word_list_source`` known to the source store.

        Raises:
            LoadError: The word list could not be read. Nothing is loaded.
        """
        source = source_store if source_store is not None else self.source_store
        if source is None:
            raise ValueError("A source store is required to load a restricted vocabulary.")

        words = load_word_list(word_list_source)

        vectors: Dict[str, np.ndarray] = {}
        skipped = 0
        for word in words:
            if word in vectors:
                continue
            embedding = source.get_embedding(word)
            if embedding is None:
                logger.debug("Skipping '%s': no embedding in source store", word)
                skipped += 1
                continue
            vector = np.asarray(embedding, dtype=np.float64)
            # Read-only vectors are shared; writable ones belong to the source and are copied.
            vectors[word] = vector.copy() if vector.flags.writeable else vector

        self._publish(vectors, source.dim)
        self.source_store = source
        self.skipped = skipped
        logger.info(
            "Restricted vocabulary loaded: %d words kept, %d skipped",
            len(vectors),
            skipped,
        )
