"""
Word vector store variants and exports.
"""

from .base import InMemoryWordStore, WordVectorStore
from .embedding_store import EmbeddingStore
from .restricted_vocabulary import RestrictedVocabulary

__all__ = [
    "WordVectorStore",
    "InMemoryWordStore",
    "EmbeddingStore",
    "RestrictedVocabulary",
]
