"""
Lexical simplification against a restricted vocabulary using word embeddings.
"""

from .errors import (
    DimensionMismatchError,
    FormatError,
    LexSimplifyError,
    LoadError,
    ProcessingError,
)
from .pipeline import (
    contains_word,
    load_restricted_vocabulary,
    load_vector_store,
    process_text,
    size,
)

__all__ = [
    "LexSimplifyError",
    "LoadError",
    "FormatError",
    "ProcessingError",
    "DimensionMismatchError",
    "load_vector_store",
    "load_restricted_vocabulary",
    "process_text",
    "contains_word",
    "size",
]

__version__ = "0.1.0"
