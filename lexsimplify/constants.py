"""
Project-wide constants that are unlikely to change at runtime.
"""

from typing import Final

# Dimension of the reference GloVe embeddings (glove.6B.50d)
DEFAULT_EMBEDDING_DIM: Final[int] = 50

# Embedding records are `word,v1,...,vD`
DEFAULT_FIELD_DELIMITER: Final[str] = ","

DEFAULT_BATCH_SIZE: Final[int] = 1000

OUTPUT_SEPARATOR: Final[str] = " "

FILE_ENCODING: Final[str] = "utf-8"

DEFAULT_TOP_K: Final[int] = 5
