"""
Configuration management for lexsimplify.

Values are primarily sourced from environment variables (a `.env` file in the
working directory is honoured).
"""

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_EMBEDDING_DIM,
    DEFAULT_FIELD_DELIMITER,
)


load_dotenv()


def _get_env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class Config:
    # Input files
    embeddings_path: str = os.getenv("LEXSIMPLIFY_EMBEDDINGS_PATH", "")
    vocabulary_path: str = os.getenv("LEXSIMPLIFY_VOCABULARY_PATH", "")

    # Embeddings file format
    embedding_dim: int = int(os.getenv("LEXSIMPLIFY_EMBEDDING_DIM", str(DEFAULT_EMBEDDING_DIM)))
    field_delimiter: str = os.getenv("LEXSIMPLIFY_FIELD_DELIMITER", DEFAULT_FIELD_DELIMITER)

    # Processing
    batch_size: int = int(os.getenv("LEXSIMPLIFY_BATCH_SIZE", str(DEFAULT_BATCH_SIZE)))
    max_workers: Optional[int] = _get_env_optional_int("LEXSIMPLIFY_MAX_WORKERS")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self, require_embeddings: bool = False, require_vocabulary: bool = False) -> None:
        if self.embedding_dim < 1:
            raise ValueError(
                f"Embedding dimension must be positive, got {self.embedding_dim}."
            )

        if not self.field_delimiter:
            raise ValueError("Field delimiter must not be empty.")

        if self.batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {self.batch_size}.")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(
                f"Worker count must be positive when set, got {self.max_workers}."
            )

        if require_embeddings and not self.embeddings_path:
            raise ValueError(
                "LEXSIMPLIFY_EMBEDDINGS_PATH must be set (or pass --embeddings)."
            )

        if require_vocabulary and not self.vocabulary_path:
            raise ValueError(
                "LEXSIMPLIFY_VOCABULARY_PATH must be set (or pass --vocabulary)."
            )
