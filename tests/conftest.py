"""
Shared test fixtures for pytest.
"""

from pathlib import Path
from typing import Dict, Iterable, Sequence

import pytest

from lexsimplify.vector_store import EmbeddingStore, RestrictedVocabulary


def write_embeddings(path: Path, vectors: Dict[str, Sequence[float]], delimiter: str = ",") -> Path:
    lines = [delimiter.join([word, *(repr(float(v)) for v in vector)]) for word, vector in vectors.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_words(path: Path, words: Iterable[str]) -> Path:
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def dog_vectors() -> Dict[str, Sequence[float]]:
    return {
        "dog": [1.0, 0.0],
        "puppy": [0.95, 0.05],
        "xyz": [0.0, 1.0],
    }


@pytest.fixture
def dog_embeddings_file(tmp_path: Path, dog_vectors) -> Path:
    return write_embeddings(tmp_path / "embeddings.csv", dog_vectors)


@pytest.fixture
def dog_store(dog_embeddings_file: Path) -> EmbeddingStore:
    store = EmbeddingStore(dim=2)
    store.load(dog_embeddings_file)
    return store


@pytest.fixture
def dog_vocabulary(tmp_path: Path, dog_store: EmbeddingStore) -> RestrictedVocabulary:
    vocabulary = RestrictedVocabulary(dog_store)
    vocabulary.load(write_words(tmp_path / "vocabulary.txt", ["dog"]))
    return vocabulary


@pytest.fixture
def empty_vocabulary(tmp_path: Path, dog_store: EmbeddingStore) -> RestrictedVocabulary:
    vocabulary = RestrictedVocabulary(dog_store)
    vocabulary.load(write_words(tmp_path / "empty.txt", []))
    return vocabulary
