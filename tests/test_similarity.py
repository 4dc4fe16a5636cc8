"""
Tests for cosine similarity and the nearest-neighbour scan.
"""

import math

import numpy as np
import pytest

from conftest import write_embeddings, write_words
from lexsimplify.errors import DimensionMismatchError
from lexsimplify.similarity import cosine_similarity, find_nearest, rank_nearest
from lexsimplify.vector_store import EmbeddingStore, RestrictedVocabulary


def make_vocabulary(tmp_path, vectors, dim=2):
    store = EmbeddingStore(dim=dim)
    store.load(write_embeddings(tmp_path / "vocab_embeddings.csv", vectors))
    vocabulary = RestrictedVocabulary(store)
    vocabulary.load(write_words(tmp_path / "vocab.txt", list(vectors)))
    return vocabulary


def test_self_similarity_is_one():
    rng = np.random.default_rng(7)
    for _ in range(20):
        v = rng.normal(size=50)
        assert cosine_similarity(v, v) == pytest.approx(1.0, abs=1e-9)


def test_similarity_is_symmetric():
    rng = np.random.default_rng(11)
    for _ in range(20):
        a, b = rng.normal(size=50), rng.normal(size=50)
        assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_similarity_known_values():
    assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)
    assert cosine_similarity([1, 0], [-1, 0]) == pytest.approx(-1.0)
    assert cosine_similarity([1, 1], [2, 2]) == pytest.approx(1.0)


def test_zero_vector_similarity_is_minus_infinity():
    assert cosine_similarity([0, 0], [1, 0]) == -math.inf
    assert cosine_similarity([1, 0], [0, 0]) == -math.inf


def test_similarity_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        cosine_similarity([1, 0], [1, 0, 0])


def test_find_nearest_scaled_query(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0], "b": [0, 1], "c": [0.9, 0.1]})
    assert find_nearest(np.array([1.8, 0.2]), vocabulary) == "c"


def test_find_nearest_in_fifty_dimensions(tmp_path):
    def pad(values):
        return list(values) + [0.0] * (50 - len(values))

    vocabulary = make_vocabulary(
        tmp_path,
        {"a": pad([1, 0]), "b": pad([0, 1]), "c": pad([0.9, 0.1])},
        dim=50,
    )
    assert find_nearest(np.array(pad([1.8, 0.2])), vocabulary) == "c"


def test_find_nearest_empty_vocabulary(empty_vocabulary):
    assert find_nearest(np.array([1.0, 0.0]), empty_vocabulary) is None


def test_tie_goes_to_first_inserted(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"first": [1, 0], "second": [1, 0], "other": [0, 1]})
    assert find_nearest(np.array([1.0, 0.0]), vocabulary) == "first"


def test_tie_order_follows_word_list(tmp_path):
    store = EmbeddingStore(dim=2)
    store.load(write_embeddings(tmp_path / "e.csv", {"first": [1, 0], "second": [2, 0]}))
    vocabulary = RestrictedVocabulary(store)
    vocabulary.load(write_words(tmp_path / "v.txt", ["second", "first"]))

    assert find_nearest(np.array([3.0, 0.0]), vocabulary) == "second"


def test_zero_candidate_never_wins(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"zero": [0, 0], "opposite": [-1, 0]})
    assert find_nearest(np.array([1.0, 0.0]), vocabulary) == "opposite"


def test_only_zero_candidates_gives_none(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"zero": [0, 0]})
    assert find_nearest(np.array([1.0, 0.0]), vocabulary) is None


def test_zero_query_gives_none(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0]})
    assert find_nearest(np.zeros(2), vocabulary) is None


def test_query_dimension_mismatch(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0]})
    with pytest.raises(DimensionMismatchError):
        find_nearest(np.array([1.0, 0.0, 0.0]), vocabulary)


def test_find_nearest_matches_pairwise_scan(tmp_path):
    rng = np.random.default_rng(3)
    vectors = {f"w{i}": rng.normal(size=8).tolist() for i in range(40)}
    vocabulary = make_vocabulary(tmp_path, vectors, dim=8)

    for _ in range(10):
        query = rng.normal(size=8)
        best_word, best_score = None, -math.inf
        for word, vector in vocabulary.items():
            score = cosine_similarity(query, vector)
            if score > best_score:
                best_word, best_score = word, score
        assert find_nearest(query, vocabulary) == best_word


def test_rank_nearest_orders_best_first(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0], "b": [0, 1], "c": [0.9, 0.1], "z": [0, 0]})
    ranked = rank_nearest(np.array([1.0, 0.0]), vocabulary, k=10)

    assert [word for word, _ in ranked] == ["a", "c", "b"]
    assert ranked[0][1] == pytest.approx(1.0)


def test_rank_nearest_limits_results(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0], "b": [0, 1], "c": [0.9, 0.1]})
    assert len(rank_nearest(np.array([1.0, 0.0]), vocabulary, k=2)) == 2


def test_rank_nearest_rejects_bad_k(tmp_path):
    vocabulary = make_vocabulary(tmp_path, {"a": [1, 0]})
    with pytest.raises(ValueError):
        rank_nearest(np.array([1.0, 0.0]), vocabulary, k=0)
