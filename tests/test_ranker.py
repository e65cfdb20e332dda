"""
Cosine similarity and ranking tests.
"""
import numpy as np
import pytest

from boardgame_search.errors import EmbeddingDimensionError
from boardgame_search.services.embedding_service import EMBEDDING_DIMENSION, embed_text
from boardgame_search.services.recommendation import cosine_score, cosine_scores, rank_by_similarity


def test_vector_is_most_similar_to_itself():
    vector = embed_text("cooperative deck building")
    assert cosine_score(vector, vector) == pytest.approx(1.0)


def test_unnormalized_vectors_are_normalized_before_comparison():
    vector = np.arange(EMBEDDING_DIMENSION, dtype=float)
    assert cosine_score(vector, vector * 7.5) == pytest.approx(1.0)


def test_similarity_with_zero_vector_is_zero():
    zero = np.zeros(EMBEDDING_DIMENSION)
    vector = embed_text("strategy")
    assert cosine_score(vector, zero) == 0
    assert cosine_score(zero, vector) == 0
    assert cosine_score(zero, zero) == 0


def test_mismatched_dimensions_are_rejected():
    with pytest.raises(EmbeddingDimensionError):
        cosine_score(np.ones(EMBEDDING_DIMENSION), np.ones(EMBEDDING_DIMENSION - 1))


def test_scores_against_matrix():
    matrix = np.vstack([embed_text("strategy"), np.zeros(EMBEDDING_DIMENSION), embed_text("party")])
    scores = cosine_scores(embed_text("strategy"), matrix)
    assert scores.shape == (3,)
    assert scores[0] == pytest.approx(1.0)
    assert scores[1] == 0
    assert scores[2] < scores[0]


def test_ranking_is_descending_and_stable_on_ties():
    scores = np.array([0.5, 0.9, 0.5, 0.9, 0.1])
    ranked = rank_by_similarity(scores, 5)
    assert [index for index, _ in ranked] == [1, 3, 0, 2, 4]
    assert [score for _, score in ranked] == [0.9, 0.9, 0.5, 0.5, 0.1]


@pytest.mark.parametrize("top_k", [0, -1, -10])
def test_non_positive_top_k_returns_nothing(top_k):
    assert rank_by_similarity(np.array([0.3, 0.2]), top_k) == []


def test_top_k_larger_than_scores_returns_all():
    assert len(rank_by_similarity(np.array([0.3, 0.2, 0.1]), 10)) == 3
