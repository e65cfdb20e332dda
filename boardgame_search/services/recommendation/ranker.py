from __future__ import annotations

from typing import List, Tuple

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from boardgame_search.errors import EmbeddingDimensionError


def cosine_scores(query_vector: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Cosine similarity of one query vector against every row of `matrix`.
    Zero-norm vectors score exactly 0 against anything.
    """
    query = np.asarray(query_vector, dtype=np.float64).reshape(1, -1)
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[1] != query.shape[1]:
        raise EmbeddingDimensionError(
            f"Cannot compare a {query.shape[1]}-dimensional query with vectors of shape {matrix.shape}."
        )
    if matrix.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)
    return cosine_similarity(query, matrix)[0]


def cosine_score(a: np.ndarray, b: np.ndarray) -> float:
    b = np.asarray(b, dtype=np.float64)
    return float(cosine_scores(a, b.reshape(1, -1))[0])


def rank_by_similarity(scores: np.ndarray, top_k: int) -> List[Tuple[int, float]]:
    """
    Return (row index, score) pairs sorted by descending score.
    Equal scores keep their original row order.
    """
    if top_k <= 0 or len(scores) == 0:
        return []
    order = np.argsort(-np.asarray(scores), kind="stable")
    return [(int(i), float(scores[i])) for i in order[:top_k]]
