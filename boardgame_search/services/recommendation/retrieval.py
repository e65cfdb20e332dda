from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from boardgame_search.dtos.game_dtos import GameRecord
from boardgame_search.errors import EmbeddingDimensionError
from boardgame_search.services.embedding_service import EmbeddingService
from boardgame_search.services.recommendation.ranker import cosine_scores, rank_by_similarity

logger = logging.getLogger(__name__)


class SimilarityIndex:
    """
    Brute-force cosine index over one embedding row per game record.
    Every query rescans all rows.
    """

    def __init__(
        self,
        records: Sequence[GameRecord],
        vectors: np.ndarray,
        embedding_service: EmbeddingService,
    ) -> None:
        if len(records) != len(vectors):
            raise ValueError(
                f"Got {len(records)} records but {len(vectors)} vectors."
            )
        if len(vectors) and vectors.shape[1] != embedding_service.dimension:
            raise EmbeddingDimensionError(
                f"Index vectors have dimension {vectors.shape[1]}, "
                f"embedder produces {embedding_service.dimension}."
            )
        self._records = tuple(records)
        self._vectors = vectors
        self._embedding_service = embedding_service

    def __len__(self) -> int:
        return len(self._records)

    def search(self, query_text: str, top_k: int) -> List[Tuple[GameRecord, float]]:
        if top_k <= 0 or not self._records:
            return []
        query_vector = self._embedding_service.embed(query_text)
        scores = cosine_scores(query_vector, self._vectors)
        ranked = rank_by_similarity(scores, top_k)
        logger.debug("Query %r matched %d of %d games", query_text, len(ranked), len(self))
        return [(self._records[index], score) for index, score in ranked]
