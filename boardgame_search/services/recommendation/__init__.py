"""
Building blocks of the lexical game search: scoring, ranking, the
in-memory index and the response mapping used by `RecommendationService`.
"""

from .mapper import record_to_game_dict, record_to_search_result
from .pagination import paginate
from .ranker import cosine_score, cosine_scores, rank_by_similarity
from .retrieval import SimilarityIndex

__all__ = [
    "record_to_game_dict",
    "record_to_search_result",
    "paginate",
    "cosine_score",
    "cosine_scores",
    "rank_by_similarity",
    "SimilarityIndex",
]
