import logging
from typing import Any, Dict, List, Optional

from boardgame_search.config.config import Config
from boardgame_search.services.cache_service import GameDataCache
from boardgame_search.services.recommendation import (
    paginate,
    record_to_game_dict,
    record_to_search_result,
)

logger = logging.getLogger(__name__)


class RecommendationService:
    def __init__(self, cache: GameDataCache, default_top_k: int = Config.DEFAULT_TOP_K) -> None:
        self.cache = cache
        self.default_top_k = default_top_k

    def search_games(self, query_text: str, top_k: Optional[int] = None) -> List[Dict[str, Any]]:
        """Rank cached games by lexical similarity to a free-text query."""
        if top_k is None:
            top_k = self.default_top_k
        logger.info("Searching for %r (top %d results)", query_text, top_k)
        ranked = self.cache.index().search(query_text, top_k)
        logger.info("Top %d matches found", len(ranked))
        return [record_to_search_result(record, score) for record, score in ranked]

    def recommend_games(self, query_text: str, top_k: Optional[int] = None) -> Dict[str, Any]:
        """
        Search and wrap the results in the payload consumed by the
        recommendation workflow.
        """
        games = self.search_games(query_text, top_k)
        return {
            "games": games,
            "query": query_text,
            "resultsCount": len(games),
        }

    def get_game_by_id(self, game_id: str) -> Optional[Dict[str, Any]]:
        """Return the first cached game with this dataset id."""
        for record in self.cache.games():
            if record.id == game_id:
                return record_to_game_dict(record)
        return None

    def list_all_games(self, page: int = 1, per_page: int = 20) -> Dict[str, Any]:
        """
        Lists cached games in dataset order, one page at a time.
        """
        games = self.cache.games()
        page_records, normalized_page, normalized_per_page = paginate(games, page, per_page)
        return {
            "page": normalized_page,
            "per_page": normalized_per_page,
            "total": len(games),
            "games": [record_to_game_dict(record) for record in page_records],
        }
