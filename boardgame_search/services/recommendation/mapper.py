from __future__ import annotations

from typing import Any, Dict

from boardgame_search.dtos.game_dtos import GameRecord


def _base_game_payload(record: GameRecord) -> Dict[str, Any]:
    """
    Extract the common payload used across search responses.
    """
    return {
        "name": record.name,
        "yearPublished": record.year_published,
        "minPlayers": record.min_players,
        "maxPlayers": record.max_players,
        "playTime": record.play_time,
        "complexityAverage": record.complexity_average,
        "ratingAverage": record.rating_average,
        "mechanics": record.mechanics,
        "domains": record.domains,
        "bggRank": record.bgg_rank,
    }


def record_to_search_result(record: GameRecord, score: float) -> Dict[str, Any]:
    """
    Map a ranked record to the search result handed to the agent layer.
    """
    payload = _base_game_payload(record)
    payload["similarity"] = f"{score:.3f}"
    return payload


def record_to_game_dict(record: GameRecord) -> Dict[str, Any]:
    """
    Map a record to the full public game representation.
    """
    payload = _base_game_payload(record)
    payload.update(
        {
            "id": record.id,
            "minAge": record.min_age,
            "usersRated": record.users_rated,
            "ownedUsers": record.owned_users,
        }
    )
    return payload
