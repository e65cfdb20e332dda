from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """
    Input DTO for the lexical search endpoint.
    """
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., description="Free-text description of the wanted game.")
    top_k: Optional[int] = Field(
        None,
        alias="topK",
        description="Maximum number of ranked games to return (default 5). Zero or less returns none.",
    )


class GameSearchResultDTO(BaseModel):
    """
    A ranked game as returned to the agent/workflow layer.
    """
    name: str
    yearPublished: int
    minPlayers: int
    maxPlayers: int
    playTime: int
    complexityAverage: float
    ratingAverage: float
    mechanics: str
    domains: str
    bggRank: int
    similarity: str  # score formatted to 3 decimal places


class SearchResponse(BaseModel):
    games: List[GameSearchResultDTO]
    query: str
    resultsCount: int


class ValidateNameRequest(BaseModel):
    """
    Input DTO for the allow-list validation endpoint.
    """
    gameName: str = Field(..., description="Board game name to validate (English or Persian).")


class NameValidationResult(BaseModel):
    """
    Whether a candidate name exists in the allow-list, with its canonical spelling.
    """
    exists: bool
    persianName: Optional[str] = None
    englishName: Optional[str] = None
