from typing import List

from pydantic import BaseModel, ConfigDict, model_validator


def _split_tags(value: str) -> List[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]


class GameRecord(BaseModel):
    """
    One board game parsed from the dataset file.
    Numeric fields default to zero when the source value cannot be parsed.
    `searchable_text` is derived once at load time and is the only text
    fed to the embedder.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    year_published: int = 0
    min_players: int = 0
    max_players: int = 0
    play_time: int = 0
    min_age: int = 0
    users_rated: int = 0
    rating_average: float = 0.0
    bgg_rank: int = 0
    complexity_average: float = 0.0
    owned_users: int = 0
    mechanics: str = ""  # comma-joined tags, source order
    domains: str = ""
    searchable_text: str = ""

    @property
    def mechanics_list(self) -> List[str]:
        return _split_tags(self.mechanics)

    @property
    def domains_list(self) -> List[str]:
        return _split_tags(self.domains)


class AllowListEntry(BaseModel):
    """
    Canonical (persian, english) name pair from the allow-list file.
    Either name may be empty, but not both.
    """
    model_config = ConfigDict(frozen=True)

    persian_name: str = ""
    english_name: str = ""

    @model_validator(mode="after")
    def _require_a_name(self) -> "AllowListEntry":
        if not self.persian_name.strip() and not self.english_name.strip():
            raise ValueError("Allow-list entry needs a persian or an english name.")
        return self
