from __future__ import annotations

import re
from typing import Iterable, List, Tuple

import numpy as np
from tqdm import tqdm

# Dimension layout of the lexical feature vector. Changing any of these
# constants or the keyword tuple changes every search ranking, so bump
# FEATURE_SCHEMA_VERSION with it.
FEATURE_SCHEMA_VERSION = 1
EMBEDDING_DIMENSION = 100
LETTER_DIMENSIONS = 26
WORD_COUNT_INDEX = 26
AVERAGE_WORD_LENGTH_INDEX = 27
KEYWORD_OFFSET = 30

FEATURE_KEYWORDS: Tuple[str, ...] = (
    "strategy", "family", "cooperative", "competitive", "card", "board", "dice",
    "puzzle", "adventure", "fantasy", "sci-fi", "war", "economic", "abstract",
    "party", "educational", "thematic", "euro", "ameritrash", "worker", "placement",
    "deck", "building", "area", "control", "engine", "tile", "resource", "management",
)

_WORD_CHARACTER = re.compile(r"\w")


def _count_occurrences(text: str, keyword: str) -> int:
    count = 0
    start = text.find(keyword)
    while start != -1:
        count += 1
        start = text.find(keyword, start + 1)
    return count


def embed_text(text: str) -> np.ndarray:
    """
    Map text to a fixed-length, L2-normalized lexical feature vector.

    Dimensions 0-25 count the letters a-z, 26 holds the word count, 27 the
    average word length, and 30 onwards the occurrences of each entry of
    FEATURE_KEYWORDS. Text with no letters, words or keywords maps to the
    all-zero vector.
    """
    normalized = text.lower()
    features = np.zeros(EMBEDDING_DIMENSION, dtype=np.float64)

    for char in normalized:
        if "a" <= char <= "z":
            features[ord(char) - ord("a")] += 1

    words = [token for token in normalized.split() if _WORD_CHARACTER.search(token)]
    if words:
        features[WORD_COUNT_INDEX] = len(words)
        features[AVERAGE_WORD_LENGTH_INDEX] = sum(len(word) for word in words) / len(words)

    for index, keyword in enumerate(FEATURE_KEYWORDS):
        features[KEYWORD_OFFSET + index] = _count_occurrences(normalized, keyword)

    norm = np.linalg.norm(features)
    if norm > 0:
        features /= norm
    return features


class EmbeddingService:
    """
    In-process lexical embedder used for both game records and queries.
    """

    dimension: int = EMBEDDING_DIMENSION

    def embed(self, text: str) -> np.ndarray:
        return embed_text(text)

    def get_embeddings(self, texts: Iterable[str], show_progress: bool = False) -> np.ndarray:
        """
        Generate one embedding row per text, preserving input order.
        """
        texts = list(texts)
        embeddings: List[np.ndarray] = [
            embed_text(text)
            for text in tqdm(texts, desc="Embedding games", disable=not show_progress)
        ]
        if not embeddings:
            return np.zeros((0, EMBEDDING_DIMENSION), dtype=np.float64)
        return np.vstack(embeddings)
