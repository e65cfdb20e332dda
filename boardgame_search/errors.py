class BoardGameDataError(Exception):
    """Parent class for all board game data exceptions."""

    pass


class DatasetNotFoundError(BoardGameDataError, FileNotFoundError):
    """Raised when the game dataset is absent at every candidate path."""

    pass


class AllowListNotFoundError(BoardGameDataError, FileNotFoundError):
    """Raised when the allow-list file is absent at its configured path."""

    pass


class EmbeddingDimensionError(BoardGameDataError, ValueError):
    """Raised when two vectors of different dimension are compared."""

    pass
