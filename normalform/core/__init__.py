"""Core module for normal-form game analysis."""

from .config import (
    DEFAULT_GAMES_FILE,
    LOG_LEVEL,
    DEFAULT_GAME_LABELS,
    OUTPUT_FORMATS,
    DEFAULT_OUTPUT_FORMAT,
    PAYOFF_FIELDS,
)
from .errors import GameFileError, FileReadError, ParseError
from .types import (
    ROW_STRATEGIES,
    COL_STRATEGIES,
    CELLS,
    Cell,
    Payoff,
    PayoffMatrix,
    GameRecord,
    DominantStrategy,
    DominanceResult,
    GameAnalysis,
    outcome_label,
)

__all__ = [
    # Configuration constants
    "DEFAULT_GAMES_FILE",
    "LOG_LEVEL",
    "DEFAULT_GAME_LABELS",
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT_FORMAT",
    "PAYOFF_FIELDS",
    # Errors
    "GameFileError",
    "FileReadError",
    "ParseError",
    # Types
    "ROW_STRATEGIES",
    "COL_STRATEGIES",
    "CELLS",
    "Cell",
    "Payoff",
    "PayoffMatrix",
    "GameRecord",
    "DominantStrategy",
    "DominanceResult",
    "GameAnalysis",
    "outcome_label",
]
