"""normalform - solution concepts for 2x2 normal-form games."""

from .core import (
    DEFAULT_GAMES_FILE,
    DEFAULT_GAME_LABELS,
    GameFileError,
    FileReadError,
    ParseError,
    Payoff,
    PayoffMatrix,
    GameRecord,
    DominantStrategy,
    DominanceResult,
    GameAnalysis,
    outcome_label,
)
from .games import (
    GAME_REGISTRY,
    MatrixGame,
    build_matrix,
    load_game_file,
    load_games,
    parse_game_file,
    get_game,
    list_games,
)
from .analytics import (
    find_nash_equilibria,
    find_pareto_efficient,
    find_dominant_strategies,
    dominant_strategy_equilibria,
    analyze_game,
    format_report,
    AnalysisService,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DEFAULT_GAMES_FILE",
    "DEFAULT_GAME_LABELS",
    # Errors
    "GameFileError",
    "FileReadError",
    "ParseError",
    # Types
    "Payoff",
    "PayoffMatrix",
    "GameRecord",
    "DominantStrategy",
    "DominanceResult",
    "GameAnalysis",
    "outcome_label",
    # Games
    "GAME_REGISTRY",
    "MatrixGame",
    "build_matrix",
    "load_game_file",
    "load_games",
    "parse_game_file",
    "get_game",
    "list_games",
    # Analytics
    "find_nash_equilibria",
    "find_pareto_efficient",
    "find_dominant_strategies",
    "dominant_strategy_equilibria",
    "analyze_game",
    "format_report",
    "AnalysisService",
]
