"""Game loading, matrix construction and built-in textbook games."""

from typing import Dict, List

from .matrix_factory import MatrixGame, build_matrix, create_matrix_game
from .loader import GameFile, load_game_file, load_games, parse_game_file

from .prisoners_dilemma import GAME as PRISONERS_DILEMMA
from .battle_of_sexes import GAME as BATTLE_OF_SEXES
from .chicken import GAME as CHICKEN
from .stag_hunt import GAME as STAG_HUNT
from .matching_pennies import GAME as MATCHING_PENNIES
from .coordination import GAME as COORDINATION

GAME_REGISTRY: Dict[str, MatrixGame] = {
    "prisoners_dilemma": PRISONERS_DILEMMA,
    "battle_of_the_sexes": BATTLE_OF_SEXES,
    "chicken": CHICKEN,
    "stag_hunt": STAG_HUNT,
    "matching_pennies": MATCHING_PENNIES,
    "coordination_game": COORDINATION,
}


def get_game(game_id: str) -> MatrixGame:
    """Retrieve a built-in game by ID.

    Args:
        game_id: The unique identifier of the game.

    Returns:
        The MatrixGame for the requested game.

    Raises:
        KeyError: If the game_id is not found.
    """
    if game_id in GAME_REGISTRY:
        return GAME_REGISTRY[game_id]
    available = ", ".join(GAME_REGISTRY.keys())
    raise KeyError(f"Game '{game_id}' not found. Available games: {available}")


def list_games() -> List[str]:
    """List all built-in game IDs."""
    return list(GAME_REGISTRY.keys())


def get_game_names() -> Dict[str, str]:
    """Get a mapping of game_id to display name."""
    return {game_id: game.name for game_id, game in GAME_REGISTRY.items()}


def builtin_game_file() -> GameFile:
    """Bundle the built-in games as a game file labelled with their names."""
    games = list(GAME_REGISTRY.values())
    return GameFile(
        games=[game.record for game in games],
        labels={i: game.name for i, game in enumerate(games, start=1)},
    )


__all__ = [
    "GAME_REGISTRY",
    "MatrixGame",
    "GameFile",
    "build_matrix",
    "create_matrix_game",
    "parse_game_file",
    "load_game_file",
    "load_games",
    "get_game",
    "list_games",
    "get_game_names",
    "builtin_game_file",
]
