"""Loading game lists from TOML files.

A game file holds an array of ``[[game]]`` tables, each with four payoff
fields, plus an optional ``[labels]`` table naming games by their 1-based
position::

    [[game]]
    p00 = [-1, -1]
    p01 = [-3, 0]
    p10 = [0, -3]
    p11 = [-2, -2]

    [labels]
    1 = "Prisoners' dilemma"
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.config import PAYOFF_FIELDS
from ..core.errors import FileReadError, ParseError
from ..core.types import GameRecord

logger = logging.getLogger(__name__)

KNOWN_TOP_LEVEL_KEYS = ("game", "labels")


@dataclass
class GameFile:
    """Parsed contents of a game file."""
    games: List[GameRecord] = field(default_factory=list)
    labels: Dict[int, str] = field(default_factory=dict)
    path: Optional[Path] = None


def _parse_payoff(value: Any, entry: int, name: str, path: Optional[Path]) -> tuple:
    if not isinstance(value, list) or len(value) != 2:
        raise ParseError(
            f"game {entry}: field '{name}' must be an array of 2 integers, got {value!r}",
            path,
        )
    # bool is a subclass of int but is not a payoff
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        raise ParseError(
            f"game {entry}: field '{name}' must contain integers, got {value!r}",
            path,
        )
    return (value[0], value[1])


def _parse_game(table: Any, entry: int, path: Optional[Path]) -> GameRecord:
    if not isinstance(table, dict):
        raise ParseError(f"game {entry}: expected a table, got {type(table).__name__}", path)

    missing = [name for name in PAYOFF_FIELDS if name not in table]
    if missing:
        raise ParseError(f"game {entry}: missing field(s) {', '.join(missing)}", path)

    extra = sorted(set(table) - set(PAYOFF_FIELDS))
    if extra:
        logger.debug("Ignoring unknown keys in game %d: %s", entry, ", ".join(extra))

    payoffs = {name: _parse_payoff(table[name], entry, name, path) for name in PAYOFF_FIELDS}
    return GameRecord(**payoffs)


def _parse_labels(table: Any, path: Optional[Path]) -> Dict[int, str]:
    if not isinstance(table, dict):
        raise ParseError(f"'labels' must be a table, got {type(table).__name__}", path)

    labels = {}
    for key, value in table.items():
        # Plain decimal digits only; int() would also take "+3" or "1_0"
        if not (key.isascii() and key.isdigit()):
            raise ParseError(f"labels: key '{key}' is not a game number", path)
        index = int(key)
        if index < 1:
            raise ParseError(f"labels: game number must be positive, got {index}", path)
        if not isinstance(value, str):
            raise ParseError(f"labels: value for game {index} must be a string", path)
        labels[index] = value
    return labels


def parse_game_file(text: str, path: Optional[Union[str, Path]] = None) -> GameFile:
    """Parse the contents of a game file.

    Args:
        text: TOML document.
        path: Originating file, used in error messages only.

    Returns:
        The games in file order and any labels declared in the file.

    Raises:
        ParseError: If the text is not valid TOML or does not match the schema.
    """
    path = Path(path) if path is not None else None
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(f"invalid TOML: {e}", path) from e

    if "game" not in data:
        raise ParseError("missing 'game' array", path)
    tables = data["game"]
    if not isinstance(tables, list):
        raise ParseError(f"'game' must be an array of tables, got {type(tables).__name__}", path)

    extra = sorted(set(data) - set(KNOWN_TOP_LEVEL_KEYS))
    if extra:
        logger.debug("Ignoring unknown top-level keys: %s", ", ".join(extra))

    games = [_parse_game(table, i, path) for i, table in enumerate(tables, start=1)]
    labels = _parse_labels(data["labels"], path) if "labels" in data else {}

    logger.debug("Parsed %d games and %d labels", len(games), len(labels))
    return GameFile(games=games, labels=labels, path=path)


def load_game_file(path: Union[str, Path]) -> GameFile:
    """Read and parse a game file.

    Raises:
        FileReadError: If the file is missing or cannot be read.
        ParseError: If the contents do not match the schema.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"file is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise FileReadError(f"cannot read file: {e.strerror or e}", path) from e

    logger.debug("Read %d bytes from %s", len(text), path)
    return parse_game_file(text, path)


def load_games(path: Union[str, Path]) -> List[GameRecord]:
    """Read a game file and return only its games."""
    return load_game_file(path).games
