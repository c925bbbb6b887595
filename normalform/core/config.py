"""Configuration constants for normal-form game analysis."""

import os
from typing import Dict, Tuple

# Game file read when no path is given on the command line
DEFAULT_GAMES_FILE = os.environ.get("NORMALFORM_GAMES_FILE", "game.toml")

# Logging level name for the CLI (overridden by --verbose)
LOG_LEVEL = os.environ.get("NORMALFORM_LOG_LEVEL", "WARNING").upper()

# Descriptive names for well-known positions in the bundled game list (1-based)
DEFAULT_GAME_LABELS: Dict[int, str] = {
    9: "The Gift of the Magi",
    12: "Prisoners' dilemma",
    66: "Chicken game",
    69: "Battle of the sexes",
}

OUTPUT_FORMATS: Tuple[str, ...] = ("text", "csv", "json")
DEFAULT_OUTPUT_FORMAT = "text"

# Payoff fields of a game entry, row-major
PAYOFF_FIELDS: Tuple[str, ...] = ("p00", "p01", "p10", "p11")
