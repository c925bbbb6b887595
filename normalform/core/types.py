"""Type definitions for normal-form game analysis."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

# Strategy names, indexed by row / column
ROW_STRATEGIES: Tuple[str, str] = ("a1", "b1")
COL_STRATEGIES: Tuple[str, str] = ("a2", "b2")

Cell = Tuple[int, int]

# Row-major enumeration of the four outcomes
CELLS: Tuple[Cell, ...] = ((0, 0), (0, 1), (1, 0), (1, 1))


class Payoff(NamedTuple):
    """Payoff pair for one outcome: (row player, column player)."""
    row: int
    col: int


class PayoffMatrix(NamedTuple):
    """Immutable 2x2 grid of payoffs, indexed as matrix[row][col]."""
    top: Tuple[Payoff, Payoff]
    bottom: Tuple[Payoff, Payoff]

    def cells(self) -> Iterator[Tuple[Cell, Payoff]]:
        """Iterate ((row, col), payoff) in row-major order."""
        for r, c in CELLS:
            yield (r, c), self[r][c]


@dataclass(frozen=True)
class GameRecord:
    """Raw game entry: four payoff pairs in row-major order."""
    p00: Tuple[int, int]
    p01: Tuple[int, int]
    p10: Tuple[int, int]
    p11: Tuple[int, int]


class DominantStrategy(str, Enum):
    """Which of a player's two strategies strictly dominates, if any."""
    NONE = "none"
    FIRST = "first"
    SECOND = "second"

    @property
    def position(self) -> Optional[int]:
        """Row/column index of the dominant strategy, None if there is none."""
        if self is DominantStrategy.FIRST:
            return 0
        if self is DominantStrategy.SECOND:
            return 1
        return None


class DominanceResult(NamedTuple):
    """Dominant strategy of each player."""
    row: DominantStrategy
    col: DominantStrategy


@dataclass
class GameAnalysis:
    """Solution concepts computed for a single game."""
    index: int  # 1-based position in the input
    matrix: PayoffMatrix
    dominance: DominanceResult
    dominant_equilibria: List[Cell] = field(default_factory=list)
    nash_equilibria: List[Cell] = field(default_factory=list)
    pareto_efficient: List[Cell] = field(default_factory=list)
    label: Optional[str] = None


def outcome_label(row: int, col: int) -> str:
    """Render an outcome as '(a1, b2)'."""
    return f"({ROW_STRATEGIES[row]}, {COL_STRATEGIES[col]})"
