"""Pure-strategy solution concepts for 2x2 normal-form games."""

import logging
from typing import List, Mapping, Optional

from ..core.types import (
    CELLS,
    Cell,
    DominanceResult,
    DominantStrategy,
    GameAnalysis,
    GameRecord,
    Payoff,
    PayoffMatrix,
)
from ..games.matrix_factory import build_matrix

logger = logging.getLogger(__name__)


def is_nash_equilibrium(matrix: PayoffMatrix, row: int, col: int) -> bool:
    """Check whether an outcome is a pure strategy Nash equilibrium.

    Neither player may gain by deviating alone. Ties count as best
    responses, so weak equilibria are included.
    """
    current = matrix[row][col]
    row_best = all(matrix[r][col].row <= current.row for r in range(2))
    col_best = all(matrix[row][c].col <= current.col for c in range(2))
    return row_best and col_best


def find_nash_equilibria(matrix: PayoffMatrix) -> List[Cell]:
    """Find all pure strategy Nash equilibria, in row-major order."""
    return [(r, c) for r, c in CELLS if is_nash_equilibrium(matrix, r, c)]


def is_pareto_dominated(a: Payoff, b: Payoff) -> bool:
    """Check whether b strictly improves on a for both players.

    Equal payoffs in either coordinate never count as domination.
    """
    return b.row > a.row and b.col > a.col


def find_pareto_efficient(matrix: PayoffMatrix) -> List[Cell]:
    """Find outcomes no other outcome strictly dominates, in row-major order.

    Each cell is also compared with itself, which can never satisfy the
    strict test.
    """
    efficient = []
    for cell, payoff in matrix.cells():
        dominated = any(is_pareto_dominated(payoff, other) for _, other in matrix.cells())
        if not dominated:
            efficient.append(cell)
    return efficient


def _dominant(first_vs_second: List[tuple]) -> DominantStrategy:
    # Each pair holds (first strategy payoff, second strategy payoff) against one opponent choice
    if all(first > second for first, second in first_vs_second):
        return DominantStrategy.FIRST
    if all(second > first for first, second in first_vs_second):
        return DominantStrategy.SECOND
    return DominantStrategy.NONE


def find_dominant_strategies(matrix: PayoffMatrix) -> DominanceResult:
    """Find each player's strictly dominant strategy, if any.

    A strategy dominates when it pays strictly more than the alternative
    against every strategy of the opponent.

    Args:
        matrix: The payoff matrix.

    Returns:
        DominanceResult with FIRST ("a"), SECOND ("b") or NONE per player.
    """
    row = _dominant([
        (matrix[0][0].row, matrix[1][0].row),
        (matrix[0][1].row, matrix[1][1].row),
    ])
    col = _dominant([
        (matrix[0][0].col, matrix[0][1].col),
        (matrix[1][0].col, matrix[1][1].col),
    ])
    return DominanceResult(row=row, col=col)


def dominant_strategy_equilibria(dominance: DominanceResult) -> List[Cell]:
    """Cross both players' dominant strategies into equilibrium outcomes.

    Returns a single outcome when both players have a dominant strategy,
    otherwise an empty list.
    """
    row, col = dominance.row.position, dominance.col.position
    if row is None or col is None:
        return []
    return [(row, col)]


def analyze_matrix(
    matrix: PayoffMatrix,
    index: int = 1,
    labels: Optional[Mapping[int, str]] = None,
) -> GameAnalysis:
    """Run every solution concept on a payoff matrix.

    Args:
        matrix: The payoff matrix.
        index: 1-based position of the game in its input.
        labels: Optional mapping from game position to descriptive name.

    Returns:
        GameAnalysis holding all results.
    """
    dominance = find_dominant_strategies(matrix)
    analysis = GameAnalysis(
        index=index,
        matrix=matrix,
        dominance=dominance,
        dominant_equilibria=dominant_strategy_equilibria(dominance),
        nash_equilibria=find_nash_equilibria(matrix),
        pareto_efficient=find_pareto_efficient(matrix),
        label=(labels or {}).get(index),
    )
    logger.debug(
        "Game %d: dominance=%s/%s nash=%s pareto=%s",
        index,
        dominance.row.value,
        dominance.col.value,
        analysis.nash_equilibria,
        analysis.pareto_efficient,
    )
    return analysis


def analyze_game(
    record: GameRecord,
    index: int = 1,
    labels: Optional[Mapping[int, str]] = None,
) -> GameAnalysis:
    """Build the matrix for a game record and analyze it."""
    return analyze_matrix(build_matrix(record), index=index, labels=labels)
