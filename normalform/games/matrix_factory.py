"""Factory for building 2x2 payoff matrices.

This module turns raw game records into PayoffMatrix values and provides
a helper to declare named textbook games from action-keyed payoff dicts.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..core.types import GameRecord, Payoff, PayoffMatrix


def build_matrix(record: GameRecord) -> PayoffMatrix:
    """Build the payoff matrix for a game record.

    Cell [r][c] holds the payoff at position r*2+c in row-major order,
    so p00 -> [0][0], p01 -> [0][1], p10 -> [1][0], p11 -> [1][1].
    """
    return PayoffMatrix(
        top=(Payoff(*record.p00), Payoff(*record.p01)),
        bottom=(Payoff(*record.p10), Payoff(*record.p11)),
    )


@dataclass(frozen=True)
class MatrixGame:
    """A named 2x2 game with labelled actions."""
    id: str
    name: str
    description: str
    actions: Tuple[str, str]
    record: GameRecord

    @property
    def matrix(self) -> PayoffMatrix:
        return build_matrix(self.record)


def create_matrix_game(
    id: str,
    name: str,
    description: str,
    actions: List[str],
    matrix: Dict[Tuple[str, str], Tuple[int, int]],
) -> MatrixGame:
    """Create a named 2x2 game from an action-keyed payoff matrix.

    Args:
        id: Unique game identifier (e.g., "prisoners_dilemma")
        name: Display name (e.g., "Prisoner's Dilemma")
        description: Short description of the strategic situation
        actions: The two actions shared by both players; the first maps to
            row/column 0 ("a1"/"a2"), the second to row/column 1 ("b1"/"b2")
        matrix: Dict mapping (row action, column action) to payoff pairs

    Returns:
        A MatrixGame whose record follows row-major action order.

    Raises:
        ValueError: If there are not exactly two actions, an entry uses an
            unknown action or a payoff is not a pair, or an outcome is missing.

    Example:
        GAME = create_matrix_game(
            id="prisoners_dilemma",
            name="Prisoner's Dilemma",
            description="A classic game...",
            actions=["cooperate", "defect"],
            matrix={
                ("cooperate", "cooperate"): (-1, -1),
                ("cooperate", "defect"): (-3, 0),
                ("defect", "cooperate"): (0, -3),
                ("defect", "defect"): (-2, -2),
            },
        )
    """
    if len(actions) != 2:
        raise ValueError(f"Expected exactly 2 actions, got {len(actions)}: {actions}")

    # Validate matrix entries
    for action_tuple, payoff_tuple in matrix.items():
        if len(action_tuple) != 2:
            raise ValueError(
                f"Action tuple {action_tuple} has {len(action_tuple)} entries, expected 2"
            )
        if len(payoff_tuple) != 2:
            raise ValueError(
                f"Payoff tuple {payoff_tuple} has {len(payoff_tuple)} entries, expected 2"
            )
        for action in action_tuple:
            if action not in actions:
                raise ValueError(
                    f"Unknown action '{action}' in matrix. Valid actions: {actions}"
                )

    first, second = actions
    order = [(first, first), (first, second), (second, first), (second, second)]
    missing = [combo for combo in order if combo not in matrix]
    if missing:
        raise ValueError(f"Payoff matrix is missing outcomes: {missing}")

    p00, p01, p10, p11 = (tuple(matrix[combo]) for combo in order)
    return MatrixGame(
        id=id,
        name=name,
        description=description,
        actions=(first, second),
        record=GameRecord(p00=p00, p01=p01, p10=p10, p11=p11),
    )
