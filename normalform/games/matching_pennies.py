"""Matching Pennies game definition."""

from .matrix_factory import create_matrix_game

GAME = create_matrix_game(
    id="matching_pennies",
    name="Matching Pennies",
    description="""A zero-sum game: player 1 wins on a match, player 2 on a mismatch.

- No pure strategy Nash equilibrium exists
- Every outcome is Pareto efficient since payoffs always sum to zero""",
    actions=["heads", "tails"],
    matrix={
        ("heads", "heads"): (1, -1),
        ("heads", "tails"): (-1, 1),
        ("tails", "heads"): (-1, 1),
        ("tails", "tails"): (1, -1),
    },
)
