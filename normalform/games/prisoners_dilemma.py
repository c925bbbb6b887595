"""Prisoner's Dilemma game definition."""

from .matrix_factory import create_matrix_game

GAME = create_matrix_game(
    id="prisoners_dilemma",
    name="Prisoner's Dilemma",
    description="""Two suspects choose to stay silent or confess; payoffs are years lost.

- Confessing (b) strictly dominates staying silent for both players
- Mutual confession (-2,-2) is the dominant strategy equilibrium and the only Nash equilibrium
- Every other outcome is Pareto efficient; mutual confession is not""",
    actions=["silent", "confess"],
    matrix={
        ("silent", "silent"): (-1, -1),
        ("silent", "confess"): (-3, 0),
        ("confess", "silent"): (0, -3),
        ("confess", "confess"): (-2, -2),
    },
)
