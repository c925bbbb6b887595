"""Stag Hunt game definition."""

from .matrix_factory import create_matrix_game

GAME = create_matrix_game(
    id="stag_hunt",
    name="Stag Hunt",
    description="""Hunting the stag pays off only if both hunters commit to it.

- (stag, stag) is payoff dominant, (hare, hare) is risk dominant
- Both are pure Nash equilibria; only (stag, stag) is Pareto efficient""",
    actions=["stag", "hare"],
    matrix={
        ("stag", "stag"): (5, 5),
        ("stag", "hare"): (0, 3),
        ("hare", "stag"): (3, 0),
        ("hare", "hare"): (2, 2),
    },
)
