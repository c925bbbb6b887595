"""Pure Coordination game definition."""

from .matrix_factory import create_matrix_game

GAME = create_matrix_game(
    id="coordination_game",
    name="Coordination Game",
    description="Players are rewarded only for choosing the same option; both matches are Nash equilibria.",
    actions=["A", "B"],
    matrix={
        ("A", "A"): (2, 2),
        ("A", "B"): (0, 0),
        ("B", "A"): (0, 0),
        ("B", "B"): (2, 2),
    },
)
