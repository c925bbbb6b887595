"""Chicken game definition."""

from .matrix_factory import create_matrix_game

GAME = create_matrix_game(
    id="chicken",
    name="Chicken",
    description="""Two drivers head toward each other; whoever swerves loses face.

- Crashing (-10,-10) is the worst outcome for both
- The pure Nash equilibria are the two outcomes where exactly one player swerves
- Neither player has a dominant strategy""",
    actions=["swerve", "dare"],
    matrix={
        ("swerve", "swerve"): (0, 0),
        ("swerve", "dare"): (-1, 1),
        ("dare", "swerve"): (1, -1),
        ("dare", "dare"): (-10, -10),
    },
)
