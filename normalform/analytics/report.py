"""Text formatting for game analyses."""

from typing import Iterable, List

from ..core.types import Cell, GameAnalysis, outcome_label

NONE_TEXT = "None"


def format_outcomes(cells: Iterable[Cell]) -> str:
    """Join outcome labels with ', ', or 'None' when there are none."""
    labels = [outcome_label(r, c) for r, c in cells]
    return ", ".join(labels) if labels else NONE_TEXT


def format_header(analysis: GameAnalysis) -> str:
    if analysis.label:
        return f"--- Game {analysis.index} ({analysis.label}) ---"
    return f"--- Game {analysis.index} ---"


def format_analysis(analysis: GameAnalysis) -> str:
    """Format one game as a header, three result lines and a blank line.

    Example:
        --- Game 12 (Prisoners' dilemma) ---
          DSE: (b1, b2)
          Nash equilibria: (b1, b2)
          Pareto efficient outcomes: (a1, a2), (a1, b2), (b1, a2)
    """
    lines = [
        format_header(analysis),
        f"  DSE: {format_outcomes(analysis.dominant_equilibria)}",
        f"  Nash equilibria: {format_outcomes(analysis.nash_equilibria)}",
        f"  Pareto efficient outcomes: {format_outcomes(analysis.pareto_efficient)}",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_report(analyses: Iterable[GameAnalysis]) -> str:
    """Format all games in order."""
    blocks: List[str] = [format_analysis(analysis) for analysis in analyses]
    return "".join(blocks)
