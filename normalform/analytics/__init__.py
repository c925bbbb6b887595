"""Solution concepts, reporting and the analysis service."""

from .equilibrium import (
    is_nash_equilibrium,
    find_nash_equilibria,
    is_pareto_dominated,
    find_pareto_efficient,
    find_dominant_strategies,
    dominant_strategy_equilibria,
    analyze_matrix,
    analyze_game,
)
from .report import format_outcomes, format_analysis, format_report
from .service import AnalysisService

__all__ = [
    # Solvers
    "is_nash_equilibrium",
    "find_nash_equilibria",
    "is_pareto_dominated",
    "find_pareto_efficient",
    "find_dominant_strategies",
    "dominant_strategy_equilibria",
    "analyze_matrix",
    "analyze_game",
    # Reporting
    "format_outcomes",
    "format_analysis",
    "format_report",
    "AnalysisService",
]
