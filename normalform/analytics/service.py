"""Analysis service running the solver over a list of games."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

import polars as pl

from ..core.config import DEFAULT_GAME_LABELS, OUTPUT_FORMATS
from ..core.types import GameAnalysis, GameRecord
from ..games.loader import GameFile, load_game_file
from .equilibrium import analyze_game
from .report import format_outcomes, format_report

logger = logging.getLogger(__name__)

SUMMARY_SCHEMA = {
    "game": pl.Int64,
    "label": pl.Utf8,
    "dse": pl.Utf8,
    "nash_equilibria": pl.Utf8,
    "pareto_efficient": pl.Utf8,
}


class AnalysisService:
    """Analyzes games in order and renders the results.

    Labels name games by their 1-based position. They are presentation
    only; the solver never sees them.
    """

    def __init__(self, labels: Optional[Mapping[int, str]] = None):
        """Initialize the service.

        Args:
            labels: Mapping of game position to descriptive name. Defaults to
                DEFAULT_GAME_LABELS; pass an empty dict for no labels.
        """
        self.labels: Dict[int, str] = dict(DEFAULT_GAME_LABELS if labels is None else labels)

    def analyze(self, records: Iterable[GameRecord]) -> List[GameAnalysis]:
        """Analyze game records in order, numbering them from 1."""
        analyses = [
            analyze_game(record, index=i, labels=self.labels)
            for i, record in enumerate(records, start=1)
        ]
        logger.debug("Analyzed %d games", len(analyses))
        return analyses

    def analyze_game_file(self, game_file: GameFile) -> List[GameAnalysis]:
        """Analyze a parsed game file; labels in the file override the service's."""
        if game_file.labels:
            service = AnalysisService({**self.labels, **game_file.labels})
            return service.analyze(game_file.games)
        return self.analyze(game_file.games)

    def analyze_path(self, path: Union[str, Path]) -> List[GameAnalysis]:
        """Load a game file and analyze it.

        Raises:
            FileReadError: If the file cannot be read.
            ParseError: If the file does not match the game schema.
        """
        return self.analyze_game_file(load_game_file(path))

    @staticmethod
    def to_dataframe(analyses: Iterable[GameAnalysis]) -> pl.DataFrame:
        """Summarize analyses as one row per game with outcome label columns."""
        analyses = list(analyses)
        return pl.DataFrame(
            {
                "game": [a.index for a in analyses],
                "label": [a.label for a in analyses],
                "dse": [format_outcomes(a.dominant_equilibria) for a in analyses],
                "nash_equilibria": [format_outcomes(a.nash_equilibria) for a in analyses],
                "pareto_efficient": [format_outcomes(a.pareto_efficient) for a in analyses],
            },
            schema=SUMMARY_SCHEMA,
        )

    def render(self, analyses: List[GameAnalysis], output_format: str = "text") -> str:
        """Render analyses as text, CSV or JSON.

        Raises:
            ValueError: If output_format is not one of OUTPUT_FORMATS.
        """
        if output_format == "text":
            return format_report(analyses)
        if output_format == "csv":
            return self.to_dataframe(analyses).write_csv()
        if output_format == "json":
            return json.dumps(self.to_dataframe(analyses).to_dicts(), indent=2) + "\n"
        raise ValueError(
            f"Unknown output format '{output_format}'. Valid formats: {', '.join(OUTPUT_FORMATS)}"
        )
