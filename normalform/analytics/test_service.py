"""Tests for the analysis service and tabular output."""

import json

import polars as pl
import pytest

from ..core.config import DEFAULT_GAME_LABELS
from ..core.errors import FileReadError
from ..core.types import GameRecord
from ..games.loader import GameFile
from .service import AnalysisService

PRISONERS_DILEMMA = GameRecord(p00=(-1, -1), p01=(-3, 0), p10=(0, -3), p11=(-2, -2))
BATTLE_OF_SEXES = GameRecord(p00=(2, 1), p01=(0, 0), p10=(0, 0), p11=(1, 2))
FILLER = GameRecord(p00=(0, 0), p01=(0, 0), p10=(0, 0), p11=(0, 0))


@pytest.fixture
def service():
    return AnalysisService()


class TestAnalyze:
    """Tests for numbering and labelling games."""

    def test_games_numbered_from_one(self, service):
        analyses = service.analyze([PRISONERS_DILEMMA, BATTLE_OF_SEXES])
        assert [a.index for a in analyses] == [1, 2]

    def test_default_labels_by_position(self, service):
        records = [FILLER] * 11 + [PRISONERS_DILEMMA]
        analyses = service.analyze(records)
        assert analyses[11].label == DEFAULT_GAME_LABELS[12] == "Prisoners' dilemma"
        assert analyses[8].label == "The Gift of the Magi"
        assert analyses[0].label is None

    def test_labels_can_be_disabled(self):
        analyses = AnalysisService(labels={}).analyze([FILLER] * 12)
        assert all(a.label is None for a in analyses)

    def test_file_labels_override_defaults(self, service):
        game_file = GameFile(games=[PRISONERS_DILEMMA], labels={1: "Custom"})
        assert service.analyze_game_file(game_file)[0].label == "Custom"
        # The service's own labels are left untouched
        assert service.labels == DEFAULT_GAME_LABELS

    def test_analyze_path_propagates_read_errors(self, service, tmp_path):
        with pytest.raises(FileReadError):
            service.analyze_path(tmp_path / "missing.toml")


class TestRender:
    """Tests for text, CSV and JSON output."""

    def test_dataframe_summary(self, service):
        df = service.to_dataframe(service.analyze([PRISONERS_DILEMMA, BATTLE_OF_SEXES]))
        assert df.columns == ["game", "label", "dse", "nash_equilibria", "pareto_efficient"]
        assert df.height == 2
        row = df.row(0, named=True)
        assert row["dse"] == "(b1, b2)"
        assert row["nash_equilibria"] == "(b1, b2)"
        assert df.row(1, named=True)["dse"] == "None"

    def test_empty_dataframe_keeps_schema(self, service):
        df = service.to_dataframe([])
        assert df.is_empty()
        assert df.schema["game"] == pl.Int64

    def test_render_text(self, service):
        text = service.render(service.analyze([PRISONERS_DILEMMA]))
        assert text.startswith("--- Game 1 ---\n  DSE: (b1, b2)\n")

    def test_render_csv(self, service):
        csv = service.render(service.analyze([BATTLE_OF_SEXES]), "csv")
        lines = csv.strip().splitlines()
        assert lines[0] == "game,label,dse,nash_equilibria,pareto_efficient"
        assert lines[1].startswith("1,,None,")
        assert '"(a1, a2), (b1, b2)"' in lines[1]

    def test_render_json(self, service):
        rows = json.loads(service.render(service.analyze([BATTLE_OF_SEXES]), "json"))
        assert rows == [
            {
                "game": 1,
                "label": None,
                "dse": "None",
                "nash_equilibria": "(a1, a2), (b1, b2)",
                "pareto_efficient": "(a1, a2), (b1, b2)",
            }
        ]

    def test_unknown_format(self, service):
        with pytest.raises(ValueError, match="Unknown output format"):
            service.render([], "xml")
