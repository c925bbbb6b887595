"""End-to-end tests for the command line entry point."""

import json
import logging

import pytest

from . import cli
from .cli import build_parser, main, resolve_log_level
from .core.config import DEFAULT_GAMES_FILE
from .games import builtin_game_file

GAMES = """
[[game]]
p00 = [-1, -1]
p01 = [-3, 0]
p10 = [0, -3]
p11 = [-2, -2]

[[game]]
p00 = [2, 1]
p01 = [0, 0]
p10 = [0, 0]
p11 = [1, 2]
"""


@pytest.fixture
def game_path(tmp_path):
    path = tmp_path / "game.toml"
    path.write_text(GAMES, encoding="utf-8")
    return path


def test_text_report(game_path, capsys):
    assert main([str(game_path)]) == 0
    out = capsys.readouterr().out
    assert out == (
        "--- Game 1 ---\n"
        "  DSE: (b1, b2)\n"
        "  Nash equilibria: (b1, b2)\n"
        "  Pareto efficient outcomes: (a1, a2), (a1, b2), (b1, a2)\n"
        "\n"
        "--- Game 2 ---\n"
        "  DSE: None\n"
        "  Nash equilibria: (a1, a2), (b1, b2)\n"
        "  Pareto efficient outcomes: (a1, a2), (b1, b2)\n"
        "\n"
    )


def test_labels_from_file(game_path, capsys):
    game_path.write_text(GAMES + '\n[labels]\n2 = "Battle of the sexes"\n', encoding="utf-8")
    assert main([str(game_path)]) == 0
    assert "--- Game 2 (Battle of the sexes) ---" in capsys.readouterr().out


def test_no_labels(game_path, capsys):
    game_path.write_text(GAMES + '\n[labels]\n2 = "Battle of the sexes"\n', encoding="utf-8")
    assert main([str(game_path), "--no-labels"]) == 0
    assert "--- Game 2 ---\n" in capsys.readouterr().out


def test_json_output(game_path, capsys):
    assert main([str(game_path), "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [row["game"] for row in rows] == [1, 2]
    assert rows[0]["dse"] == "(b1, b2)"


def test_builtin_games(capsys):
    assert main(["--builtin"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("--- Game 1 (Prisoner's Dilemma) ---\n  DSE: (b1, b2)\n")
    assert "--- Game 6 (Coordination Game) ---" in out


def test_missing_file_exits_with_error(tmp_path, capsys, caplog):
    with caplog.at_level(logging.ERROR, logger="normalform"):
        assert main([str(tmp_path / "missing.toml")]) == 1
    assert capsys.readouterr().out == ""
    assert "FileReadError" in caplog.text


def test_malformed_file_exits_with_error(game_path, capsys, caplog):
    game_path.write_text(GAMES.replace("p11 = [1, 2]", "p11 = [1]"), encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="normalform"):
        assert main([str(game_path)]) == 1
    assert capsys.readouterr().out == ""
    assert "ParseError" in caplog.text
    assert "game 2" in caplog.text


def test_default_file_argument():
    args = build_parser().parse_args([])
    assert args.file == DEFAULT_GAMES_FILE
    assert args.output_format == "text"


def test_rejects_unknown_format():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--format", "xml"])


def test_no_labels_on_builtin_games(capsys):
    assert main(["--builtin", "--no-labels"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("--- Game 1 ---\n")
    assert "(Prisoner's Dilemma)" not in out


def test_no_labels_leaves_loaded_file_untouched(monkeypatch, capsys):
    game_file = builtin_game_file()
    labels = dict(game_file.labels)
    monkeypatch.setattr(cli, "builtin_game_file", lambda: game_file)

    assert main(["--builtin", "--no-labels"]) == 0
    assert game_file.labels == labels
    assert "--- Game 2 ---\n" in capsys.readouterr().out


@pytest.mark.parametrize(
    "name, expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" warning ", logging.WARNING), ("NOTSET", logging.NOTSET)],
)
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


@pytest.mark.parametrize("name", ["BASIC_FORMAT", "getLogger", "loud", ""])
def test_resolve_log_level_rejects_non_levels(name):
    assert resolve_log_level(name) is None


def test_unknown_log_level_falls_back_to_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="normalform"):
        cli.configure_logging(level_name="BASIC_FORMAT")
    assert "Unknown log level 'BASIC_FORMAT'" in caplog.text


def test_cli_logger_is_module_logger():
    assert cli.logger.name == "normalform.cli"
