import pytest

from holdem.cli import build_parser, main, run_demo_round
from holdem.version import VERSION


def test_main_plays_a_round(capsys):
    code = main(["--players", "Ann", "Ben", "--seed", "5", "--no-color", "--compact"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Ann (player1): 1000 chips" in out
    assert "Ben (player2): 1000 chips" in out
    assert "--- Showdown ---" in out
    assert "wins with" in out or "Tie between" in out


def test_main_uses_env_file_settings(tmp_path, capsys):
    (tmp_path / ".env").write_text("HOLDEM_PLAYERS=Xena,Yuri,Zed\nHOLDEM_STARTING_CHIPS=300\n")
    assert main(["--no-color", "--compact", "--chips", "40"]) == 0
    out = capsys.readouterr().out
    assert "Zed (player3): 40 chips" in out


def test_main_reports_errors(capsys):
    assert main(["--players", "Solo", "--no-color"]) == 1
    assert "Error: A round needs at least 2 players" in capsys.readouterr().err


def test_seeded_demo_rounds_match():
    first = run_demo_round(["Ann", "Ben"], 100, seed=8, color=False)
    second = run_demo_round(["Ann", "Ben"], 100, seed=8, color=False)
    assert first == second


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert VERSION in capsys.readouterr().out
