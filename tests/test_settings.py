import pytest

from holdem.settings import get_settings, load_env_file, parse_player_names
from holdem.version import get_version_info


def test_load_env_file(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text("HOLDEM_PLAYERS=Ann,Ben\n# comment\nNAME=value=with=equals\n")
    env_vars = load_env_file(str(env_path))
    assert env_vars["HOLDEM_PLAYERS"] == "Ann,Ben"
    # values with multiple equals are preserved
    assert env_vars["NAME"] == "value=with=equals"


def test_load_env_file_missing(tmp_path):
    assert load_env_file(str(tmp_path / "nope.env")) == {}


def test_defaults_without_env():
    settings = get_settings()
    assert settings["players"] == ["Alice", "Bob"]
    assert settings["starting_chips"] == 1000
    assert settings["seed"] is None
    for key, value in get_version_info().items():
        assert settings[key] == value


def test_env_file_then_environment(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("HOLDEM_PLAYERS=Ann, Ben ,Cy\nHOLDEM_STARTING_CHIPS=250\nHOLDEM_SEED=9\n")

    settings = get_settings()
    assert settings["players"] == ["Ann", "Ben", "Cy"]
    assert settings["starting_chips"] == 250
    assert settings["seed"] == 9

    monkeypatch.setenv("HOLDEM_STARTING_CHIPS", "75")
    monkeypatch.setenv("HOLDEM_SEED", "4")
    settings = get_settings()
    assert settings["starting_chips"] == 75
    assert settings["seed"] == 4
    assert settings["players"] == ["Ann", "Ben", "Cy"]


def test_invalid_numbers_raise(monkeypatch):
    monkeypatch.setenv("HOLDEM_STARTING_CHIPS", "lots")
    with pytest.raises(ValueError):
        get_settings()


def test_parse_player_names_skips_blanks():
    assert parse_player_names("a,, b ,") == ["a", "b"]
