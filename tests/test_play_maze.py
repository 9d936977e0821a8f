"""Tests for the console runner."""

import io
import json
import sys

import pytest

import play_maze
from maze_game import GameState


def test_load_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("bound: 3\nseed: 7\nauto_save: 'no'\n")
    assert play_maze.load_config(str(config_path)) == {"bound": 3, "seed": 7, "auto_save": "no"}


def test_load_config_empty_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")
    assert play_maze.load_config(str(config_path)) == {}


def test_load_config_missing_file(tmp_path):
    missing = str(tmp_path / "missing.yaml")
    with pytest.raises(ValueError, match="not found"):
        play_maze.load_config(missing)
    assert play_maze.load_config(missing, required=False) == {}


def test_load_config_rejects_bad_yaml(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("bound: [1, 2\n")
    with pytest.raises(ValueError, match="Error parsing YAML config"):
        play_maze.load_config(str(config_path))


def test_load_config_rejects_non_mapping(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        play_maze.load_config(str(config_path))


def test_resolve_settings_defaults(monkeypatch):
    monkeypatch.delenv("MAZE_SEED", raising=False)
    assert play_maze.resolve_settings({}) == {
        "seed": None,
        "bound": 5,
        "auto_save": True,
        "plot_trail": False,
        "output_dir": "out",
    }


def test_resolve_settings_precedence(monkeypatch):
    monkeypatch.setenv("MAZE_SEED", "3")
    assert play_maze.resolve_settings({})["seed"] == 3
    assert play_maze.resolve_settings({"seed": 5})["seed"] == 5
    assert play_maze.resolve_settings({"seed": 5}, cli_seed=9)["seed"] == 9


def test_resolve_settings_null_output_dir_uses_default(monkeypatch):
    monkeypatch.delenv("MAZE_SEED", raising=False)
    assert play_maze.resolve_settings({"output_dir": None})["output_dir"] == "out"
    assert play_maze.resolve_settings({"output_dir": "results"})["output_dir"] == "results"


def test_resolve_settings_string_values(monkeypatch):
    monkeypatch.delenv("MAZE_SEED", raising=False)
    settings = play_maze.resolve_settings({"bound": "4", "auto_save": "yes", "plot_trail": "on"})
    assert settings["bound"] == 4
    assert settings["auto_save"] is True
    assert settings["plot_trail"] is True
    assert play_maze.resolve_settings({"auto_save": True}, no_save=True)["auto_save"] is False


@pytest.mark.parametrize("config", [{"bound": "five"}, {"seed": True}, {"auto_save": 3}])
def test_resolve_settings_rejects_bad_values(config):
    with pytest.raises(ValueError):
        play_maze.resolve_settings(config)


def test_load_env_file_sets_seed(tmp_path, monkeypatch):
    # setenv first so the value loaded from .env is undone afterwards
    monkeypatch.setenv("MAZE_SEED", "0")
    monkeypatch.delenv("MAZE_SEED")
    env_path = tmp_path / ".env"
    env_path.write_text("MAZE_SEED=21\n")

    play_maze.load_env_file(str(env_path))

    assert play_maze.resolve_settings({})["seed"] == 21


def test_run_game_saves_record(tmp_path, scripted_io):
    settings = {
        "seed": 4,
        "bound": 5,
        "auto_save": True,
        "plot_trail": True,
        "output_dir": str(tmp_path / "results"),
    }

    state = play_maze.run_game(settings, scripted_io(["q"]))

    assert state is GameState.QUIT
    records = list((tmp_path / "results").glob("maze_*/game_*.json"))
    assert len(records) == 1
    with open(records[0]) as f:
        record = json.load(f)
    assert record["outcome"] == "quit"
    assert record["seed"] == 4
    assert record["trail"] == [{"x": 0, "y": 0}]
    assert "timestamp" in record
    assert (records[0].parent / "trail.png").exists()


def test_run_game_without_saving(tmp_path, scripted_io):
    settings = {
        "seed": 4,
        "bound": 5,
        "auto_save": False,
        "plot_trail": False,
        "output_dir": str(tmp_path / "results"),
    }
    play_maze.run_game(settings, scripted_io(["q"]))
    assert not (tmp_path / "results").exists()


def test_main_quits_cleanly(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MAZE_SEED", raising=False)
    monkeypatch.setattr(sys, "argv", ["play-maze", "--seed", "1", "--no-save"])
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\nq\n"))

    with pytest.raises(SystemExit) as exc_info:
        play_maze.main()

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "You wake up to find yourself in a mysterious maze." in out
    assert "Error: direction must be N,S,E, or W" in out
    assert out.rstrip().endswith("Bye!")


def test_main_aborts_when_input_ends(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["play-maze", "--no-save"])
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))

    with pytest.raises(SystemExit) as exc_info:
        play_maze.main()

    assert exc_info.value.code == 1
    assert "Error: Failed to read line" in capsys.readouterr().err


def test_main_reports_missing_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["play-maze", "--config", "nope.yaml"])

    with pytest.raises(SystemExit) as exc_info:
        play_maze.main()

    assert exc_info.value.code == 1
    assert "Config file nope.yaml not found." in capsys.readouterr().err
