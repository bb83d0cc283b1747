import sys

from blockworld.env import (
    dump_env,
    get_assets_path,
    get_env_var,
    get_executable_dir,
    get_executable_path,
)


def test_dump_env_prints_pairs(capsys):
    dump_env({"ALPHA": "1", "BETA": "two"})
    assert capsys.readouterr().out.splitlines() == ["ALPHA=1", "BETA=two"]


def test_dump_env_none_prints_nothing(capsys):
    dump_env(None)
    assert capsys.readouterr().out == ""


def test_get_env_var_set(monkeypatch):
    monkeypatch.setenv("BLOCKWORLD_TEST_VAR", "value")
    assert get_env_var("BLOCKWORLD_TEST_VAR") == "value"


def test_get_env_var_missing(monkeypatch):
    monkeypatch.delenv("BLOCKWORLD_TEST_VAR", raising=False)
    assert get_env_var("BLOCKWORLD_TEST_VAR") == ""


def test_executable_path_from_argv(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    assert get_executable_path() == str((tmp_path / "prog").resolve())
    assert get_executable_dir() == tmp_path.resolve()


def test_executable_path_unknown(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["-c"])
    assert get_executable_path() == ""


def test_assets_path_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("BLOCKWORLD_ASSETS_PATH", str(tmp_path))
    assert get_assets_path() == str(tmp_path)


def test_assets_path_next_to_program(monkeypatch, tmp_path):
    monkeypatch.delenv("BLOCKWORLD_ASSETS_PATH", raising=False)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    assert get_assets_path() == str(tmp_path.resolve()) + "/assets"


def test_assets_path_without_program(monkeypatch):
    monkeypatch.setenv("BLOCKWORLD_ASSETS_PATH", "")
    monkeypatch.setattr(sys, "argv", [])
    assert get_assets_path() == "/assets"