import logging
import os

import pytest
from flask import Flask

from taskboard_center.app import build_config, main
from taskboard_core.config import TaskboardConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "TASKBOARD_HOST", "TASKBOARD_DB_PATH", "TASKBOARD_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = TaskboardConfig.from_env()
    assert config.port == 3000
    assert config.host == "127.0.0.1"
    assert config.debug is False
    assert config.db_path.endswith(os.path.join("data", "tasks.db"))


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("TASKBOARD_HOST", "0.0.0.0")
    monkeypatch.setenv("TASKBOARD_DB_PATH", str(tmp_path / "x.db"))
    monkeypatch.setenv("TASKBOARD_DEBUG", "true")
    config = TaskboardConfig.from_env()
    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.db_path == str(tmp_path / "x.db")
    assert config.debug is True


def test_env_beats_defaults_dict(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    assert TaskboardConfig.from_env({"port": 4000}).port == 9000
    monkeypatch.delenv("PORT")
    assert TaskboardConfig.from_env({"port": 4000}).port == 4000


def test_empty_port_uses_default(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert TaskboardConfig.from_env().port == 3000


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError):
        TaskboardConfig.from_env()


def test_empty_db_path_uses_default(monkeypatch):
    monkeypatch.setenv("TASKBOARD_DB_PATH", "")
    config = TaskboardConfig.from_env()
    assert config.db_path
    assert config.db_path.endswith(os.path.join("data", "tasks.db"))


class TestCommandLine:
    def test_no_flags_uses_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        config = build_config([])
        assert config.port == 8080
        assert config.host == "127.0.0.1"

    def test_flags_beat_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("TASKBOARD_HOST", "0.0.0.0")
        monkeypatch.setenv("TASKBOARD_DB_PATH", str(tmp_path / "env.db"))
        config = build_config([
            "--port", "9001",
            "--host", "127.0.0.2",
            "--db-path", str(tmp_path / "cli.db"),
        ])
        assert config.port == 9001
        assert config.host == "127.0.0.2"
        assert config.db_path == str(tmp_path / "cli.db")

    def test_main_starts_server_with_cli_port(self, monkeypatch, tmp_path, caplog):
        runs = []
        monkeypatch.setattr(Flask, "run", lambda self, **kwargs: runs.append(kwargs))
        monkeypatch.setenv("PORT", "8080")
        caplog.set_level(logging.INFO)

        main(["--port", "9001", "--db-path", str(tmp_path / "tasks.db")])

        assert runs == [{"host": "127.0.0.1", "port": 9001, "debug": False}]
        assert "Task Manager running on http://localhost:9001" in caplog.text
        assert (tmp_path / "tasks.db").exists()
