from __future__ import annotations

from battleship.game.infra.app_data import ensure_logs_dir, resolve_app_data_root, resolve_logs_dir


def test_resolve_app_data_root_prefers_configured_dir(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom_root"
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(custom))
    assert resolve_app_data_root() == custom


def test_resolve_app_data_root_defaults_to_project_appdata(monkeypatch) -> None:
    monkeypatch.delenv("BATTLESHIP_APP_DATA_DIR", raising=False)
    root = resolve_app_data_root()
    assert root.name == "appdata"
    assert (root.parent / "battleship").is_dir()


def test_relative_log_dir_is_resolved_under_app_data(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "root"))
    monkeypatch.setenv("BATTLESHIP_LOG_DIR", "runs")
    assert resolve_logs_dir() == tmp_path / "root" / "runs"


def test_ensure_logs_dir_creates_directory(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "root"))
    monkeypatch.delenv("BATTLESHIP_LOG_DIR", raising=False)
    logs = ensure_logs_dir()
    assert logs == tmp_path / "root" / "logs"
    assert logs.is_dir()
