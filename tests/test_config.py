from __future__ import annotations

from pathlib import Path

import pytest

from userdao.config import load_settings, resolve_config_path, resolve_database_path


def test_missing_config_file_uses_default_database(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings.database_path == resolve_database_path(None)
    assert settings.database_path.name == "userdao.sqlite3"


def test_relative_database_path_resolves_against_config_dir(tmp_path: Path) -> None:
    config_path = tmp_path / "userdao.yaml"
    config_path.write_text("database:\n  path: data/users.sqlite3\n", encoding="utf-8")

    settings = load_settings(config_path)
    assert settings.database_path == (tmp_path / "data" / "users.sqlite3").resolve()


def test_absolute_database_path_is_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "users.sqlite3"
    config_path = tmp_path / "userdao.yaml"
    config_path.write_text(f"database:\n  path: {target}\n", encoding="utf-8")

    assert load_settings(config_path).database_path == target.resolve()


def test_empty_config_file_uses_default_database(tmp_path: Path) -> None:
    config_path = tmp_path / "userdao.yaml"
    config_path.write_text("", encoding="utf-8")
    assert load_settings(config_path).database_path == resolve_database_path(None)


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "userdao.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(config_path)


def test_non_mapping_database_section_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "userdao.yaml"
    config_path.write_text("database: users.sqlite3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(config_path)


def test_explicit_paths_are_expanded(tmp_path: Path) -> None:
    assert resolve_database_path(str(tmp_path / "db.sqlite3")) == (tmp_path / "db.sqlite3").resolve()
    assert resolve_config_path(str(tmp_path / "cfg.yaml")) == (tmp_path / "cfg.yaml").resolve()
    assert resolve_config_path(None).name == "userdao.yaml"
