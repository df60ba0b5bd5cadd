# -*- coding: utf-8 -*-
from __future__ import annotations

import json

from infra.settings import DEFAULTS, load_settings, save_settings


def test_missing_file_writes_defaults(tmp_path) -> None:
    p = tmp_path / "settings.json"
    assert load_settings(p) == DEFAULTS
    assert json.loads(p.read_text(encoding="utf-8")) == DEFAULTS


def test_user_values_override_defaults(tmp_path) -> None:
    p = tmp_path / "settings.json"
    save_settings({"status_message_seconds": 3, "row_height": None}, p)
    s = load_settings(p)
    assert s["status_message_seconds"] == 3
    assert s["row_height"] == DEFAULTS["row_height"]


def test_invalid_numbers_fall_back(tmp_path) -> None:
    p = tmp_path / "settings.json"
    save_settings({"row_height": "tall"}, p)
    assert load_settings(p)["row_height"] == DEFAULTS["row_height"]


def test_corrupt_file_is_reset(tmp_path) -> None:
    p = tmp_path / "settings.json"
    p.write_text("{", encoding="utf-8")
    assert load_settings(p) == DEFAULTS
    assert json.loads(p.read_text(encoding="utf-8")) == DEFAULTS


def test_user_data_dir_honors_env(tmp_path, monkeypatch) -> None:
    from infra import paths

    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    assert paths.user_data_dir() == tmp_path / paths.APP_NAME
    assert paths.logs_dir().is_dir()
