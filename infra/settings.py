# -*- coding: utf-8 -*-
"""
App settings stored in a per-user writable folder (JSON).

UI toggles (which severities are shown) are not kept here; they live in
QSettings next to other per-widget state (see ui/common/state.py).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from infra.paths import user_data_dir

SETTINGS_FILENAME = "project_diagnostics_settings.json"
log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "status_message_seconds": 10,
    "row_height": 48,
    "empty_message": "No diagnostics to show",
}


def settings_file() -> Path:
    return user_data_dir() / SETTINGS_FILENAME


def _coerce(data: Dict[str, Any]) -> Dict[str, Any]:
    merged = DEFAULTS.copy()
    merged.update({k: v for k, v in data.items() if v is not None})
    for key in ("status_message_seconds", "row_height"):
        try:
            merged[key] = max(0, int(merged[key]))
        except (TypeError, ValueError):
            log.warning("Invalid setting %s=%r; using default", key, merged[key])
            merged[key] = DEFAULTS[key]
    return merged


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if not path.exists():
        save_settings(DEFAULTS.copy(), path)
        return DEFAULTS.copy()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        # Recover from corruption gracefully
        log.warning("Settings file %s is unreadable; resetting to defaults", path, exc_info=True)
        save_settings(DEFAULTS.copy(), path)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        return DEFAULTS.copy()
    return _coerce(data)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
