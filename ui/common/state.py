# -*- coding: utf-8 -*-
"""ui/common/state.py

Per-user UI state persistence helpers (QSettings).

Best-effort: failures should never crash the panel; reads fall back to the
given default.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import QSettings

log = logging.getLogger(__name__)

ORG_NAME = "ProjectDiagnostics"
APP_NAME = "ProjectDiagnostics"


def _settings() -> QSettings:
    return QSettings(ORG_NAME, APP_NAME)


def _to_bool(val, default: bool) -> bool:
    if val is None:
        return bool(default)
    if isinstance(val, bool):
        return val
    # QSettings INI backends hand booleans back as "true"/"false"
    txt = str(val).strip().lower()
    if txt in ("1", "true", "yes", "on"):
        return True
    if txt in ("0", "false", "no", "off"):
        return False
    return bool(default)


class QSettingsPreferences:
    """Preferences backed by QSettings.

    ``settings`` may be injected (e.g. an INI-file QSettings in tests);
    otherwise the per-user native store is used.
    """

    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self._qsettings = settings

    def _store(self) -> QSettings:
        return self._qsettings if self._qsettings is not None else _settings()

    def get_bool(self, key: str, default: bool = True) -> bool:
        try:
            return _to_bool(self._store().value(key, default), default)
        except Exception:
            log.debug("get_bool failed (%s)", key, exc_info=True)
            return bool(default)

    def set_bool(self, key: str, value: bool) -> None:
        try:
            store = self._store()
            store.setValue(key, bool(value))
            store.sync()
        except Exception:
            log.debug("set_bool failed (%s)", key, exc_info=True)
