# -*- coding: utf-8 -*-
"""Theme helpers for the diagnostics panel.

Colours come from an optional JSON token file (resources/theme.json);
missing tokens fall back to DEFAULT_TOKENS.
Severity visuals are a lookup table, not branching in paint code.
"""
from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Dict

from core.diagnostics import Severity
from infra.paths import app_root

log = logging.getLogger(__name__)

THEME_FILE = "resources/theme.json"

DEFAULT_TOKENS: Dict[str, str] = {
    "INFO_COLOR": "#3C8CE7",
    "WARNING_COLOR": "#E7C23C",
    "ERROR_COLOR": "#E5534B",
    "TEXT_COLOR": "#FFFFFF",
}

_CURRENT_THEME: dict = {}


@dataclass(frozen=True)
class SeverityStyle:
    color_token: str
    icon: str
    label: str


SEVERITY_STYLES: Dict[Severity, SeverityStyle] = {
    Severity.ERROR: SeverityStyle("ERROR_COLOR", "error", "Errors"),
    Severity.WARNING: SeverityStyle("WARNING_COLOR", "warning", "Warnings"),
    Severity.INFO: SeverityStyle("INFO_COLOR", "info", "Messages"),
}


def _resolve(path_str: str) -> Path:
    p = Path(path_str)
    if p.is_absolute():
        return p
    return app_root() / p


def load_theme(theme_path: str) -> dict:
    p = _resolve(theme_path)
    if not p.exists():
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.warning("Theme file %s is unreadable; using defaults", p, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def get_theme_token(key: str, default: str = "") -> str:
    """Best-effort theme token lookup for UI colors."""
    global _CURRENT_THEME
    if not _CURRENT_THEME:
        # no theme file: cache the defaults so the file is read only once
        _CURRENT_THEME = load_theme(THEME_FILE) or dict(DEFAULT_TOKENS)
    return str(_CURRENT_THEME.get(key, DEFAULT_TOKENS.get(key, default)))


def severity_style(severity: Severity) -> SeverityStyle:
    # Hidden never reaches the list; anything unexpected paints as info.
    return SEVERITY_STYLES.get(severity, SEVERITY_STYLES[Severity.INFO])


def severity_color(severity: Severity) -> str:
    return get_theme_token(severity_style(severity).color_token)
