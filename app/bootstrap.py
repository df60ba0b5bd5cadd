# -*- coding: utf-8 -*-
"""
Application bootstrap (runs before UI):
- Load per-user settings
- Init logging (and perf logging when PROJECT_DIAG_PERF=1)
"""
from __future__ import annotations

from typing import Any, Dict

from infra.logging_setup import init_logging, init_perf_logging
from infra.perf import is_enabled as perf_enabled
from infra.settings import load_settings


def bootstrap() -> Dict[str, Any]:
    settings = load_settings()
    init_logging(level=settings.get("log_level", "INFO"))
    if perf_enabled():
        init_perf_logging()
    return settings
