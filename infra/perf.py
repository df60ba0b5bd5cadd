# -*- coding: utf-8 -*-
"""Lightweight performance instrumentation.

Enable by setting env var:
    PROJECT_DIAG_PERF=1

When enabled, timings are written to logger ``project_diagnostics.perf``.
Used around list refreshes, which is where large builds (thousands of
warnings) can make the editor feel sluggish.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager

_perf_env = os.environ.get("PROJECT_DIAG_PERF", "").strip().lower()
ENABLED = _perf_env in ("1", "true", "yes", "on")

log = logging.getLogger("project_diagnostics.perf")


def is_enabled() -> bool:
    return ENABLED


@contextmanager
def span(label: str, *, threshold_ms: float = 50.0):
    """Measure a block duration and log if above threshold.

    If PROJECT_DIAG_PERF is not enabled, this context manager is basically a no-op.
    """
    if not ENABLED:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt_ms = (time.perf_counter() - t0) * 1000.0
        if dt_ms >= float(threshold_ms or 0.0):
            log.info("PERF %s %.1fms", label, dt_ms)
