# -*- coding: utf-8 -*-
"""Single source of truth for persisted preference keys.

These keys are stored per user (QSettings). Keep them stable.
"""

from __future__ import annotations

from core.diagnostics import Severity


class PrefKeys:
    INFO_SHOWN = "project_diag_info_shown"
    WARNINGS_SHOWN = "project_diag_warnings_shown"
    ERRORS_SHOWN = "project_diag_errors_shown"


SEVERITY_PREF_KEYS = {
    Severity.INFO: PrefKeys.INFO_SHOWN,
    Severity.WARNING: PrefKeys.WARNINGS_SHOWN,
    Severity.ERROR: PrefKeys.ERRORS_SHOWN,
}
