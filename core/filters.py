# -*- coding: utf-8 -*-
"""core/filters.py

Visibility rules for the diagnostics list.

The visible list is a pure function of (diagnostics, FilterState):
- Hidden diagnostics are never shown
- project filter applies unless it is ALL_PROJECTS
- each of Info/Warning/Error has its own on/off flag
- errors come first, otherwise input order is kept
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from core.diagnostics import Diagnostic, Severity

ALL_PROJECTS = "all"

COUNTED_SEVERITIES = (Severity.ERROR, Severity.WARNING, Severity.INFO)


@dataclass(frozen=True)
class FilterState:
    show_info: bool = True
    show_warning: bool = True
    show_error: bool = True
    selected_project: str = ALL_PROJECTS

    @property
    def any_severity_enabled(self) -> bool:
        return self.show_info or self.show_warning or self.show_error

    def shows(self, severity: Severity) -> bool:
        if severity is Severity.ERROR:
            return self.show_error
        if severity is Severity.WARNING:
            return self.show_warning
        if severity is Severity.INFO:
            return self.show_info
        return False

    def toggled(self, severity: Severity) -> "FilterState":
        if severity is Severity.ERROR:
            return replace(self, show_error=not self.show_error)
        if severity is Severity.WARNING:
            return replace(self, show_warning=not self.show_warning)
        if severity is Severity.INFO:
            return replace(self, show_info=not self.show_info)
        raise ValueError(f"Severity {severity.value} cannot be toggled")

    def with_project(self, project: Optional[str]) -> "FilterState":
        return replace(self, selected_project=project or ALL_PROJECTS)


def passes_project(diagnostic: Diagnostic, state: FilterState) -> bool:
    if diagnostic.severity is Severity.HIDDEN:
        return False
    if state.selected_project != ALL_PROJECTS and diagnostic.project != state.selected_project:
        return False
    return True


def passes(diagnostic: Diagnostic, state: FilterState) -> bool:
    return passes_project(diagnostic, state) and state.shows(diagnostic.severity)


def visible_diagnostics(diagnostics: Iterable[Diagnostic], state: FilterState) -> List[Diagnostic]:
    if not state.any_severity_enabled:
        return []
    rows = [d for d in diagnostics if passes(d, state)]
    # sorted() is stable: errors first, original order inside each tier
    return sorted(rows, key=lambda d: not d.is_error)


def severity_counts(diagnostics: Iterable[Diagnostic], state: FilterState) -> Dict[Severity, int]:
    """Per-severity totals after the project filter, ignoring the severity flags."""
    counts = {sev: 0 for sev in COUNTED_SEVERITIES}
    for d in diagnostics:
        if passes_project(d, state) and d.severity in counts:
            counts[d.severity] += 1
    return counts
