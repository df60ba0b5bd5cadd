# -*- coding: utf-8 -*-
"""services/diagnostics_store.py

Holds the diagnostics of the most recent build (no PyQt dependency).

Each build completion replaces the previous set wholesale; there is no merge.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from core.diagnostics import Diagnostic, DiagnosticFormatError, Severity

log = logging.getLogger(__name__)


def _as_diagnostic(item: Any) -> Diagnostic:
    if isinstance(item, Diagnostic):
        return item
    if isinstance(item, Mapping):
        return Diagnostic.from_mapping(item)
    return Diagnostic.from_object(item)


def _unit_diagnostics(unit: Any) -> Optional[Iterable[Any]]:
    if isinstance(unit, Mapping):
        return unit.get("diagnostics")
    return getattr(unit, "diagnostics", None)


class DiagnosticsStore:
    """Most recent diagnostic set plus the distinct project names it mentions."""

    def __init__(self) -> None:
        self._diagnostics: Tuple[Diagnostic, ...] = ()
        self._projects: Tuple[str, ...] = ()
        self.revision = 0

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self._diagnostics

    @property
    def projects(self) -> Tuple[str, ...]:
        return self._projects

    @property
    def error_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity is Severity.ERROR)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def replace(self, diagnostics: Iterable[Diagnostic]) -> None:
        items = tuple(diagnostics)
        self._diagnostics = items
        # dict keeps first-seen order
        self._projects = tuple(dict.fromkeys(d.project for d in items))
        self.revision += 1
        log.debug("Diagnostics replaced: %d items, %d projects (rev %d)", len(items), len(self._projects), self.revision)

    def replace_from_group(self, group: Any) -> None:
        """Replace the stored set with every diagnostic reported by ``group``.

        Compiler units without a diagnostics collection are skipped, and so
        are items that cannot be parsed; the replacement always happens.
        """
        collected: List[Diagnostic] = []
        compilers = getattr(group, "compilers", None)
        if compilers is None and isinstance(group, Mapping):
            compilers = group.get("compilers")
        for unit in compilers or ():
            items = _unit_diagnostics(unit)
            if items is None:
                continue
            for item in items:
                try:
                    collected.append(_as_diagnostic(item))
                except DiagnosticFormatError as e:
                    log.warning("Skipping malformed diagnostic: %s", e)
        self.replace(collected)

    def clear(self) -> None:
        self.replace(())
