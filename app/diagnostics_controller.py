# -*- coding: utf-8 -*-
"""Filter/toggle controller for the diagnostics panel (no PyQt imports).

Owns the FilterState, persists the severity flags and answers "what should the
list show right now". The Qt panel only renders what this controller returns.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from app.base_controller import BaseController
from app.events import COMPILE_COMPLETE, DiagnosticsChanged, EventBus, FiltersChanged
from core.diagnostics import Diagnostic, Severity
from core.filters import ALL_PROJECTS, FilterState, severity_counts, visible_diagnostics
from core.keys import SEVERITY_PREF_KEYS
from services.diagnostics_store import DiagnosticsStore

log = logging.getLogger(__name__)

STATUS_MESSAGE_SECONDS = 10


class DisplayState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class Preferences(Protocol):
    def get_bool(self, key: str, default: bool = True) -> bool: ...

    def set_bool(self, key: str, value: bool) -> None: ...


class MemoryPreferences:
    """Non-persistent preferences (headless runs and tests)."""

    def __init__(self, initial: Optional[Dict[str, bool]] = None) -> None:
        self.values: Dict[str, bool] = dict(initial or {})

    def get_bool(self, key: str, default: bool = True) -> bool:
        return bool(self.values.get(key, default))

    def set_bool(self, key: str, value: bool) -> None:
        self.values[key] = bool(value)


class DiagnosticsController(BaseController):
    def __init__(
        self,
        store: DiagnosticsStore,
        preferences: Preferences,
        bus: Optional[EventBus] = None,
        *,
        host: Any = None,
        status_seconds: int = STATUS_MESSAGE_SECONDS,
        on_error: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        super().__init__(on_error=on_error)
        self.store = store
        self.preferences = preferences
        self.bus = bus if bus is not None else EventBus()
        self.host = host
        self.status_seconds = int(status_seconds)
        # Severity flags are persisted, the project filter always starts at "all".
        self._state = FilterState(
            show_info=preferences.get_bool(SEVERITY_PREF_KEYS[Severity.INFO], True),
            show_warning=preferences.get_bool(SEVERITY_PREF_KEYS[Severity.WARNING], True),
            show_error=preferences.get_bool(SEVERITY_PREF_KEYS[Severity.ERROR], True),
        )

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def selected_project(self) -> str:
        return self._state.selected_project

    def attach(self, bus: EventBus) -> None:
        """Register as the handler of the host's compile.complete hook on ``bus``."""
        bus.on(COMPILE_COMPLETE, self.on_compile_complete)

    # --------- filters ---------
    def toggle(self, severity: Severity) -> bool:
        """Flip one severity flag, persist it and return the new value."""
        self._state = self._state.toggled(severity)
        value = self._state.shows(severity)
        self.preferences.set_bool(SEVERITY_PREF_KEYS[severity], value)
        log.debug("Severity %s shown=%s", severity.value, value)
        self._emit_filters("toggle")
        return value

    def select_project(self, project: Optional[str]) -> None:
        self._state = self._state.with_project(project)
        self._emit_filters("project")

    def _emit_filters(self, reason: str) -> None:
        self.bus.emit(FiltersChanged(state=self._state, reason=reason))

    def _emit_diagnostics(self) -> None:
        self.bus.emit(
            DiagnosticsChanged(revision=self.store.revision, count=len(self.store), error_count=self.store.error_count)
        )

    # --------- build results ---------
    def on_compile_complete(self, group: Any) -> Optional[str]:
        """Replace the stored diagnostics with the results of ``group``.

        Returns the status bar message for the build, if any.
        """
        self.store.replace_from_group(group)
        if self._state.selected_project != ALL_PROJECTS and self._state.selected_project not in self.store.projects:
            self._state = self._state.with_project(ALL_PROJECTS)
        self._emit_diagnostics()
        message = self.build_status_message()
        log.info("Build complete: %d diagnostics, %d errors", len(self.store), self.store.error_count)
        if message and self.host is not None:
            self.safe_call(self.host.show_status, message, self.status_seconds, log_message="show_status failed")
        return message

    def clear(self) -> None:
        self.store.clear()
        self._state = self._state.with_project(ALL_PROJECTS)
        self._emit_diagnostics()

    def build_status_message(self) -> Optional[str]:
        errors = self.store.error_count
        if errors > 0:
            return f"Build failed - you have {errors} errors"
        return None

    # --------- queries ---------
    def visible(self) -> List[Diagnostic]:
        return visible_diagnostics(self.store.diagnostics, self._state)

    def counts(self) -> Dict[Severity, int]:
        return severity_counts(self.store.diagnostics, self._state)

    def display_state(self) -> DisplayState:
        return DisplayState.POPULATED if self.visible() else DisplayState.EMPTY

    # --------- navigation ---------
    def open_diagnostic(self, diagnostic: Diagnostic) -> bool:
        if self.host is None:
            return False
        res = self.safe_call(
            self.host.open_file,
            diagnostic.file_path,
            diagnostic.line_number,
            diagnostic.char_number,
            title="Open file",
            user_message=f"Could not open {diagnostic.file_path}.",
            log_message="open_file failed",
        )
        return res.ok

    def copy_message(self, diagnostic: Diagnostic) -> bool:
        if self.host is None:
            return False
        res = self.safe_call(self.host.copy_text, diagnostic.message, log_message="copy_text failed")
        return res.ok
