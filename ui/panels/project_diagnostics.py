# -*- coding: utf-8 -*-
"""Project Diagnostics dock panel.

Toolbar (severity toggles, project filter, clear) above either the diagnostics
list or a "No diagnostics to show" placeholder. All filtering decisions come
from DiagnosticsController; this widget only renders them.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QStyle, QToolButton, QVBoxLayout, QWidget,
)

from app.diagnostics_controller import DiagnosticsController, DisplayState
from app.events import DiagnosticsChanged, FiltersChanged
from core.diagnostics import Diagnostic, Severity
from core.filters import ALL_PROJECTS, COUNTED_SEVERITIES
from infra.perf import span
from ui.delegates.diagnostic_delegate import severity_icon
from ui.theme import severity_style
from ui.utils.user_signals import connect_button_user_clicked, connect_combobox_user_data_changed
from ui.widgets.diagnostics_list import DiagnosticsListView

log = logging.getLogger(__name__)

ALL_PROJECTS_LABEL = "All Projects"

STYLES = """
ProjectDiagnostics #Output {
    margin: 0px;
    padding: 0px;
    border: 0px;
    margin-bottom: 4px;
}

ProjectDiagnostics QToolButton {
    padding: 3px 8px;
}

ProjectDiagnostics QToolButton[cssClass="clear"] {
    padding: 3px;
}

ProjectDiagnostics QComboBox {
    min-width: 9em;
    padding: 2px 8px;
}
"""

STATUS_TIPS = {
    Severity.ERROR: "Toggle display of errors",
    Severity.WARNING: "Toggle display of warnings",
    Severity.INFO: "Toggle display of information",
}


class ProjectDiagnostics(QWidget):
    def __init__(
        self,
        controller: DiagnosticsController,
        parent=None,
        *,
        row_height: int = 48,
        empty_message: str = "No diagnostics to show",
    ):
        super().__init__(parent)
        self.setObjectName("ProjectDiagnostics")
        self.setStyleSheet(STYLES)
        self.controller = controller
        self._known_projects: tuple = ()

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        bar = QHBoxLayout()
        bar.setContentsMargins(5, 5, 5, 5)
        bar.setSpacing(8)

        self.severity_buttons: Dict[Severity, QToolButton] = {}
        for sev in COUNTED_SEVERITIES:
            btn = QToolButton(self)
            btn.setCheckable(True)
            btn.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
            btn.setIcon(severity_icon(sev))
            btn.setStatusTip(STATUS_TIPS[sev])
            btn.setToolTip(STATUS_TIPS[sev])
            connect_button_user_clicked(btn, lambda s=sev: self._on_toggle(s))
            bar.addWidget(btn)
            self.severity_buttons[sev] = btn

        bar.addStretch(1)

        self.project_filter = QComboBox(self)
        self.project_filter.setStatusTip("Filter what projects diagnostics to show")
        connect_combobox_user_data_changed(self.project_filter, self._on_project_selected)
        bar.addWidget(self.project_filter)

        self.clear_button = QToolButton(self)
        self.clear_button.setIcon(self.style().standardIcon(QStyle.SP_DialogResetButton))
        self.clear_button.setProperty("cssClass", "clear")
        self.clear_button.setStatusTip("Clear error list")
        self.clear_button.setToolTip("Clear error list")
        connect_button_user_clicked(self.clear_button, self.controller.clear)
        bar.addWidget(self.clear_button)

        root.addLayout(bar)

        self.list_view = DiagnosticsListView(self, row_height=row_height)
        self.list_view.open_requested.connect(self._on_open_requested)
        self.list_view.copy_requested.connect(self._on_copy_requested)
        root.addWidget(self.list_view, 1)

        self.empty_label = QLabel(empty_message, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setObjectName("EmptyDiagnosticsLabel")
        root.addWidget(self.empty_label, 1)

        self._reset_project_filter()
        self._sync_projects()

        self.controller.bus.subscribe(DiagnosticsChanged, self._on_diagnostics_changed)
        self.controller.bus.subscribe(FiltersChanged, self._on_filters_changed)

        self.refresh()

    # --------- event handlers ---------
    def _on_toggle(self, severity: Severity) -> None:
        self.controller.toggle(severity)

    def _on_project_selected(self, project: Optional[str]) -> None:
        self.controller.select_project(project or ALL_PROJECTS)

    def _on_open_requested(self, diagnostic: Diagnostic) -> None:
        self.controller.open_diagnostic(diagnostic)

    def _on_copy_requested(self, diagnostic: Diagnostic) -> None:
        self.controller.copy_message(diagnostic)

    def _on_diagnostics_changed(self, _event: DiagnosticsChanged) -> None:
        self._sync_projects()
        self.refresh()

    def _on_filters_changed(self, _event: FiltersChanged) -> None:
        self.refresh()

    # --------- rendering ---------
    def _reset_project_filter(self) -> None:
        self.project_filter.clear()
        self.project_filter.addItem(ALL_PROJECTS_LABEL, ALL_PROJECTS)
        self._known_projects = ()

    def _sync_projects(self) -> None:
        projects = self.controller.store.projects
        if projects == self._known_projects:
            return
        self._reset_project_filter()
        for name in projects:
            self.project_filter.addItem(name, name)
        self._known_projects = projects

    def _sync_project_selection(self) -> None:
        idx = self.project_filter.findData(self.controller.selected_project)
        self.project_filter.setCurrentIndex(idx if idx >= 0 else 0)

    def _sync_buttons(self) -> None:
        counts = self.controller.counts()
        state = self.controller.state
        for sev, btn in self.severity_buttons.items():
            btn.setText(f"{counts.get(sev, 0)} {severity_style(sev).label}")
            btn.setChecked(state.shows(sev))

    def display_state(self) -> DisplayState:
        return DisplayState.EMPTY if self.list_view.isHidden() else DisplayState.POPULATED

    def refresh(self) -> None:
        with span("ProjectDiagnostics.refresh"):
            self._sync_project_selection()
            self._sync_buttons()
            rows = self.controller.visible()
            self.list_view.set_diagnostics(rows)
            populated = bool(rows)
            self.list_view.setVisible(populated)
            self.empty_label.setVisible(not populated)
        log.debug("Diagnostics panel refreshed: %d visible rows", len(rows))
