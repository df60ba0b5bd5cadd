# -*- coding: utf-8 -*-
"""Standalone runner UI.

Hosts the Project Diagnostics panel in a dock of a plain QMainWindow and acts
as the "host editor": build reports (JSON) are loaded from disk and
dispatched on the compile.complete hook, exactly as an engine editor would
announce a finished build.

NOTE: This module intentionally contains PyQt5 imports and widget wiring.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QAction, QDockWidget, QFileDialog, QLabel, QMainWindow

from app.diagnostics_controller import DiagnosticsController, MemoryPreferences
from app.events import COMPILE_COMPLETE, EventBus
from app.host import BuildReportError, load_compile_group
from app.version import __version__ as APP_VERSION
from infra.settings import DEFAULTS
from services.diagnostics_store import DiagnosticsStore
from ui.common import dialogs
from ui.common.state import QSettingsPreferences
from ui.panels.project_diagnostics import ProjectDiagnostics
from ui.qt_host import QtEditorHost

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[Dict[str, Any]] = None, *, persist_preferences: bool = True):
        super().__init__()
        self.settings = dict(DEFAULTS)
        self.settings.update(settings or {})
        self.setWindowTitle(f"Project Diagnostics {APP_VERSION}")
        self.resize(900, 600)

        self.bus = EventBus()
        self.host = QtEditorHost(self.statusBar())
        preferences = QSettingsPreferences() if persist_preferences else MemoryPreferences()
        self.controller = DiagnosticsController(
            DiagnosticsStore(),
            preferences,
            self.bus,
            host=self.host,
            status_seconds=int(self.settings["status_message_seconds"]),
            on_error=lambda title, msg: dialogs.warn(self, title, msg),
        )
        self.controller.attach(self.bus)

        hint = QLabel("Use File > Open build report... to load compiler diagnostics.", self)
        hint.setAlignment(Qt.AlignCenter)
        self.setCentralWidget(hint)

        self.panel = ProjectDiagnostics(
            self.controller,
            self,
            row_height=int(self.settings["row_height"]),
            empty_message=str(self.settings["empty_message"]),
        )
        self.dock = QDockWidget("Project Diagnostics", self)
        self.dock.setObjectName("ProjectDiagnosticsDock")
        self.dock.setWidget(self.panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, self.dock)

        self._create_menus()

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")

        act_open = QAction("&Open build report...", self)
        act_open.setShortcut("Ctrl+O")
        act_open.triggered.connect(self.open_build_report_dialog)
        file_menu.addAction(act_open)

        act_clear = QAction("&Clear diagnostics", self)
        act_clear.triggered.connect(self.controller.clear)
        file_menu.addAction(act_clear)

        file_menu.addSeparator()
        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        file_menu.addAction(act_quit)

        view_menu = self.menuBar().addMenu("&View")
        view_menu.addAction(self.dock.toggleViewAction())

    def open_build_report_dialog(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open build report", "", "Build report (*.json);;All files (*)")
        if path:
            self.load_build_report(path)

    def load_build_report(self, path: Path | str) -> bool:
        try:
            group = load_compile_group(path)
        except BuildReportError as e:
            log.warning("%s", e)
            dialogs.error(self, "Build report", "The build report could not be loaded.", details=str(e))
            return False
        self.bus.dispatch(COMPILE_COMPLETE, group)
        return True


def create_main_window(settings: Optional[Dict[str, Any]] = None, *, persist_preferences: bool = True) -> MainWindow:
    """Factory used by main.py."""
    return MainWindow(settings, persist_preferences=persist_preferences)
