# -*- coding: utf-8 -*-
"""List of compiler diagnostics with open/copy actions."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem, QMenu

from core.diagnostics import Diagnostic
from ui.delegates.diagnostic_delegate import DIAGNOSTIC_ROLE, DiagnosticDelegate, severity_icon

log = logging.getLogger(__name__)


class DiagnosticsListView(QListWidget):
    open_requested = pyqtSignal(object)
    copy_requested = pyqtSignal(object)

    def __init__(self, parent=None, row_height: int = 48):
        super().__init__(parent)
        self.setObjectName("Output")
        self.setMouseTracking(True)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setUniformItemSizes(True)
        self.setSpacing(0)
        self.setItemDelegate(DiagnosticDelegate(self, row_height=row_height))

        self.itemActivated.connect(self._on_item_activated)
        self.setContextMenuPolicy(Qt.CustomContextMenu)
        self.customContextMenuRequested.connect(self._show_context_menu)

    def set_diagnostics(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.clear()
        for d in diagnostics:
            item = QListWidgetItem(severity_icon(d.severity), d.message)
            item.setData(DIAGNOSTIC_ROLE, d)
            item.setToolTip(d.subtitle)
            self.addItem(item)

    def diagnostic_at(self, row: int) -> Optional[Diagnostic]:
        item = self.item(row)
        if item is None:
            return None
        d = item.data(DIAGNOSTIC_ROLE)
        return d if isinstance(d, Diagnostic) else None

    def diagnostics(self) -> list[Diagnostic]:
        return [d for d in (self.diagnostic_at(i) for i in range(self.count())) if d is not None]

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        d = item.data(DIAGNOSTIC_ROLE)
        if isinstance(d, Diagnostic):
            self.open_requested.emit(d)

    def build_context_menu(self, diagnostic: Diagnostic) -> QMenu:
        menu = QMenu(self)
        act_open = menu.addAction("Open in Code Editor")
        act_open.triggered.connect(lambda _=False: self.open_requested.emit(diagnostic))
        act_copy = menu.addAction("Copy Error")
        act_copy.triggered.connect(lambda _=False: self.copy_requested.emit(diagnostic))
        return menu

    def _show_context_menu(self, pos) -> None:
        item = self.itemAt(pos)
        if item is None:
            return
        d = item.data(DIAGNOSTIC_ROLE)
        if not isinstance(d, Diagnostic):
            return
        menu = self.build_context_menu(d)
        menu.exec_(self.mapToGlobal(pos))
