# -*- coding: utf-8 -*-
"""EditorHost implementation for the standalone runner (plain Qt).

Inside an engine editor the host supplies its own open_file / copy_text /
show_status; outside of it we fall back to the desktop's file handler, the
Qt clipboard and a QStatusBar.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QDesktopServices
from PyQt5.QtWidgets import QApplication, QStatusBar

log = logging.getLogger(__name__)


class QtEditorHost:
    def __init__(self, status_bar: Optional[QStatusBar] = None) -> None:
        self.status_bar = status_bar

    def open_file(self, path: str, line: int, column: int) -> None:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(path)
        log.info("Opening %s at %d:%d", p, line, column)
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(p.resolve()))):
            raise OSError(f"No application is registered to open {p}")

    def copy_text(self, text: str) -> None:
        QApplication.clipboard().setText(text)

    def show_status(self, message: str, seconds: int) -> None:
        if self.status_bar is None:
            log.info("%s", message)
            return
        self.status_bar.showMessage(message, int(seconds) * 1000)
