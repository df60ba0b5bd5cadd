# -*- coding: utf-8 -*-
"""Common dialogs helpers.

Thin wrappers around QMessageBox to keep UI consistent and reduce duplication.
"""

from __future__ import annotations

from typing import Optional

from PyQt5.QtWidgets import QMessageBox, QWidget


def warn(parent: Optional[QWidget], title: str, text: str) -> None:
    QMessageBox.warning(parent, title, text)


def error(parent: Optional[QWidget], title: str, text: str, details: Optional[str] = None) -> None:
    if details:
        text = f"{text}\n\nDetails:\n{details}"
    QMessageBox.critical(parent, title, text)
