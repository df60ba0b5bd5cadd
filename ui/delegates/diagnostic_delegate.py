# -*- coding: utf-8 -*-
"""Delegate painting one diagnostic per row: icon, message, location."""
from __future__ import annotations

from PyQt5.QtCore import QRect, QSize, Qt
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import QApplication, QStyle, QStyledItemDelegate

from core.diagnostics import Diagnostic, Severity
from ui.theme import get_theme_token, severity_color, severity_style

DIAGNOSTIC_ROLE = Qt.UserRole + 1

ICON_PIXMAPS = {
    "error": QStyle.SP_MessageBoxCritical,
    "warning": QStyle.SP_MessageBoxWarning,
    "info": QStyle.SP_MessageBoxInformation,
}

ICON_SIZE = 24


def severity_icon(severity: Severity):
    style = QApplication.style()
    return style.standardIcon(ICON_PIXMAPS[severity_style(severity).icon])


class DiagnosticDelegate(QStyledItemDelegate):
    def __init__(self, parent=None, row_height: int = 48):
        super().__init__(parent)
        self.row_height = int(row_height)

    def sizeHint(self, option, index):
        return QSize(option.rect.width(), self.row_height)

    def paint(self, painter: QPainter, option, index):
        diagnostic = index.data(DIAGNOSTIC_ROLE)
        if not isinstance(diagnostic, Diagnostic):
            super().paint(painter, option, index)
            return

        hover = bool(option.state & QStyle.State_MouseOver) or bool(option.state & QStyle.State_Selected)
        color = QColor(severity_color(diagnostic.severity))
        text = QColor(get_theme_token("TEXT_COLOR"))

        painter.save()
        painter.setRenderHint(QPainter.Antialiasing)

        bg = QColor(color).darker(250)
        bg.setAlphaF(0.3 if hover else 0.2)
        painter.setPen(Qt.NoPen)
        painter.setBrush(bg)
        painter.drawRect(option.rect.adjusted(0, 1, 0, -1))

        icon_rect = QRect(option.rect.left() + 12, option.rect.center().y() - ICON_SIZE // 2, ICON_SIZE, ICON_SIZE)
        severity_icon(diagnostic.severity).paint(painter, icon_rect)

        rect = option.rect.adjusted(48, 8, 0, -8)
        text.setAlphaF(1.0 if hover else 0.8)
        painter.setPen(QPen(text))
        message = option.fontMetrics.elidedText(diagnostic.message, Qt.ElideRight, rect.width())
        painter.drawText(rect, int(Qt.AlignLeft | Qt.AlignTop | Qt.TextSingleLine), message)

        text.setAlphaF(0.5 if hover else 0.4)
        painter.setPen(QPen(text))
        painter.drawText(rect, int(Qt.AlignLeft | Qt.AlignBottom | Qt.TextSingleLine), diagnostic.subtitle)

        painter.restore()
