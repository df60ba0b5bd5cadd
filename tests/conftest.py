# -*- coding: utf-8 -*-

"""Pytest configuration.

This project uses a simple top-level package layout (app/, core/, ...).
For local testing we add the repository root to sys.path so that imports like
`from core...` work reliably even without an editable install.

Widget tests use the `qapp` fixture, which runs Qt offscreen and skips when
PyQt5 is not installed.
"""

from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt5.QtWidgets")
    app = widgets.QApplication.instance()
    if app is None:
        app = widgets.QApplication([])
    yield app


@pytest.fixture
def make_diag():
    from core.diagnostics import Diagnostic, Severity

    def _make(severity=Severity.ERROR, project="ProjA", message="x", file_path="code/a.cs", line=1, col=1):
        return Diagnostic(Severity.parse(severity), project, message, file_path, line, col)

    return _make
