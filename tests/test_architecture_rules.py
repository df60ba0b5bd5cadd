# -*- coding: utf-8 -*-
"""Static checks: core/ and services/ stay free of Qt and UI imports."""
from __future__ import annotations

import importlib.util
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _load_checker():
    module_spec = importlib.util.spec_from_file_location("check_architecture", ROOT / "scripts" / "check_architecture.py")
    mod = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(mod)
    return mod


def test_no_layer_violations() -> None:
    checker = _load_checker()
    assert checker.find_violations() == []


def test_checker_flags_ui_import_in_core(tmp_path) -> None:
    checker = _load_checker()
    (tmp_path / "core").mkdir()
    (tmp_path / "core" / "bad.py").write_text("from ui.theme import SEVERITY_STYLES\n", encoding="utf-8")
    violations = checker.find_violations(tmp_path)
    assert len(violations) == 1
    assert "imports 'ui'" in violations[0]
