# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from app.host import BuildReportError, compile_group_from_dict, load_compile_group
from core.diagnostics import Severity

ROOT = Path(__file__).resolve().parents[1]


def test_sample_report_loads() -> None:
    group = load_compile_group(ROOT / "examples" / "build_report.json")
    assert [c.name for c in group.compilers] == ["game", "base", "menu"]
    assert group.compilers[2].diagnostics is None
    assert group.compilers[1].diagnostics[0].severity is Severity.ERROR


def test_missing_file(tmp_path) -> None:
    with pytest.raises(BuildReportError):
        load_compile_group(tmp_path / "nope.json")


def test_invalid_json(tmp_path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(BuildReportError):
        load_compile_group(p)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"compilers": "x"},
        {"compilers": [1]},
        {"compilers": [{"diagnostics": [{"severity": "Bogus", "message": "m"}]}]},
    ],
)
def test_rejects_malformed_reports(data) -> None:
    with pytest.raises(BuildReportError):
        compile_group_from_dict(data)


def test_roundtrip_through_file(tmp_path) -> None:
    p = tmp_path / "report.json"
    p.write_text(json.dumps({"compilers": [{"name": "a", "diagnostics": []}]}), encoding="utf-8")
    group = load_compile_group(p)
    assert group.compilers[0].diagnostics == []
