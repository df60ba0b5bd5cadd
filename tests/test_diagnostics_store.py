# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from types import SimpleNamespace

from app.host import SimpleCompileGroup, SimpleCompiler
from core.diagnostics import Severity
from services.diagnostics_store import DiagnosticsStore


def _group(*units):
    return SimpleCompileGroup([SimpleCompiler(name=f"c{i}", diagnostics=u) for i, u in enumerate(units)])


def test_ingests_all_units_in_order_and_skips_missing(make_diag) -> None:
    a = make_diag(Severity.WARNING, "game", "w")
    b = make_diag(Severity.ERROR, "base", "e")
    c = make_diag(Severity.INFO, "game", "i")
    store = DiagnosticsStore()
    store.replace_from_group(_group([a], None, [b, c]))
    assert store.diagnostics == (a, b, c)
    assert store.projects == ("game", "base")
    assert store.error_count == 1
    assert len(store) == 3


def test_new_build_replaces_previous_even_when_empty(make_diag) -> None:
    store = DiagnosticsStore()
    store.replace_from_group(_group([make_diag(project="old")]))
    assert store.projects == ("old",)

    store.replace_from_group(_group([]))
    assert store.diagnostics == ()
    assert store.projects == ()


def test_accepts_mapping_groups_and_items() -> None:
    store = DiagnosticsStore()
    store.replace_from_group(
        {"compilers": [{"diagnostics": [{"severity": "Error", "project": "p", "message": "m"}]}, {"diagnostics": None}]}
    )
    assert [d.message for d in store.diagnostics] == ["m"]


def test_group_without_compilers_clears() -> None:
    store = DiagnosticsStore()
    store.replace_from_group(object())
    assert store.diagnostics == ()
    assert store.revision == 1


def test_bad_item_is_skipped_and_build_still_replaces(make_diag, caplog) -> None:
    store = DiagnosticsStore()
    store.replace([make_diag(message="OLD")])
    good = {"severity": "Error", "project": "game", "message": "NEW", "filePath": "a.cs", "lineNumber": 1, "charNumber": 1}
    with caplog.at_level(logging.WARNING, logger="services.diagnostics_store"):
        store.replace_from_group(_group([good, {"severity": "Bogus", "message": "m"}, {"severity": "Error"}]))
    assert [d.message for d in store.diagnostics] == ["NEW"]
    assert store.projects == ("game",)
    assert "Skipping malformed diagnostic" in caplog.text


def test_accepts_attribute_style_items(make_diag) -> None:
    store = DiagnosticsStore()
    store.replace([make_diag(message="OLD")])
    item = SimpleNamespace(severity="Warning", project="game", message="NEW", file_path="a.cs", line_number=1, char_number=1)
    store.replace_from_group(_group([item]))
    (d,) = store.diagnostics
    assert d.message == "NEW"
    assert d.severity is Severity.WARNING
    assert d.location == "a.cs(1,1)"


def test_clear_bumps_revision(make_diag) -> None:
    store = DiagnosticsStore()
    store.replace([make_diag()])
    store.clear()
    assert store.diagnostics == ()
    assert store.revision == 2
