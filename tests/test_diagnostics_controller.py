# -*- coding: utf-8 -*-
from __future__ import annotations

from app.diagnostics_controller import DiagnosticsController, DisplayState, MemoryPreferences
from app.events import COMPILE_COMPLETE, DiagnosticsChanged, EventBus, FiltersChanged
from app.host import SimpleCompileGroup, SimpleCompiler
from core.diagnostics import Severity
from core.filters import ALL_PROJECTS
from core.keys import PrefKeys
from services.diagnostics_store import DiagnosticsStore


class _Host:
    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def open_file(self, path, line, column):
        if self.fail:
            raise FileNotFoundError(path)
        self.calls.append(("open", path, line, column))

    def copy_text(self, text):
        self.calls.append(("copy", text))

    def show_status(self, message, seconds):
        self.calls.append(("status", message, seconds))


def _group(*diags):
    return SimpleCompileGroup([SimpleCompiler("game", list(diags))])


def _controller(prefs=None, host=None):
    return DiagnosticsController(DiagnosticsStore(), prefs or MemoryPreferences(), host=host)


def test_flags_default_true_and_project_starts_at_all() -> None:
    c = _controller()
    assert c.state.show_info and c.state.show_warning and c.state.show_error
    assert c.selected_project == ALL_PROJECTS


def test_flags_are_loaded_from_preferences() -> None:
    prefs = MemoryPreferences({PrefKeys.WARNINGS_SHOWN: False})
    c = _controller(prefs)
    assert c.state.show_warning is False
    assert c.state.show_info is True


def test_toggle_persists_its_own_key() -> None:
    prefs = MemoryPreferences()
    c = _controller(prefs)
    assert c.toggle(Severity.WARNING) is False
    assert prefs.values == {PrefKeys.WARNINGS_SHOWN: False}
    assert c.toggle(Severity.WARNING) is True
    assert prefs.values[PrefKeys.WARNINGS_SHOWN] is True
    assert PrefKeys.INFO_SHOWN not in prefs.values


def test_project_filter_is_not_persisted(make_diag) -> None:
    prefs = MemoryPreferences()
    c = _controller(prefs)
    c.on_compile_complete(_group(make_diag(project="game")))
    c.select_project("game")
    assert prefs.values == {}
    assert _controller(prefs).selected_project == ALL_PROJECTS


def test_example_ordering(make_diag) -> None:
    c = _controller()
    c.on_compile_complete(
        _group(
            make_diag(Severity.ERROR, "ProjA", "x"),
            make_diag(Severity.INFO, "ProjB", "y"),
            make_diag(Severity.WARNING, "ProjA", "z"),
        )
    )
    assert [d.message for d in c.visible()] == ["x", "y", "z"]


def test_display_state_follows_filters(make_diag) -> None:
    c = _controller()
    assert c.display_state() is DisplayState.EMPTY
    c.on_compile_complete(_group(make_diag(Severity.INFO)))
    assert c.display_state() is DisplayState.POPULATED
    c.toggle(Severity.INFO)
    assert c.display_state() is DisplayState.EMPTY


def test_selected_project_falls_back_when_gone(make_diag) -> None:
    c = _controller()
    c.on_compile_complete(_group(make_diag(project="a"), make_diag(project="b")))
    c.select_project("b")
    c.on_compile_complete(_group(make_diag(project="b")))
    assert c.selected_project == "b"
    c.on_compile_complete(_group(make_diag(project="a")))
    assert c.selected_project == ALL_PROJECTS


def test_build_status_message_and_host_status(make_diag) -> None:
    host = _Host()
    c = _controller(host=host)
    assert c.on_compile_complete(_group(make_diag(Severity.WARNING))) is None
    msg = c.on_compile_complete(_group(make_diag(Severity.ERROR), make_diag(Severity.ERROR)))
    assert msg == "Build failed - you have 2 errors"
    assert host.calls == [("status", msg, 10)]


def test_clear_empties_store_and_resets_project(make_diag) -> None:
    c = _controller()
    c.on_compile_complete(_group(make_diag(project="a")))
    c.select_project("a")
    c.clear()
    assert c.visible() == []
    assert c.selected_project == ALL_PROJECTS
    assert c.store.projects == ()


def test_events_are_emitted(make_diag) -> None:
    bus = EventBus()
    seen = []
    bus.subscribe(DiagnosticsChanged, seen.append)
    bus.subscribe(FiltersChanged, seen.append)
    c = DiagnosticsController(DiagnosticsStore(), MemoryPreferences(), bus)
    c.attach(bus)
    bus.dispatch(COMPILE_COMPLETE, _group(make_diag(Severity.ERROR)))
    c.toggle(Severity.ERROR)
    assert isinstance(seen[0], DiagnosticsChanged) and seen[0].error_count == 1
    assert isinstance(seen[1], FiltersChanged) and seen[1].state.show_error is False


def test_build_with_a_malformed_item_still_replaces_the_list(make_diag) -> None:
    bus = EventBus()
    c = DiagnosticsController(DiagnosticsStore(), MemoryPreferences(), bus)
    c.attach(bus)
    bus.dispatch(COMPILE_COMPLETE, _group(make_diag(message="OLD")))
    assert [d.message for d in c.visible()] == ["OLD"]

    bus.dispatch(
        COMPILE_COMPLETE,
        {
            "compilers": [
                {
                    "diagnostics": [
                        {"severity": "Error", "project": "game", "message": "NEW", "filePath": "a.cs", "lineNumber": 1, "charNumber": 1},
                        {"severity": "Bogus", "message": "m"},
                    ]
                }
            ]
        },
    )
    assert [d.message for d in c.visible()] == ["NEW"]


def test_navigation_and_copy_go_through_host(make_diag) -> None:
    host = _Host()
    c = _controller(host=host)
    d = make_diag(file_path="code/Player.cs", line=57, col=13, message="boom")
    assert c.open_diagnostic(d) is True
    assert c.copy_message(d) is True
    assert host.calls == [("open", "code/Player.cs", 57, 13), ("copy", "boom")]


def test_navigation_failure_is_reported_not_raised(make_diag) -> None:
    errors = []
    c = DiagnosticsController(
        DiagnosticsStore(), MemoryPreferences(), host=_Host(fail=True), on_error=lambda t, m: errors.append((t, m))
    )
    assert c.open_diagnostic(make_diag(file_path="missing.cs")) is False
    assert errors == [("Open file", "Could not open missing.cs.")]


def test_without_host_navigation_is_a_no_op(make_diag) -> None:
    c = _controller()
    assert c.open_diagnostic(make_diag()) is False
    assert c.copy_message(make_diag()) is False
