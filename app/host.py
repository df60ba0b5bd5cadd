# -*- coding: utf-8 -*-
"""Host editor contract.

The panel does not compile anything nor resolve source positions; it only
consumes compile groups and calls back into the host for navigation,
clipboard and status bar messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Protocol

from core.diagnostics import Diagnostic, DiagnosticFormatError

log = logging.getLogger(__name__)


class BuildReportError(Exception):
    """A build report file could not be read or understood."""


class CompilerUnit(Protocol):
    diagnostics: Optional[Iterable[Any]]


class CompileGroup(Protocol):
    compilers: Iterable[CompilerUnit]


class EditorHost(Protocol):
    def open_file(self, path: str, line: int, column: int) -> None: ...

    def copy_text(self, text: str) -> None: ...

    def show_status(self, message: str, seconds: int) -> None: ...


@dataclass
class SimpleCompiler:
    name: str = ""
    diagnostics: Optional[List[Diagnostic]] = None


@dataclass
class SimpleCompileGroup:
    compilers: List[SimpleCompiler] = field(default_factory=list)


def compile_group_from_dict(data: Any) -> SimpleCompileGroup:
    """Parse ``{"compilers": [{"name": ..., "diagnostics": [...] | null}, ...]}``."""
    if not isinstance(data, dict):
        raise BuildReportError("Build report must be a JSON object")
    compilers = data.get("compilers")
    if not isinstance(compilers, list):
        raise BuildReportError("Build report is missing a 'compilers' list")

    group = SimpleCompileGroup()
    for i, raw in enumerate(compilers):
        if not isinstance(raw, dict):
            raise BuildReportError(f"Compiler #{i} must be an object")
        items = raw.get("diagnostics")
        diags: Optional[List[Diagnostic]] = None
        if items is not None:
            try:
                diags = [Diagnostic.from_mapping(d) for d in items]
            except DiagnosticFormatError as e:
                raise BuildReportError(f"Compiler #{i}: {e}") from e
        group.compilers.append(SimpleCompiler(name=str(raw.get("name") or ""), diagnostics=diags))
    return group


def load_compile_group(path: Path | str) -> SimpleCompileGroup:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise BuildReportError(f"Cannot read build report {p}: {e}") from e
    group = compile_group_from_dict(data)
    log.info("Loaded build report %s (%d compilers)", p, len(group.compilers))
    return group
