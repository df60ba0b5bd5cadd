# -*- coding: utf-8 -*-
"""Simple event bus for host hooks and panel refresh routing (no UI dependency)."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Any, Callable, Dict, List, Type

COMPILE_COMPLETE = "compile.complete"

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileComplete:
    group: Any
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class DiagnosticsChanged:
    revision: int
    count: int
    error_count: int = 0


@dataclass(frozen=True)
class FiltersChanged:
    state: Any
    reason: str = "user"


class EventBus:
    """Minimal in-process event bus (best-effort).

    Two flavours of subscription:
    - by event type: subscribe(DiagnosticsChanged, cb) / emit(DiagnosticsChanged(...))
    - by hook name: on("compile.complete", cb) / dispatch("compile.complete", group)
      which mirrors how editor hosts announce build results.
    """

    def __init__(self) -> None:
        self._subs: Dict[Type[Any], List[Callable[[Any], None]]] = {}
        self._hooks: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: Type[Any], callback: Callable[[Any], None]) -> None:
        self._subs.setdefault(event_type, []).append(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._subs.get(type(event), []) or []):
            try:
                cb(event)
            except Exception:
                # Best-effort: never crash UI for event handlers
                log.debug("Event handler failed.", exc_info=True)

    def on(self, hook: str, callback: Callable[[Any], None]) -> None:
        self._hooks.setdefault(str(hook), []).append(callback)

    def dispatch(self, hook: str, payload: Any = None) -> None:
        for cb in list(self._hooks.get(str(hook), []) or []):
            try:
                cb(payload)
            except Exception:
                log.exception("Hook %r handler failed.", hook)
        if hook == COMPILE_COMPLETE:
            self.emit(CompileComplete(group=payload))
