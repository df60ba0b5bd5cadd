# -*- coding: utf-8 -*-
"""Base controllers (no-Qt).

Minimal shared base with safe_call(): best-effort execution of host callbacks
with logging, so a failing host integration never takes the editor panel down.

Keep this module free of PyQt imports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SafeCallResult:
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None


class BaseController:
    """Shared helpers for controllers.

    Parameters
    ----------
    on_error:
        Optional callable to surface errors to UI. It receives a short title and
        message. Kept generic (no Qt types).
    """

    def __init__(self, *, on_error: Optional[Callable[[str, str], None]] = None) -> None:
        self._on_error = on_error

    def safe_call(
        self,
        fn: Callable[..., T],
        *args: Any,
        default: Optional[T] = None,
        title: str = "Error",
        user_message: str = "An unexpected error occurred.",
        log_message: Optional[str] = None,
        **kwargs: Any,
    ) -> SafeCallResult:
        """Run fn(*args, **kwargs) and never raise.

        - Logs exception with context.
        - Optionally surfaces a short message to UI via on_error callback.
        """
        try:
            value = fn(*args, **kwargs)
            return SafeCallResult(ok=True, value=value)
        except Exception as e:
            if log_message:
                log.exception(log_message)
            else:
                log.exception("safe_call caught exception")
            if self._on_error:
                try:
                    self._on_error(title, user_message)
                except Exception:
                    log.debug("on_error callback failed", exc_info=True)
            return SafeCallResult(ok=False, value=default, error=e)
