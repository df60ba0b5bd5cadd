# -*- coding: utf-8 -*-
"""Global crash/exception handlers for the standalone runner.

Inside a host editor the host owns sys.excepthook; the runner installs these
so unexpected exceptions end up in the panel log instead of vanishing.

This module is safe to import before QApplication is created.
"""

from __future__ import annotations

import logging
import sys
import traceback
from types import TracebackType
from typing import Optional, Type

log = logging.getLogger(__name__)

_handling_exception = False


def _log_exception(exc_type: Type[BaseException], exc: BaseException, tb: Optional[TracebackType]) -> None:
    global _handling_exception
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    if _handling_exception:
        # re-entrant failure while logging
        sys.__stderr__.write("Unhandled exception (suppressed)\n")
        return

    _handling_exception = True
    try:
        log.critical("Unhandled exception", exc_info=(exc_type, exc, tb))
    except Exception:
        # last resort
        sys.__stderr__.write("Unhandled exception (logging failed):\n")
        sys.__stderr__.write("".join(traceback.format_exception(exc_type, exc, tb)))
    finally:
        _handling_exception = False


def install_global_exception_handlers() -> None:
    """Install sys exception hook to ensure crashes are logged."""
    logging.raiseExceptions = False
    sys.excepthook = _log_exception  # type: ignore[assignment]
