# -*- coding: utf-8 -*-
"""Project Diagnostics standalone entrypoint.

Intentionally minimal:
- dependency check
- bootstrap (settings, logging)
- QApplication creation
- show main window, optionally preloading a build report
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="project-diagnostics",
        description="Show compiler diagnostics from a build report in a filterable panel.",
    )
    parser.add_argument("report", nargs="?", help="JSON build report to load at startup")
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="do not read or save the severity toggles",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    from app.deps import ensure_runtime_deps

    args = build_parser().parse_args(argv)

    try:
        ensure_runtime_deps()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    from PyQt5.QtWidgets import QApplication

    from app.bootstrap import bootstrap
    from app.controller import create_main_window
    from infra.crash_handler import install_global_exception_handlers

    settings = bootstrap()
    install_global_exception_handlers()

    app = QApplication(sys.argv[:1])
    window = create_main_window(settings, persist_preferences=not args.no_persist)
    window.show()
    if args.report:
        window.load_build_report(args.report)
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
