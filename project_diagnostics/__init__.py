"""Project Diagnostics package entry.

This lightweight package provides a stable module entrypoint
(python -m project_diagnostics) while keeping the top-level packages
(app/, core/, services/, ui/, infra/) intact.
"""

from app.version import __version__  # single source of truth

__all__ = ["__version__"]
