"""
quadkit.cli — command line entry point and its configuration.

## Public API
- ReportSettings — failure reporting and logging configuration (env > TOML > defaults).
- main — argparse entry point installed as the ``quadkit`` script.

## Notes
- Every subsystem call is wrapped with quadkit.core.convert.boundary, so the final
  failure handler only ever catches quadkit.core.errors.Error.
"""

from __future__ import annotations

from .config import ReportSettings
from .main import main

__all__ = [
    "ReportSettings",
    "main",
]
