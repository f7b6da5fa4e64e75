"""
Configuration for the quadkit command line.

Defines ReportSettings, a frozen dataclass controlling how the final failure
handler reports an Error and how logging is configured.

Precedence
- environment (QUADKIT_REPORT_*) > TOML > defaults.
- TOML search: ./quadkit.toml ([report] table or top-level keys), then
  ./pyproject.toml under [tool.quadkit.report].

Notes
- Unknown or malformed values are ignored and the previous value kept.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

ReportFormat = Literal["text", "json"]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ReportSettings:
    """
    Runtime settings for failure reporting.

    Attributes:
        format (Literal["text","json"]): Report rendering on stderr.
        max_causes (int): Maximum number of cause frames in a report (>= 0).
        show_kind (bool): Prefix text reports with the error kind.
        log_level (str): Root logging level used by the CLI.

    Examples:
        >>> ReportSettings(format="json", max_causes=2)  # doctest: +ELLIPSIS
        ReportSettings(...)
    """

    format: ReportFormat = "text"
    max_causes: int = 8
    show_kind: bool = False
    log_level: str = "WARNING"

    @classmethod
    def _apply_mapping(cls, base: ReportSettings, cfg: dict[str, Any] | None) -> ReportSettings:
        """Apply a loose config mapping onto ReportSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "format" in cfg and isinstance(cfg["format"], str):
            fmt = cfg["format"].strip().lower()
            if fmt in ("text", "json"):
                s = replace(s, format=fmt)  # type: ignore[arg-type]

        if "max_causes" in cfg:
            try:
                n = int(cfg["max_causes"])
            except (TypeError, ValueError):
                n = -1
            if n >= 0:
                s = replace(s, max_causes=n)

        if "show_kind" in cfg:
            s = replace(s, show_kind=_bool(cfg["show_kind"]))

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(
        cls, base: ReportSettings | None = None, prefix: str = "QUADKIT_REPORT_"
    ) -> ReportSettings:
        """
        Build ReportSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - QUADKIT_REPORT_FORMAT ("text" | "json")
            - QUADKIT_REPORT_MAX_CAUSES
            - QUADKIT_REPORT_SHOW_KIND (1/0/true/false/yes/no/on/off)
            - QUADKIT_REPORT_LOG_LEVEL
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("format", "max_causes", "show_kind", "log_level"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ReportSettings:
        """
        Build ReportSettings from a TOML file.

        Search order when `path` is None:
            1) ./quadkit.toml (with either a [report] table or direct keys)
            2) ./pyproject.toml under [tool.quadkit.report]

        Returns defaults if no file is present or it cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "quadkit.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                quadkit = tool.get("quadkit", {}) if isinstance(tool, dict) else {}
                cfg = quadkit.get("report") if isinstance(quadkit, dict) else None
            elif isinstance(data.get("report"), dict):
                cfg = data["report"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ReportSettings:
        """
        Load ReportSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search quadkit.toml, pyproject.toml.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
