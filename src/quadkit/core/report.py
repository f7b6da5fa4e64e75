"""
Pydantic v2 models describing a failure for top-level reporting.

ErrorReport snapshots any exception (the Error facade or not) into plain data:
its kind, display text and immediate-cause chain. Reports are built on demand
by final failure handlers; propagation never renders text.

Style
- Zero-IO (stdlib + pydantic only).
- Frozen models with extra="forbid".

Examples:
    >>> from quadkit.core.errors import Error
    >>> report = ErrorReport.from_exception(Error.wrap(KeyError("s")))
    >>> report.kind, [frame.type for frame in report.causes]
    ('other', ['KeyError'])
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .errors import Error, iter_causes

__all__ = [
    "CauseFrame",
    "ErrorReport",
]


def _type_name(error: BaseException) -> str:
    cls = type(error)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class CauseFrame(BaseModel):
    """
    One link of a cause chain.

    Attributes:
        type (str): Qualified exception type (builtins are unqualified).
        message (str): Display text of the cause.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: str
    message: str


class ErrorReport(BaseModel):
    """
    Reportable snapshot of a failure.

    Attributes:
        kind (str): ErrorKind value for the facade, "foreign" for any other exception.
        message (str): Display text of the failure.
        causes (list[CauseFrame]): Immediate-cause chain, nearest first.
        truncated (bool): True if the chain was cut at max_causes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str
    message: str
    causes: list[CauseFrame] = Field(default_factory=list)
    truncated: bool = False

    @classmethod
    def from_exception(cls, error: BaseException, max_causes: int = 8) -> ErrorReport:
        """
        Build a report from any exception.

        Args:
            error (BaseException): Failure to describe.
            max_causes (int): Maximum number of cause frames kept (>= 0).

        Returns:
            ErrorReport
        """
        causes: list[CauseFrame] = []
        truncated = False
        for cause in iter_causes(error):
            if len(causes) >= max_causes:
                truncated = True
                break
            causes.append(CauseFrame(type=_type_name(cause), message=str(cause)))
        kind = error.kind.value if isinstance(error, Error) else "foreign"
        return cls(kind=kind, message=str(error), causes=causes, truncated=truncated)

    def render_text(self, show_kind: bool = False) -> str:
        """
        Render the report for a terminal.

        The first line is the message (prefixed with ``[kind]`` if show_kind),
        followed by one ``caused by`` line per cause frame.
        """
        head = f"[{self.kind}] {self.message}" if show_kind else self.message
        lines = [head]
        for frame in self.causes:
            lines.append(f"  caused by {frame.type}: {frame.message}")
        if self.truncated:
            lines.append("  ...")
        return "\n".join(lines)
