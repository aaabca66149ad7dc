"""
Report models of the CLI (JSON output) and the plain-text formatter.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .adapters.range_edits import merge_edits
from .types import Violation

PROTOCOL = 1


class FixModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    range: Tuple[int, int] = Field(..., description="Character range [start, end) of the merged fix")
    text: str


class ViolationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rule: str
    severity: Literal["warn", "error"]
    message: str
    line: int = Field(..., ge=1)
    column: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
    end_column: int = Field(..., ge=1)
    fix: Optional[FixModel] = None


class FileReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    violations: List[ViolationModel] = Field(default_factory=list)
    fixed_count: int = Field(0, ge=0)
    error_count: int = Field(0, ge=0)
    warning_count: int = Field(0, ge=0)
    read_error: Optional[str] = None


class RunReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    protocol: int = PROTOCOL
    tool_version: str
    files: List[FileReport] = Field(default_factory=list)
    error_count: int = Field(0, ge=0)
    warning_count: int = Field(0, ge=0)
    fixed_count: int = Field(0, ge=0)


# ---- construction ----

def violation_model(violation: Violation, original_text: str) -> ViolationModel:
    fix: Optional[FixModel] = None
    if violation.edits:
        merged = merge_edits(original_text, violation.edits)
        fix = FixModel(range=(merged.range.start_char, merged.range.end_char), text=merged.replacement)
    return ViolationModel(
        rule=violation.rule,
        severity=violation.severity,
        message=violation.message,
        line=violation.line,
        column=violation.column,
        end_line=violation.end_line,
        end_column=violation.end_column,
        fix=fix,
    )


def file_report(path: str, violations: Sequence[Violation], text: str, fixed_count: int = 0) -> FileReport:
    """
    Args:
        text: The text the violations were found in (fix ranges refer to it)
    """
    return FileReport(
        path=path,
        violations=[violation_model(v, text) for v in violations],
        fixed_count=fixed_count,
        error_count=sum(1 for v in violations if v.is_error),
        warning_count=sum(1 for v in violations if not v.is_error),
    )


def run_report(files: Sequence[FileReport], tool_version: str) -> RunReport:
    return RunReport(
        tool_version=tool_version,
        files=list(files),
        error_count=sum(f.error_count for f in files),
        warning_count=sum(f.warning_count for f in files),
        fixed_count=sum(f.fixed_count for f in files),
    )


# ---- text output ----

def _plural(n: int, word: str, plural: Optional[str] = None) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {plural or word + 's'}"


def format_text(report: RunReport) -> str:
    """
    Human-readable report: a header per file with findings, one line per
    violation, then a summary line.
    """
    lines: List[str] = []
    for f in report.files:
        if not f.violations and not f.read_error:
            continue
        lines.append(f.path)
        if f.read_error:
            lines.append(f"  error  {f.read_error}")
        for v in f.violations:
            lines.append(f"  {v.line}:{v.column}  {v.severity}  {v.message}  {v.rule}")
        lines.append("")

    total = report.error_count + report.warning_count
    summary = (
        f"{_plural(total, 'problem')} "
        f"({_plural(report.error_count, 'error')}, {_plural(report.warning_count, 'warning')})"
    )
    if report.fixed_count:
        summary += f", {_plural(report.fixed_count, 'fix', 'fixes')} applied"
    lines.append(summary)
    return "\n".join(lines) + "\n"


__all__ = [
    "PROTOCOL",
    "FixModel",
    "ViolationModel",
    "FileReport",
    "RunReport",
    "violation_model",
    "file_report",
    "run_report",
    "format_text",
]
