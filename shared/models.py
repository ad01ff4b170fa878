"""
Hardpass Shared Data Models
============================

Result envelope emitted by the hardpass front ends: a :class:`ScanResult`
per evaluated password holding one :class:`Finding` per violated rule.

Findings loosely follow SARIF result objects; severities use the CVSS
v3.1 qualitative names.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - FIRST. (2019). Common Vulnerability Scoring System v3.1.
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class Severity(str, Enum):
    """Severity of a finding, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def label(self) -> str:
        return "Informational" if self is Severity.INFO else self.value.capitalize()


class Finding(BaseModel):
    """A single failed check.

    Attributes:
        severity: Qualitative rating.
        title: Short title, e.g. ``"Policy Rule Failed: length_min"``.
        description: What is wrong, in full sentences.
        evidence: Supporting data; dicts and lists are stored as JSON.
            Never password material.
        recommendation: Suggested fix.
        references: Citations for the requirement.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    severity: Severity
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = ""
    recommendation: str = ""
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return v if isinstance(v, str) else str(v)


class ScanResult(BaseModel):
    """Outcome of evaluating one password.

    ``target`` is a label such as ``"[password #3]"``, never the password
    itself. ``metadata`` carries the serialised policy report.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        counts = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index, default=None)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Stamp ``end_time`` and set the summary; returns ``self``.

        Without *summary*, one is built from the severity counts.
        """
        self.end_time = _utcnow()
        if summary is None:
            counts = ", ".join(
                f"{name}: {n}" for name, n in self.severity_counts.items() if n
            )
            summary = (
                f"Evaluation complete. Findings: {len(self.findings)} "
                f"({counts or 'none'})"
            )
        self.summary = summary
        return self
