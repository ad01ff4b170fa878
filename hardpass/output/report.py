"""
Hardpass Report Generator
==========================

Builds machine-readable JSON reports from evaluation results for CI
pipelines and account-provisioning tooling. Reports carry masked
passwords only.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from shared.models import ScanResult

import hardpass


class HardpassReportGenerator:
    """Serialise :class:`ScanResult` objects to JSON.

    Usage::

        generator = HardpassReportGenerator()
        generator.generate_json([scan_result], Path("report.json"))
    """

    def build(self, results: Sequence[ScanResult]) -> dict[str, Any]:
        """Assemble the report document for *results*."""
        strong = sum(1 for r in results if not r.findings)
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": hardpass.__tool_name__,
                "version": hardpass.__version__,
            },
            "summary": {
                "total": len(results),
                "strong": strong,
                "weak": len(results) - strong,
            },
            "results": [
                {
                    "target": r.target,
                    "summary": r.summary,
                    "highest_severity": (
                        r.highest_severity.value if r.highest_severity else None
                    ),
                    "duration_seconds": r.duration_seconds,
                    "findings": [f.model_dump(mode="json") for f in r.findings],
                    "report": r.metadata,
                }
                for r in results
            ],
        }

    def render(self, results: Sequence[ScanResult]) -> str:
        return json.dumps(
            self.build(results), indent=2, ensure_ascii=False, default=str
        )

    def generate_json(self, results: Sequence[ScanResult], output_path: Path) -> Path:
        """Write the JSON report for *results* to *output_path*.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(results), encoding="utf-8")
        return output_path
