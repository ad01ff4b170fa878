"""
Hardpass Output Module
=======================

Console display and report generation for policy evaluations.
"""

from hardpass.output.console import HardpassConsoleOutput
from hardpass.output.report import HardpassReportGenerator

__all__ = [
    "HardpassConsoleOutput",
    "HardpassReportGenerator",
]
