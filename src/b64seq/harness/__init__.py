"""Benchmark harness for b64seq.

This module provides the canonical sample cases and a compression report
that writes to an injected output sink.
"""

from __future__ import annotations

from .datasets import SampleCase, default_cases, random_values
from .report import CaseResult, evaluate_case, run_report

__all__ = [
    "SampleCase",
    "default_cases",
    "random_values",
    "CaseResult",
    "evaluate_case",
    "run_report",
]
