"""Hypothesis strategies for sourceref property-based testing.

Usage:
    from tests.strategies import single_line_cases, source_spans
    from tests.strategies.diagnostics import diagnostic_records

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - line_texts, single_line_cases, rendered_lines
    - source_spans, diagnostic_records
"""

from .diagnostics import (
    diagnostic_records,
    line_texts,
    rendered_lines,
    single_line_cases,
    source_spans,
)

__all__ = [
    "diagnostic_records",
    "line_texts",
    "rendered_lines",
    "single_line_cases",
    "source_spans",
]
