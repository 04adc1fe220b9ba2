"""
Module: extractor.timing

Purpose:
    Timing instrumentation for the extraction pipeline, so a slow source
    document shows which phase (decoding, segmentation, reconciliation)
    is responsible.

Key Classes:
    - TimingLog: Collects per-phase wall-clock durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Used By:
    - extractor.pipeline: Main extraction orchestrator
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator


@dataclass
class TimingLog:
    """
    Timing metrics for one pipeline run.

    Attributes:
        phase_timings: Dict of phase_name -> duration_seconds, in run order

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("pdf_decoding", 0.234)
        >>> log.total
        0.234
    """
    phase_timings: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Log a phase duration; repeated phases accumulate."""
        self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phase_timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Extraction Timing Summary ==="]
        for phase, duration in self.phase_timings.items():
            lines.append(f"  {phase:25s} {duration:.3f}s")
        lines.append(f"  {'total':25s} {self.total:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "phase_timings": dict(self.phase_timings),
            "total": self.total,
        }


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    The duration is recorded even if the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "question_segmentation"):
        ...     blocks = segment_questions(text)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_phase(phase, time.perf_counter() - start)
