"""
Tests for pipeline timing instrumentation.
"""

import pytest

from quiz_toolkit.extractor.timing import TimingLog, timed_phase


class TestTimingLog:

    def test_phases_accumulate(self):
        log = TimingLog()

        log.log_phase("pdf_decoding", 0.25)
        log.log_phase("reconciliation", 0.5)
        log.log_phase("pdf_decoding", 0.25)

        assert log.phase_timings == {"pdf_decoding": 0.5, "reconciliation": 0.5}
        assert log.total == pytest.approx(1.0)

    def test_summary_and_dict(self):
        log = TimingLog()
        log.log_phase("writing", 0.125)

        assert "writing" in log.summary()
        assert "total" in log.summary()
        assert log.to_dict() == {"phase_timings": {"writing": 0.125}, "total": 0.125}


class TestTimedPhase:

    def test_records_duration(self):
        log = TimingLog()

        with timed_phase(log, "question_segmentation"):
            pass

        assert log.phase_timings["question_segmentation"] >= 0.0

    def test_records_even_when_block_raises(self):
        log = TimingLog()

        with pytest.raises(RuntimeError):
            with timed_phase(log, "pdf_decoding"):
                raise RuntimeError("boom")

        assert "pdf_decoding" in log.phase_timings
