"""
Unit tests for shot_segments.detector module.

Tests the single-pass BoundaryDetector: marker bookkeeping, the dual
threshold, image export callbacks and short streams.
"""

import logging
from unittest.mock import Mock

import numpy as np
import pytest

from shot_segments.detector import BoundaryDetector
from shot_segments.errors import StreamTooShortError, WriteError


def _frames(*values):
    return [np.full((8, 8), v, dtype=np.uint8) for v in values]


class TestBoundaryDetectorDetect:
    """Tests for BoundaryDetector.detect with synthetic streams."""

    def test_single_cut_produces_three_markers(self, cut_stream):
        """A cut at frame 5 in a 10-frame stream gives [0, 5, 9]."""
        detector = BoundaryDetector(threshold=50)
        assert detector.detect(cut_stream) == [0, 5, 9]

    def test_high_threshold_detects_no_cut(self, cut_stream):
        """Only the start and end sentinels remain."""
        detector = BoundaryDetector(threshold=100)
        assert detector.detect(cut_stream) == [0, 9]

    def test_sustained_motion_registers_once(self, high_motion_stream):
        """Constant high scores after the first jump are not new cuts."""
        detector = BoundaryDetector(threshold=50)
        assert detector.detect(high_motion_stream) == [0, 2, 5]

    def test_two_frame_stream(self):
        """Two frames are enough: markers are the two sentinels."""
        detector = BoundaryDetector()
        assert detector.detect(_frames(0, 0)) == [0, 1]

    def test_cut_on_last_frame_is_not_duplicated(self):
        """A cut on the final frame doubles as the end sentinel."""
        detector = BoundaryDetector(threshold=50)
        markers = detector.detect(_frames(0, 0, 0, 200))
        assert markers == [0, 3]

    def test_accepts_bgr_frames(self, black_frame, white_frame):
        """Colour frames are converted to grayscale before scoring."""
        detector = BoundaryDetector(threshold=50)
        frames = [black_frame] * 3 + [white_frame] * 3
        assert detector.detect(frames) == [0, 3, 5]

    def test_accepts_generator(self, cut_stream):
        detector = BoundaryDetector(threshold=50)
        assert detector.detect(frame for frame in cut_stream) == [0, 5, 9]

    def test_markers_strictly_increasing_with_cuts(self):
        """Alternating scenes far enough apart give increasing markers."""
        values = [0, 0, 0, 200, 200, 200, 0, 0, 0, 200, 200]
        detector = BoundaryDetector(threshold=50)
        markers = detector.detect(_frames(*values))
        assert markers == [0, 3, 6, 9, 10]
        assert all(a < b for a, b in zip(markers, markers[1:]))

    def test_detect_resets_between_runs(self, cut_stream):
        """Running detect twice should not accumulate markers."""
        detector = BoundaryDetector(threshold=50)
        detector.detect(cut_stream)
        assert detector.detect(cut_stream) == [0, 5, 9]


class TestBoundaryDetectorShortStreams:
    """Tests for streams with fewer than two frames."""

    def test_empty_stream_raises(self):
        with pytest.raises(StreamTooShortError):
            BoundaryDetector().detect([])

    def test_single_frame_raises(self):
        with pytest.raises(StreamTooShortError):
            BoundaryDetector().detect(_frames(0))

    def test_too_short_is_value_error(self):
        """StreamTooShortError can be caught as ValueError."""
        with pytest.raises(ValueError):
            BoundaryDetector().detect([])


class TestBoundaryDetectorStepwise:
    """Tests for the start/step/finish interface."""

    def test_step_before_start_raises(self):
        with pytest.raises(RuntimeError, match="start"):
            BoundaryDetector().step(np.zeros((8, 8), dtype=np.uint8))

    def test_step_returns_cut_flag(self):
        frames = _frames(0, 0, 200)
        detector = BoundaryDetector(threshold=50)
        detector.start(frames[0])
        assert detector.step(frames[1]) is False
        assert detector.step(frames[2]) is True

    def test_state_after_step(self):
        frames = _frames(0, 40)
        detector = BoundaryDetector(threshold=50)
        detector.start(frames[0])
        detector.step(frames[1])

        assert detector.previous_score == 40
        assert detector.frame_index == 2
        assert detector.previous_frame is frames[1]
        assert detector.markers == [0]

    def test_finish_after_start_only_raises(self):
        detector = BoundaryDetector()
        detector.start(np.zeros((8, 8), dtype=np.uint8))
        with pytest.raises(StreamTooShortError):
            detector.finish()


class TestBoundaryDetectorImageExport:
    """Tests for the frame_writer callback."""

    def test_writer_called_for_sentinels_and_cut(self, cut_stream):
        """Start, cut (out + in) and end images are exported in order."""
        writer = Mock()
        detector = BoundaryDetector(threshold=50, frame_writer=writer)
        detector.detect(cut_stream)

        calls = [(c.args[0], c.args[2]) for c in writer.call_args_list]
        assert calls == [(0, "in"), (4, "out"), (5, "in"), (9, "out")]

    def test_writer_receives_matching_frames(self, cut_stream):
        writer = Mock()
        detector = BoundaryDetector(threshold=50, frame_writer=writer)
        detector.detect(cut_stream)

        exported = {(c.args[0], c.args[2]): c.args[1] for c in writer.call_args_list}
        assert exported[(4, "out")] is cut_stream[4]
        assert exported[(5, "in")] is cut_stream[5]
        assert exported[(9, "out")] is cut_stream[9]

    def test_writer_receives_decoded_colour_frame(self, black_frame, white_frame):
        """Exported images are the decoded frames, not the grayscale copies."""
        writer = Mock()
        detector = BoundaryDetector(threshold=50, frame_writer=writer)
        detector.detect([black_frame, white_frame])

        in_frame = writer.call_args_list[2].args[1]
        assert in_frame.shape == (100, 100, 3)

    def test_single_frame_stream_exports_nothing(self):
        """A stream too short to score leaves no images behind."""
        writer = Mock()
        detector = BoundaryDetector(frame_writer=writer)

        with pytest.raises(StreamTooShortError):
            detector.detect(_frames(0))

        writer.assert_not_called()

    def test_head_image_written_on_first_step(self):
        writer = Mock()
        detector = BoundaryDetector(frame_writer=writer)
        frames = _frames(0, 0)

        detector.start(frames[0])
        writer.assert_not_called()

        detector.step(frames[1])
        writer.assert_called_once_with(0, frames[0], "in")

    def test_no_writer_no_export(self, cut_stream):
        """Detection works without a writer."""
        assert BoundaryDetector(frame_writer=None).detect(cut_stream) == [0, 5, 9]

    def test_write_error_is_not_fatal(self, cut_stream, caplog):
        """A failing writer is logged and the scan continues."""
        writer = Mock(side_effect=WriteError("00000000-in.jpg"))
        detector = BoundaryDetector(threshold=50, frame_writer=writer)

        with caplog.at_level(logging.WARNING, logger="shot_segments.detector"):
            markers = detector.detect(cut_stream)

        assert markers == [0, 5, 9]
        assert writer.call_count == 4
        assert "Cannot write image" in caplog.text

    def test_other_writer_errors_propagate(self, cut_stream):
        """Only WriteError is tolerated."""
        writer = Mock(side_effect=KeyError("boom"))
        detector = BoundaryDetector(frame_writer=writer)
        with pytest.raises(KeyError):
            detector.detect(cut_stream)


class TestBoundaryDetectorProgress:
    """Tests for per-frame score logging."""

    def test_progress_disabled_by_default(self, cut_stream, caplog):
        with caplog.at_level(logging.INFO, logger="shot_segments.detector"):
            BoundaryDetector().detect(cut_stream)
        assert "Score=" not in caplog.text

    def test_every_frame_logged_with_interval_one(self, cut_stream, caplog):
        with caplog.at_level(logging.INFO, logger="shot_segments.detector"):
            BoundaryDetector(progress_interval=1).detect(cut_stream)

        score_lines = [r.getMessage() for r in caplog.records if "Score=" in r.getMessage()]
        assert len(score_lines) == 9
        assert "Frame=5 Score=80 Diff=75" in score_lines

    def test_interval_filters_frames(self, cut_stream, caplog):
        with caplog.at_level(logging.INFO, logger="shot_segments.detector"):
            BoundaryDetector(progress_interval=4).detect(cut_stream)

        score_lines = [r.getMessage() for r in caplog.records if "Score=" in r.getMessage()]
        assert [line.split()[0] for line in score_lines] == ["Frame=4", "Frame=8"]
