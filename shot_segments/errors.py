"""
Exception types raised while segmenting a video into shots.

OpenError and StreamTooShortError are fatal for a run. WriteError is only
ever logged by the boundary detector, so a failed image export never stops
the scan.
"""


class ShotSegmentsError(Exception):
    """Base class for all shot segmentation errors."""


class OpenError(ShotSegmentsError, ValueError):
    """The input video cannot be opened or decoded."""

    def __init__(self, video_path):
        super().__init__(f"Cannot open video: {video_path}")
        self.video_path = video_path


class StreamTooShortError(ShotSegmentsError, ValueError):
    """The video holds fewer than two frames, so nothing can be scored."""

    def __init__(self, frame_count=0):
        super().__init__(f"Need at least 2 frames, got {frame_count}")
        self.frame_count = frame_count


class WriteError(ShotSegmentsError, OSError):
    """A boundary image could not be written."""

    def __init__(self, path, reason=None):
        message = f"Cannot write image: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path


class FrameRateError(ShotSegmentsError, ValueError):
    """The video reports no usable frame rate, so timecodes cannot be computed."""

    def __init__(self, fps):
        super().__init__(f"Invalid frame rate: {fps}")
        self.fps = fps
