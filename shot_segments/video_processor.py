"""
OpenCV video source used by the shot detector.

Wraps ``cv2.VideoCapture`` behind a small reader with context manager
support, plus the grayscale conversion applied before scoring.
"""

from __future__ import annotations

from collections.abc import Iterator

import cv2
import numpy as np

from .errors import OpenError


def to_gray(frame: np.ndarray) -> np.ndarray:
    """
    Convert a decoded frame to single-channel grayscale.

    Frames that are already 2-D are returned unchanged.

    Args:
        frame: Frame in BGR format (OpenCV default) or grayscale.

    Returns:
        Grayscale frame with the same height and width.
    """
    if frame.ndim == 2:
        return frame
    return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)


class VideoSource:
    """
    Sequential frame reader for a single video file.

    Attributes:
        video_path: Path to the video file.

    Example:
        >>> with VideoSource("input/video.mp4") as source:
        ...     print(source.fps)
        ...     for frame in source.frames():
        ...         process(frame)
    """

    def __init__(self, video_path: str):
        """
        Open the video for reading.

        Args:
            video_path: Path to any OpenCV-compatible video file.

        Raises:
            OpenError: If OpenCV cannot open the file.
        """
        self.video_path = video_path
        self._cap: cv2.VideoCapture | None = None
        self._open()

    def _open(self) -> None:
        cap = cv2.VideoCapture(self.video_path)
        if not cap.isOpened():
            cap.release()
            raise OpenError(self.video_path)
        self._cap = cap

    @property
    def fps(self) -> float:
        """Frame rate reported by the container (0.0 if unknown)."""
        if self._cap is None:
            return 0.0
        return float(self._cap.get(cv2.CAP_PROP_FPS))

    @property
    def frame_count(self) -> int:
        """Frame count reported by the container; may be approximate."""
        if self._cap is None:
            return 0
        return int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT))

    def read_frame(self) -> np.ndarray | None:
        """
        Read the next frame in playback order.

        Returns:
            The decoded BGR frame, or None at end of stream.
        """
        if self._cap is None:
            return None
        ret, frame = self._cap.read()
        if not ret:
            return None
        return frame

    def frames(self) -> Iterator[np.ndarray]:
        """Yield the remaining frames until end of stream."""
        while True:
            frame = self.read_frame()
            if frame is None:
                return
            yield frame

    def close(self) -> None:
        """Release the underlying capture. Safe to call more than once."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def __enter__(self) -> VideoSource:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
