"""
Main ShotSegmenter class that ties detection and reporting together.

This module provides the high-level interface: open a video, find its shot
boundaries in one pass, and print the resulting segments.
"""

import logging
from functools import partial
from pathlib import Path

from .config import (
    DEFAULT_IMAGE_DIR,
    DEFAULT_MIN_DURATION,
    DEFAULT_THRESHOLD,
    progress_interval_for,
)
from .detector import BoundaryDetector
from .errors import FrameRateError
from .report import report_segments
from .utils import save_boundary_image
from .video_processor import VideoSource

logger = logging.getLogger(__name__)


class ShotSegmenter:
    """
    Detect shot boundaries in a video and report the segments between them.

    Attributes:
        video_path (str): Path to the input video file.
        threshold (int): Cut threshold on the 0-255 score scale.
        min_duration (int): Minimum reported segment length in frames.
        save_images (bool): Export the first and last frame of every segment.
        image_dir (str): Directory for exported images.
        ffmpeg (bool): Report ffmpeg extraction commands instead of ranges.
        verbose (int): 0 = quiet, 1 = every 1000th frame score, 2+ = every frame.
        markers (list): Boundary markers from the last detection run.
        fps (float): Frame rate of the video from the last detection run.

    Example:
        >>> segmenter = ShotSegmenter("input/video.mp4", min_duration=250, ffmpeg=True)
        >>> segmenter.run()
        ffmpeg -ss 00:00:00 -i "input/video.mp4" -ss 00:00:00 -t 00:00:11 -c copy -y input/video-1.mp4
    """

    def __init__(
        self,
        video_path,
        threshold=DEFAULT_THRESHOLD,
        min_duration=DEFAULT_MIN_DURATION,
        save_images=False,
        image_dir=DEFAULT_IMAGE_DIR,
        ffmpeg=False,
        verbose=0,
    ):
        self.video_path = video_path
        self.threshold = threshold
        self.min_duration = min_duration
        self.save_images = save_images
        self.image_dir = image_dir
        self.ffmpeg = ffmpeg
        self.verbose = verbose
        self.markers = []
        self.fps = 0.0

    def _build_detector(self):
        frame_writer = None
        if self.save_images:
            Path(self.image_dir).mkdir(parents=True, exist_ok=True)
            frame_writer = partial(save_boundary_image, output_dir=self.image_dir)
        return BoundaryDetector(
            threshold=self.threshold,
            frame_writer=frame_writer,
            progress_interval=progress_interval_for(self.verbose),
        )

    def detect_shots(self):
        """
        Scan the whole video and find its shot boundaries.

        Returns:
            list: Boundary markers, starting at 0 and ending at the last
                frame index.

        Raises:
            OpenError: If the video cannot be opened.
            StreamTooShortError: If the video has fewer than two frames.
            FrameRateError: If ffmpeg output is requested and the video
                reports no frame rate.
        """
        detector = self._build_detector()
        with VideoSource(self.video_path) as source:
            self.fps = source.fps
            if self.verbose:
                logger.info("FPS=%s", self.fps)
                logger.info("Frames=%d (reported by container)", source.frame_count)
            self._check_frame_rate()
            self.markers = detector.detect(source.frames())

        logger.debug("Markers: %s", self.markers)
        return self.markers

    def report(self):
        """
        Render the detected segments as output lines.

        Raises:
            RuntimeError: If detect_shots() has not been run.
            FrameRateError: If ffmpeg output is requested without a frame rate.
        """
        if not self.markers:
            raise RuntimeError("detect_shots() must be called before report()")
        self._check_frame_rate()
        return report_segments(
            self.markers,
            self.fps,
            self.video_path,
            min_duration=self.min_duration,
            ffmpeg=self.ffmpeg,
        )

    def _check_frame_rate(self):
        if self.ffmpeg and self.fps <= 0:
            raise FrameRateError(self.fps)

    def run(self):
        """Detect shots and print one line per reported segment to stdout."""
        self.detect_shots()
        lines = self.report()
        for line in lines:
            print(line)
        return lines
