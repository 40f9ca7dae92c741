"""
Single-pass shot boundary detection over a stream of frames.

The BoundaryDetector keeps only the previous frame and the previous score,
so it can run over a video of any length in constant memory.
"""

import logging

from .config import DEFAULT_THRESHOLD
from .detection import compute_frame_score, is_shot_boundary
from .errors import StreamTooShortError, WriteError
from .video_processor import to_gray

logger = logging.getLogger(__name__)


class BoundaryDetector:
    """
    Turn a frame stream into a list of segment boundary markers.

    Markers are frame indices. The first marker is always 0 and the last is
    always the index of the final frame; every detected cut in between
    appears once, in playback order.

    Attributes:
        threshold (int): Minimum score and minimum score jump for a cut.
        markers (list): Boundary frame indices found so far.

    Example:
        >>> detector = BoundaryDetector(threshold=50)
        >>> markers = detector.detect(frames)
        >>> print(markers)
        [0, 157, 374, 899]
    """

    def __init__(
        self,
        threshold=DEFAULT_THRESHOLD,
        frame_writer=None,
        to_gray=to_gray,
        progress_interval=0,
    ):
        """
        Args:
            threshold (int, optional): Cut threshold on the 0-255 score scale.
                Defaults to 50.
            frame_writer (callable, optional): Called as
                ``frame_writer(frame_index, frame, suffix)`` with suffix
                "in" or "out" to export boundary frames. May raise
                WriteError; the failure is logged and the scan continues.
            to_gray (callable, optional): Grayscale conversion applied before
                scoring. Defaults to the OpenCV BGR conversion.
            progress_interval (int, optional): Log the score of every Nth
                frame. 0 disables it.
        """
        self.threshold = threshold
        self.frame_writer = frame_writer
        self.to_gray = to_gray
        self.progress_interval = progress_interval
        self._reset()

    def _reset(self):
        self.markers = []
        self.previous_frame = None
        self.previous_image = None
        self.previous_score = 0
        self.frame_index = 0

    @property
    def started(self):
        return self.previous_frame is not None

    def start(self, frame):
        """
        Accept the first frame of the stream (index 0).

        The first frame can never be a cut because it has nothing to be
        compared against; it only opens the first segment. Its head image is
        exported by the first step(), so a one-frame stream writes nothing.
        """
        self._reset()
        self.previous_image = frame
        self.previous_frame = self.to_gray(frame)
        self.markers.append(0)
        self.frame_index = 1

    def step(self, frame):
        """
        Score the next frame and record it if it starts a new shot.

        Args:
            frame (numpy.ndarray): Next decoded frame.

        Returns:
            bool: True if the frame was detected as a cut.

        Raises:
            RuntimeError: If called before start().
        """
        if not self.started:
            raise RuntimeError("start() must be called with the first frame before step()")

        if self.frame_index == 1:
            self._export(0, self.previous_image, "in")

        current = self.to_gray(frame)
        score = compute_frame_score(current, self.previous_frame)
        delta = abs(score - self.previous_score)

        if self.progress_interval and self.frame_index % self.progress_interval == 0:
            logger.info("Frame=%d Score=%d Diff=%d", self.frame_index, score, delta)

        is_cut = is_shot_boundary(score, delta, self.threshold)
        if is_cut:
            self.markers.append(self.frame_index)
            logger.debug(
                "Cut at frame %d (score %d, delta %d)", self.frame_index, score, delta
            )
            self._export(self.frame_index - 1, self.previous_image, "out")
            self._export(self.frame_index, frame, "in")

        self.previous_score = score
        self.previous_frame = current
        self.previous_image = frame
        self.frame_index += 1
        return is_cut

    def finish(self):
        """
        Close the last segment and return the markers.

        Returns:
            list: Strictly increasing boundary frame indices.

        Raises:
            StreamTooShortError: If fewer than two frames were processed.
        """
        if self.frame_index < 2:
            raise StreamTooShortError(self.frame_index)

        last_index = self.frame_index - 1
        if self.markers[-1] != last_index:
            self.markers.append(last_index)
        self._export(last_index, self.previous_image, "out")
        return self.markers

    def detect(self, frames):
        """
        Run the detector over a whole frame stream.

        Args:
            frames (iterable): Decoded frames in playback order.

        Returns:
            list: Boundary markers, see finish().

        Raises:
            StreamTooShortError: If the stream has fewer than two frames.
        """
        iterator = iter(frames)
        first = next(iterator, None)
        if first is None:
            raise StreamTooShortError(0)

        self.start(first)
        for frame in iterator:
            self.step(frame)
        return self.finish()

    def _export(self, frame_index, frame, suffix):
        if self.frame_writer is None:
            return
        try:
            self.frame_writer(frame_index, frame, suffix)
        except WriteError as e:
            logger.warning("%s", e)
