"""
Shot Segments - Hard cut detection and segment listing for videos.

This package scores consecutive grayscale frames by their mean absolute pixel
difference, marks a cut where both the score and its jump exceed a threshold,
and reports the segments between cuts as frame ranges or as ffmpeg stream-copy
commands.
"""

from .config import DEFAULT_MIN_DURATION, DEFAULT_THRESHOLD, parse_int_option
from .detection import compute_frame_score, is_shot_boundary
from .detector import BoundaryDetector
from .errors import (
    FrameRateError,
    OpenError,
    ShotSegmentsError,
    StreamTooShortError,
    WriteError,
)
from .report import (
    Segment,
    duration_timecode,
    format_ffmpeg_command,
    format_plain,
    format_timecode,
    iter_segments,
    offset_timecode,
    parse_timecode,
    report_segments,
    seek_timecode,
    segment_filename,
)
from .splitter import ShotSegmenter
from .utils import save_boundary_image
from .video_processor import VideoSource, to_gray

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_MIN_DURATION",
    "DEFAULT_THRESHOLD",
    "BoundaryDetector",
    "FrameRateError",
    "OpenError",
    "Segment",
    "ShotSegmenter",
    "ShotSegmentsError",
    "StreamTooShortError",
    "VideoSource",
    "WriteError",
    "compute_frame_score",
    "duration_timecode",
    "format_ffmpeg_command",
    "format_plain",
    "format_timecode",
    "is_shot_boundary",
    "iter_segments",
    "offset_timecode",
    "parse_int_option",
    "parse_timecode",
    "report_segments",
    "save_boundary_image",
    "seek_timecode",
    "segment_filename",
    "to_gray",
]
