"""
Segment enumeration and extraction command formatting.

Segments are the frame ranges between adjacent boundary markers. This module
filters them by length, numbers the survivors, and renders each one either
as a plain ``N: start - end`` line or as an ffmpeg stream-copy command.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .config import DEFAULT_MIN_DURATION
from .errors import FrameRateError


@dataclass(frozen=True)
class Segment:
    """A reported segment: frames ``[start, end)`` numbered from 1."""

    number: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def iter_segments(
    markers: Sequence[int], min_duration: int = DEFAULT_MIN_DURATION
) -> Iterator[Segment]:
    """
    Enumerate the segments between adjacent markers.

    Segments shorter than ``min_duration`` frames are skipped and do not use
    up a number, so the numbers of reported segments are always 1, 2, 3, ...

    Example:
        >>> list(iter_segments([0, 5, 9], min_duration=5))
        [Segment(number=1, start=0, end=5)]
    """
    number = 0
    for start, end in zip(markers, markers[1:]):
        if end - start < min_duration:
            continue
        number += 1
        yield Segment(number, start, end)


# =============================================================================
# Timecodes
# =============================================================================


def frame_to_seconds(frame: int, fps: float) -> int:
    """
    Convert a frame index or frame count to whole seconds, truncating.

    Raises:
        FrameRateError: If fps is not positive.
    """
    if fps <= 0:
        raise FrameRateError(fps)
    return int(frame / fps)


def format_timecode(total_seconds: int) -> str:
    """Format whole seconds as zero-padded ``HH:MM:SS``."""
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_timecode(text: str) -> int:
    """
    Parse an ``HH:MM:SS`` timecode back into whole seconds.

    Raises:
        ValueError: If the text is not three colon-separated non-negative
            integers with minutes and seconds below 60.
    """
    parts = text.strip().split(":")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid timecode: {text!r}")
    hours, minutes, seconds = (int(part) for part in parts)
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"Invalid timecode: {text!r}")
    return hours * 3600 + minutes * 60 + seconds


def seek_timecode(start: int, fps: float) -> str:
    """Minute-aligned position for ffmpeg's fast input seek."""
    total_seconds = frame_to_seconds(start, fps)
    return format_timecode(total_seconds - total_seconds % 60)


def offset_timecode(start: int, fps: float) -> str:
    """Remaining seconds within the minute, applied after the fast seek."""
    return format_timecode(frame_to_seconds(start, fps) % 60)


def duration_timecode(length: int, fps: float) -> str:
    """Segment duration, padded by one second so the last partial second is kept."""
    return format_timecode(frame_to_seconds(length, fps) + 1)


# =============================================================================
# Output lines
# =============================================================================


def segment_filename(path: str, number: int) -> str:
    """
    Insert ``-<number>`` before the extension of a file name.

    The directory part is kept. A name without an extension gets the
    suffix appended.

    Example:
        >>> segment_filename("clip.mp4", 3)
        'clip-3.mp4'
        >>> segment_filename("clip", 3)
        'clip-3'
    """
    root, ext = os.path.splitext(path)
    return f"{root}-{number}{ext}"


def format_plain(segment: Segment) -> str:
    return f"{segment.number}: {segment.start} - {segment.end}"


def format_ffmpeg_command(segment: Segment, fps: float, input_path: str) -> str:
    """
    Build an ffmpeg command that copies one segment into its own file.

    Example:
        >>> format_ffmpeg_command(Segment(1, 150, 330), 30.0, "clip.mp4")
        'ffmpeg -ss 00:00:00 -i "clip.mp4" -ss 00:00:05 -t 00:00:07 -c copy -y clip-1.mp4'
    """
    return (
        f"ffmpeg -ss {seek_timecode(segment.start, fps)}"
        f' -i "{input_path}"'
        f" -ss {offset_timecode(segment.start, fps)}"
        f" -t {duration_timecode(segment.length, fps)}"
        f" -c copy -y {segment_filename(input_path, segment.number)}"
    )


def report_segments(
    markers: Sequence[int],
    fps: float,
    input_path: str,
    min_duration: int = DEFAULT_MIN_DURATION,
    ffmpeg: bool = False,
) -> list[str]:
    """
    Render one output line per segment that survives the duration filter.

    Args:
        markers: Boundary markers from the detector.
        fps: Frame rate of the video, used only for ffmpeg commands.
        input_path: Path of the input video.
        min_duration: Minimum segment length in frames.
        ffmpeg: Emit ffmpeg commands instead of plain ranges.

    Returns:
        Output lines without trailing newlines.
    """
    lines = []
    for segment in iter_segments(markers, min_duration):
        if ffmpeg:
            lines.append(format_ffmpeg_command(segment, fps, input_path))
        else:
            lines.append(format_plain(segment))
    return lines
