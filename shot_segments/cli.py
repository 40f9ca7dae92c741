"""
Command-line interface for the shot segmenter.

Numeric options are parsed leniently: a malformed or missing value, or 0,
falls back to the default instead of raising an error.
"""

import argparse
import logging
import sys

from .config import (
    DEFAULT_IMAGE_DIR,
    DEFAULT_MIN_DURATION,
    DEFAULT_THRESHOLD,
    parse_int_option,
)
from .errors import FrameRateError, OpenError, StreamTooShortError
from .splitter import ShotSegmenter

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="shotsegments",
        description="Detect shot boundaries in a video and list its segments.",
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-i", "--in", dest="input", nargs="?", const="", metavar="VIDEO", help="Input video file"
    )
    parser.add_argument(
        "-s", "--save-images", action="store_true", help="Save first/last frame of each segment"
    )
    parser.add_argument(
        "-t",
        "--threshold",
        nargs="?",
        const="",
        metavar="T",
        help=f"Cut threshold, 0-255 (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "-m",
        "--min-duration",
        nargs="?",
        const="",
        metavar="D",
        help=f"Minimum segment length in frames (default: {DEFAULT_MIN_DURATION})",
    )
    parser.add_argument(
        "-f", "--ffmpeg", action="store_true", help="Print ffmpeg extraction commands"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        nargs="?",
        const="1",
        default="0",
        metavar="LEVEL",
        help="Log frame scores: 1 = every 1000th frame, 2 = every frame",
    )
    parser.add_argument(
        "--image-dir",
        nargs="?",
        const=DEFAULT_IMAGE_DIR,
        default=DEFAULT_IMAGE_DIR,
        help=f"Directory for saved images (default: {DEFAULT_IMAGE_DIR})",
    )
    return parser


def configure_logging(verbose):
    """Send log output to stderr so stdout only carries the segment report."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    """
    Entry point for the ``shotsegments`` command.

    Returns:
        int: Process exit code. 0 on success, when help is shown or when no
            input is given; 1 if the video cannot be opened, is too short,
            or has no frame rate for --ffmpeg timecodes.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_usage()
        return 0

    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        configure_logging(0)
        logger.warning("%s", e)
        parser.print_usage()
        return 0

    verbose = parse_int_option(args.verbose, 0)
    configure_logging(verbose)

    for arg in unknown:
        logger.warning("Ignoring unrecognized argument: %s", arg)

    if not args.input:
        parser.print_usage()
        return 0

    segmenter = ShotSegmenter(
        video_path=args.input,
        threshold=parse_int_option(args.threshold, DEFAULT_THRESHOLD),
        min_duration=parse_int_option(args.min_duration, DEFAULT_MIN_DURATION),
        save_images=args.save_images,
        image_dir=args.image_dir,
        ffmpeg=args.ffmpeg,
        verbose=verbose,
    )

    try:
        segmenter.run()
    except OpenError:
        logger.error("%s: can't open video", args.input)
        return 1
    except StreamTooShortError:
        logger.error("%s: need some frames", args.input)
        return 1
    except FrameRateError:
        logger.error("%s: unknown frame rate", args.input)
        return 1

    return 0
