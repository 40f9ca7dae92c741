"""
Shot Segments - Main entry point.

Usage:
    python main.py --in input/video.mp4 --min-duration 250 --ffmpeg

Run with --verbose=2 first to see per-frame scores and pick a threshold for
your footage.
"""

import sys

from shot_segments.cli import main

if __name__ == "__main__":
    sys.exit(main())
