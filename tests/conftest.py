"""
Pytest configuration and shared fixtures for Shot Segments tests.

This module provides synthetic frames and frame streams used across
all test modules.
"""

import numpy as np
import pytest


def gray(value, size=10):
    """Create a uniform size x size grayscale frame."""
    return np.full((size, size), value, dtype=np.uint8)


@pytest.fixture
def black_frame():
    """Create a 100x100 black BGR frame (all zeros)."""
    return np.zeros((100, 100, 3), dtype=np.uint8)


@pytest.fixture
def white_frame():
    """Create a 100x100 white BGR frame (all 255s)."""
    return np.full((100, 100, 3), 255, dtype=np.uint8)


@pytest.fixture
def gradient_frame():
    """Create a 100x100 grayscale frame with a horizontal gradient."""
    frame = np.zeros((100, 100), dtype=np.uint8)
    for i in range(100):
        frame[:, i] = int(i * 2.55)  # 0 to 255 gradient
    return frame


@pytest.fixture
def cut_stream():
    """
    Ten grayscale frames with a single cut at frame 5.

    - Frames 0-4: brightness 0, 5, 10, 15, 20 (score 5 each)
    - Frame 5: brightness 100 (score 80, delta 75)
    - Frames 6-9: brightness 100 (score 0)
    """
    return [gray(v) for v in (0, 5, 10, 15, 20, 100, 100, 100, 100, 100)]


@pytest.fixture
def high_motion_stream():
    """
    Frames that keep changing by 60 after an initial jump.

    Score goes 0, 60, 60, 60, ...: only the first jump has a large delta.
    """
    return [gray(v) for v in (0, 0, 60, 120, 180, 240)]


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory for tests."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return str(output_dir)
