"""
Frame scoring and the cut decision rule.

This module contains the pure functions used to compare two consecutive
grayscale frames and to decide whether the comparison marks a shot boundary.
"""

import cv2
import numpy as np


def compute_frame_score(current, previous):
    """
    Compute the mean absolute pixel difference between two grayscale frames.

    The absolute difference of every pixel pair is summed and divided by the
    pixel count, truncating to an integer. The score is a coarse global
    change signal: a hard cut, a lighting change and fast camera motion all
    raise it, and nothing here tells those apart.

    Args:
        current (numpy.ndarray): Current grayscale frame.
            Shape: (height, width), dtype uint8
        previous (numpy.ndarray): Preceding grayscale frame with the same shape.

    Returns:
        int: Difference score on the 0-255 intensity scale.
            - 0: Frames are identical
            - 255: Every pixel flipped between black and white

    Raises:
        ValueError: If the frames do not have the same shape.
    """
    if current.shape != previous.shape:
        raise ValueError(
            f"Frame shape mismatch: {current.shape} vs {previous.shape}"
        )

    diff = cv2.absdiff(current, previous)
    total = int(np.sum(diff, dtype=np.int64))
    return total // diff.size


def is_shot_boundary(score, delta, threshold):
    """
    Decide whether a frame starts a new shot.

    Both the score and its jump from the previous frame's score must exceed
    the threshold. The delta condition keeps a run of high scores (fast
    motion inside one shot) from producing a cut on every frame.

    Args:
        score (int): Difference score of the frame against its predecessor.
        delta (int): Absolute change from the previous frame's score.
        threshold (int): Strict lower bound for both values.

    Returns:
        bool: True if the frame is a cut.
    """
    return score > threshold and delta > threshold
