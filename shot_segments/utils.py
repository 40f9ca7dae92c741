"""
Helpers for exporting boundary frames as images.
"""

import os

import cv2

from .errors import WriteError


def boundary_image_name(frame_index, suffix):
    """
    Build the file name for a boundary image.

    Args:
        frame_index (int): Frame index, zero-padded to 8 digits.
        suffix (str): "in" for the first frame of a segment, "out" for the last.

    Returns:
        str: e.g. ``00000150-in.jpg``
    """
    return f"{frame_index:08d}-{suffix}.jpg"


def save_boundary_image(frame_index, frame, suffix, output_dir="."):
    """
    Save a frame at a segment boundary as a JPEG image.

    Args:
        frame_index (int): Index of the frame in playback order.
        frame (numpy.ndarray): Frame image as decoded.
        suffix (str): "in" or "out".
        output_dir (str, optional): Target directory. Defaults to the
            current directory.

    Returns:
        str: Path of the written image.

    Raises:
        WriteError: If OpenCV fails to encode or write the image.

    Output Files:
        - {frame:08d}-in.jpg: first frame of a segment
        - {frame:08d}-out.jpg: last frame of a segment
    """
    path = os.path.join(output_dir, boundary_image_name(frame_index, suffix))
    try:
        written = cv2.imwrite(path, frame)
    except cv2.error as e:
        raise WriteError(path, str(e)) from e
    if not written:
        raise WriteError(path)
    return path
