"""
Default detection parameters and command-line value parsing.

The defaults live here so the detector and reporter can take them as
explicit constructor arguments instead of reading process-wide state.
"""

import re

# Minimum mean pixel difference (and minimum jump in it) that marks a cut
DEFAULT_THRESHOLD = 50

# Segments shorter than this many frames are not reported
DEFAULT_MIN_DURATION = 1000

# With --verbose=1 only every Nth frame's score is logged
VERBOSE_PROGRESS_INTERVAL = 1000

DEFAULT_IMAGE_DIR = "."

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_option(text, default):
    """
    Parse a numeric command-line value, falling back to a default.

    Parsing is lenient: only a leading integer is read ("25fps" gives 25),
    and anything without one counts as 0. A result of 0 means "use the
    default", so a literal zero threshold cannot be requested.

    Args:
        text (str | None): Raw option value.
        default (int): Value used when the option parses to 0.

    Returns:
        int: The parsed value, or ``default``.

    Example:
        >>> parse_int_option("30", 50)
        30
        >>> parse_int_option("abc", 50)
        50
        >>> parse_int_option("0", 1000)
        1000
    """
    if text is None:
        return default
    match = _LEADING_INT.match(str(text))
    value = int(match.group(1)) if match else 0
    return value if value != 0 else default


def progress_interval_for(verbose):
    """Map a --verbose level to how often per-frame scores are logged (0 = never)."""
    if verbose <= 0:
        return 0
    if verbose == 1:
        return VERBOSE_PROGRESS_INTERVAL
    return 1
