FILL_LEVEL_MIN = 0
FILL_LEVEL_MAX = 100
FULL_THRESHOLD = 75
MEDIUM_THRESHOLD = 25

STATUS_EMPTY = "Empty"
STATUS_LOW = "Low"
STATUS_MEDIUM = "Medium"
STATUS_FULL = "Full"


def classify_fill_level(fill_level: int) -> str:
    """Map a fill level percentage to its display status.

    Each band includes its lower bound, so 25 is "Medium" and 75 is "Full".

    Args:
        fill_level: Integer percentage between 0 and 100 inclusive.

    Returns:
        str: One of "Empty", "Low", "Medium" or "Full".

    Raises:
        ValueError: If the fill level is outside 0..100.
    """
    if not FILL_LEVEL_MIN <= fill_level <= FILL_LEVEL_MAX:
        msg = f"Fill level must be between {FILL_LEVEL_MIN} and {FILL_LEVEL_MAX}, got {fill_level}"
        raise ValueError(msg)
    if fill_level == 0:
        return STATUS_EMPTY
    if fill_level < MEDIUM_THRESHOLD:
        return STATUS_LOW
    if fill_level < FULL_THRESHOLD:
        return STATUS_MEDIUM
    return STATUS_FULL
