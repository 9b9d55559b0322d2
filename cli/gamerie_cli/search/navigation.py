"""Cursor arithmetic for keyboard navigation over a flat index."""

NO_SELECTION = -1


def move_down(cursor: int, size: int) -> int:
    """Advance the cursor, wrapping from the last entry to the first."""
    if size <= 0:
        return cursor
    return (cursor + 1) % size


def move_up(cursor: int, size: int) -> int:
    """Step the cursor back, wrapping from the first entry to the last.

    With nothing selected the cursor lands on the last entry.
    """
    if size <= 0:
        return cursor
    if cursor == NO_SELECTION:
        return size - 1
    return (cursor - 1 + size) % size


def clamp(cursor: int, size: int) -> int:
    """Return ``cursor`` if it addresses an entry, else ``NO_SELECTION``."""
    if 0 <= cursor < size:
        return cursor
    return NO_SELECTION
