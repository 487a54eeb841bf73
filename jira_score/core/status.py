"""Fixed-status classification.

A ticket counts as fixed when its status name matches one of the configured
``FIXED_STATUSES`` exactly, ignoring case. Substrings do not match: "Done"
is fixed, "Not Done" is not.
"""

from __future__ import annotations

from .config import FIXED_STATUSES

# Public constant for membership checks and DataFrame ``.isin()`` filters
FIXED_STATUSES_LOWER: frozenset[str] = frozenset(s.lower() for s in FIXED_STATUSES)


def is_fixed(status: str | None) -> bool:
    """Return True if ``status`` is in the fixed allow-list.

    Examples
    --------
    >>> is_fixed("ready to test")
    True
    >>> is_fixed("In Progress")
    False
    """
    if not status:
        return False
    return status.lower() in FIXED_STATUSES_LOWER
