"""Status tally for the supplementary support-ticket query."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from jira_score.core.models import IssueModel


def count_by_status(issues: Iterable[IssueModel]) -> dict[str, int]:
    """Count issues per status name, in order of first appearance.

    Issues without a status are counted under "Unknown".
    """
    counts = Counter(issue.status or "Unknown" for issue in issues)
    return dict(counts)
