from jira_score.analytics.support import count_by_status
from jira_score.core.mappers import map_issue


def test_counts_in_first_seen_order():
    issues = [
        map_issue({"key": "S-1", "fields": {"status": {"name": "Waiting"}}}),
        map_issue({"key": "S-2", "fields": {"status": {"name": "Open"}}}),
        map_issue({"key": "S-3", "fields": {"status": {"name": "Waiting"}}}),
        map_issue({"key": "S-4", "fields": {}}),
    ]
    counts = count_by_status(issues)
    assert list(counts) == ["Waiting", "Open", "Unknown"]
    assert counts["Waiting"] == 2
    assert sum(counts.values()) == len(issues)


def test_empty():
    assert count_by_status([]) == {}
