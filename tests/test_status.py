import pytest

from jira_score.core.status import FIXED_STATUSES_LOWER, is_fixed


@pytest.mark.parametrize("status", ["Done", "done", "READY FOR RELEASE", "Ready to Test", "Testing", "Closed"])
def test_fixed_statuses(status):
    assert is_fixed(status)


@pytest.mark.parametrize("status", ["In Progress", "Not Done", "Done ", "", None])
def test_not_fixed(status):
    assert not is_fixed(status)


def test_lowered_set_matches_config():
    assert "ready for release" in FIXED_STATUSES_LOWER
    assert all(s == s.lower() for s in FIXED_STATUSES_LOWER)
