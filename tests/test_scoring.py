import math

from jira_score.analytics.scoring import parse_scoring_method, round_half_up, score
from jira_score.core.mappers import map_issue
from jira_score.core.models import IssueModel, ScoringConfig, ScoringMethod


def _issue(**kw):
    base = dict(
        key="PROJ-1",
        summary="s",
        status="To Do",
        priority=None,
        assignee=None,
        story_points=None,
        comment_count=None,
        subtask_count=None,
        fields={},
    )
    base.update(kw)
    return IssueModel(**base)


def test_priority_default_weights():
    cfg = ScoringConfig(method=ScoringMethod.PRIORITY)
    assert score(_issue(priority="High"), cfg) == 4
    assert score(_issue(priority="Lowest"), cfg) == 1
    assert score(_issue(priority="Blocker"), cfg) == 0
    assert score(_issue(priority=None), cfg) == 0


def test_priority_custom_weights_override():
    cfg = ScoringConfig(method=ScoringMethod.PRIORITY, priority_weights={"High": 10})
    assert score(_issue(priority="High"), cfg) == 10
    assert score(_issue(priority="Medium"), cfg) == 0


def test_story_points_missing_is_zero():
    cfg = ScoringConfig(method=ScoringMethod.STORY_POINTS)
    assert score(_issue(story_points=5), cfg) == 5
    assert score(_issue(story_points=None), cfg) == 0


def test_complexity_example():
    # 12 comments (capped at 10), 3 subtasks, Highest priority
    cfg = ScoringConfig(method=ScoringMethod.COMPLEXITY)
    issue = _issue(comment_count=12, subtask_count=3, priority="Highest")
    assert score(issue, cfg) == 16


def test_complexity_caps_comments():
    # 15 comments count as 10 -> 5, 2 subtasks -> 4, Medium -> 3
    cfg = ScoringConfig(method=ScoringMethod.COMPLEXITY)
    issue = _issue(comment_count=15, subtask_count=2, priority="Medium")
    assert score(issue, cfg) == 12


def test_complexity_rounds_half_up():
    cfg = ScoringConfig(method=ScoringMethod.COMPLEXITY)
    # 1 comment -> 0.5, rounds to 1
    assert score(_issue(comment_count=1), cfg) == 1
    # 3 comments + Low -> 1.5 + 2 = 3.5 -> 4
    assert score(_issue(comment_count=3, priority="Low"), cfg) == 4
    assert score(_issue(), cfg) == 0


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_custom_field_lookup():
    cfg = ScoringConfig(method=ScoringMethod.CUSTOM, custom_field_id="customfield_99")
    assert score(_issue(fields={"customfield_99": 7}), cfg) == 7
    assert score(_issue(fields={"customfield_99": "3.5"}), cfg) == 3.5
    assert score(_issue(fields={"customfield_99": "n/a"}), cfg) == 0
    assert score(_issue(fields={"customfield_99": math.inf}), cfg) == 0
    assert score(_issue(fields={}), cfg) == 0


def test_custom_defaults_to_story_points_field():
    cfg = ScoringConfig(method=ScoringMethod.CUSTOM)
    raw = {"key": "PROJ-2", "fields": {"customfield_10016": 8}}
    assert score(map_issue(raw), cfg) == 8


def test_unknown_or_missing_method_scores_zero():
    issue = _issue(priority="Highest", story_points=13)
    assert score(issue, ScoringConfig(method="bogus")) == 0
    assert score(issue, ScoringConfig(method=None)) == 0


def test_parse_scoring_method():
    assert parse_scoring_method("storyPoints") is ScoringMethod.STORY_POINTS
    assert parse_scoring_method(ScoringMethod.CUSTOM) is ScoringMethod.CUSTOM
    assert parse_scoring_method("") is None
    assert parse_scoring_method("points") is None


def test_score_is_deterministic():
    cfg = ScoringConfig(method=ScoringMethod.COMPLEXITY)
    issue = _issue(comment_count=4, subtask_count=1, priority="Medium")
    assert score(issue, cfg) == score(issue, cfg) == 7


def test_empty_priority_weights_score_zero():
    cfg = ScoringConfig(method=ScoringMethod.PRIORITY, priority_weights={})
    assert score(_issue(priority="High"), cfg) == 0
    assert score(_issue(priority="Highest"), ScoringConfig(method=ScoringMethod.PRIORITY, priority_weights=None)) == 5
