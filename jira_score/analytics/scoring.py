"""Ticket scoring policy.

Each ``ScoringMethod`` has one handler. ``score`` is pure and total: missing
fields score 0 and an unknown or absent method scores 0 for every issue.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from jira_score.core.config import (
    COMPLEXITY_COMMENT_CAP,
    COMPLEXITY_COMMENT_WEIGHT,
    COMPLEXITY_PRIORITY_WEIGHTS,
    COMPLEXITY_SUBTASK_WEIGHT,
    DEFAULT_PRIORITY_WEIGHTS,
    FIELD_IDS,
)
from jira_score.core.models import IssueModel, ScoringConfig, ScoringMethod

Scorer = Callable[[IssueModel, ScoringConfig], float]


def parse_scoring_method(value: str | ScoringMethod | None) -> ScoringMethod | None:
    """Map a method tag such as ``"storyPoints"`` to the enum, else None."""
    if isinstance(value, ScoringMethod):
        return value
    if not value:
        return None
    try:
        return ScoringMethod(str(value).strip())
    except ValueError:
        return None


def _numeric(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return 0
        return parsed if math.isfinite(parsed) else 0
    return 0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _story_points(issue: IssueModel, config: ScoringConfig) -> float:
    return issue.story_points or 0


def _priority(issue: IssueModel, config: ScoringConfig) -> float:
    weights: Mapping[str, int] = (
        config.priority_weights if config.priority_weights is not None else DEFAULT_PRIORITY_WEIGHTS
    )
    if not issue.priority:
        return 0
    return _numeric(weights.get(issue.priority))


def _custom(issue: IssueModel, config: ScoringConfig) -> float:
    field_id = config.custom_field_id or FIELD_IDS["story_points"]
    return _numeric(issue.fields.get(field_id))


def _complexity(issue: IssueModel, config: ScoringConfig) -> float:
    # Comments count at most COMPLEXITY_COMMENT_CAP; weights are not configurable.
    comments = min(issue.comment_count or 0, COMPLEXITY_COMMENT_CAP)
    total = comments * COMPLEXITY_COMMENT_WEIGHT
    total += (issue.subtask_count or 0) * COMPLEXITY_SUBTASK_WEIGHT
    total += COMPLEXITY_PRIORITY_WEIGHTS.get(issue.priority or "", 0)
    return round_half_up(total)


def _zero(issue: IssueModel, config: ScoringConfig) -> float:
    return 0


SCORERS: dict[ScoringMethod, Scorer] = {
    ScoringMethod.STORY_POINTS: _story_points,
    ScoringMethod.PRIORITY: _priority,
    ScoringMethod.CUSTOM: _custom,
    ScoringMethod.COMPLEXITY: _complexity,
}


def score(issue: IssueModel, config: ScoringConfig) -> float:
    method = parse_scoring_method(config.method)
    if method is None:
        return 0
    return SCORERS.get(method, _zero)(issue, config)
