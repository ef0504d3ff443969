"""Tests for the goal metric registry."""

import pytest

from conftest import make_variables
from runrate.metrics import get_all_goal_metrics, get_goal_metric
from runrate.models.enums import GoalType


def test_every_goal_type_registered():
    assert set(get_all_goal_metrics()) == set(GoalType)


def test_registry_copy_is_detached():
    metrics = get_all_goal_metrics()
    metrics.clear()
    assert get_goal_metric(GoalType.TIME_SAVED) is not None


@pytest.mark.parametrize(
    "goal_type, expected",
    [
        (GoalType.TIME_SAVED, 100),
        (GoalType.COST_SAVED, 2500),
        (GoalType.FTE_IMPACT, 100 / 2080),
        (GoalType.STUDY_COUNT, 0),
    ],
)
def test_contribution_formulas(goal_type, expected):
    definition = get_goal_metric(goal_type)
    value = definition.contribution_fn(100, make_variables(), 2080)
    assert value == pytest.approx(expected)


def test_fte_with_no_work_year():
    definition = get_goal_metric(GoalType.FTE_IMPACT)
    assert definition.contribution_fn(100, make_variables(), 0) == 0
