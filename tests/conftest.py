"""Shared test fixtures for the run-rate test suite."""

from datetime import date, timedelta

import pytest

from runrate.config.settings import Settings
from runrate.models.agent import AgentRecord, AgentVariables
from runrate.models.snapshot import DataPoint, HistoricalSnapshot


def make_agent(agent_id="agent-1", **overrides):
    """Helper to create an AgentRecord with complete projection variables."""
    fields = dict(
        id=agent_id,
        name=f"Agent {agent_id}",
        avg_time_without_agent_minutes=60,
        avg_time_with_agent_minutes=10,
        avg_usage_count=1000,
        default_usage_discount_percent=0,
        avg_hourly_wage=25,
    )
    fields.update(overrides)
    return AgentRecord(**fields)


def make_variables(**overrides):
    fields = dict(
        avg_time_without_agent_minutes=60,
        avg_time_with_agent_minutes=10,
        avg_usage_count=1000,
        usage_discount_percent=0,
        avg_hourly_wage=25,
    )
    fields.update(overrides)
    return AgentVariables(**fields)


def make_series(values, start=date(2026, 1, 1)):
    return [DataPoint(date=start + timedelta(days=i), value=v) for i, v in enumerate(values)]


def make_snapshots(values, start=date(2026, 1, 1), agent_id=None, **extra):
    """One daily snapshot per value; the value fills every metric field."""
    return [
        HistoricalSnapshot(
            agent_id=agent_id,
            snapshot_date=start + timedelta(days=i),
            total_studies=v,
            total_time_saved_hours=v,
            total_cost_savings=v * 50,
            active_agents=1,
            **extra,
        )
        for i, v in enumerate(values)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def agents() -> list[AgentRecord]:
    """Three active agents with different savings profiles.

    a: 50 min saved x 1000 uses = 833.33 h/yr
    b: 20 min saved x 600 uses at 50% discount = 100 h/yr
    c: 30 min saved x 200 uses = 100 h/yr, higher wage
    """
    return [
        make_agent("a"),
        make_agent(
            "b",
            avg_time_without_agent_minutes=30,
            avg_time_with_agent_minutes=10,
            avg_usage_count=600,
            default_usage_discount_percent=50,
        ),
        make_agent(
            "c",
            avg_time_without_agent_minutes=45,
            avg_time_with_agent_minutes=15,
            avg_usage_count=200,
            avg_hourly_wage=80,
        ),
    ]
