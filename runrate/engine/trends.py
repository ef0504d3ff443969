"""Trend analysis over the historical snapshot log.

The caller supplies snapshots already filtered by agent or division; this
module turns them into a dated series, fits a trend line, forecasts it and
describes its spread.
"""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Mapping, Optional, Sequence

from runrate.engine.result import (
    AgentPerformance,
    DataSourceInfo,
    TrendData,
    TrendRegression,
    TrendStatistics,
)
from runrate.engine.stats import StatisticsService, statistics_service
from runrate.models.agent import AgentRecord
from runrate.models.enums import SnapshotDataSource, TrendMetric
from runrate.models.snapshot import DataPoint, HistoricalSnapshot

logger = logging.getLogger(__name__)

_METRIC_FIELDS = {
    TrendMetric.TIME_SAVED: "total_time_saved_hours",
    TrendMetric.COST_SAVINGS: "total_cost_savings",
    TrendMetric.STUDY_COUNT: "total_studies",
}

_SHORT_WINDOW = 7
_LONG_WINDOW = 30


def _as_number(value: Optional[float]) -> float:
    """Missing or NaN values count as 0."""
    if value is None or math.isnan(value):
        return 0.0
    return float(value)


def _empty_trend() -> TrendData:
    return TrendData(
        historical=[],
        forecast=[],
        regression=TrendRegression(slope=0.0, intercept=0.0, r_squared=0.0),
        statistics=TrendStatistics(
            mean=0.0,
            standard_deviation=0.0,
            growth_rate=0.0,
            coefficient_of_variation=0.0,
        ),
    )


class TrendAnalyzer:
    """Builds ``TrendData`` for one metric of a snapshot series."""

    def __init__(
        self,
        stats: StatisticsService = statistics_service,
        lookback_days: int = 90,
        default_forecast_days: int = 30,
    ):
        self._stats = stats
        self.lookback_days = lookback_days
        self.default_forecast_days = default_forecast_days

    def to_series(
        self,
        snapshots: Sequence[HistoricalSnapshot],
        metric: TrendMetric | str,
    ) -> list[DataPoint]:
        """Project one snapshot field onto a dated series, in input order."""
        field_name = _METRIC_FIELDS[TrendMetric(metric)]
        return [
            DataPoint(date=s.snapshot_date, value=_as_number(getattr(s, field_name)))
            for s in snapshots
        ]

    def window(
        self,
        snapshots: Sequence[HistoricalSnapshot],
        today: Optional[date] = None,
    ) -> list[HistoricalSnapshot]:
        """Keep snapshots from the trailing lookback window, oldest first."""
        end = today or date.today()
        start = end - timedelta(days=self.lookback_days)
        kept = [s for s in snapshots if start <= s.snapshot_date <= end]
        return sorted(kept, key=lambda s: s.snapshot_date)

    def analyze(
        self,
        snapshots: Sequence[HistoricalSnapshot],
        metric: TrendMetric | str,
        days_ahead: Optional[int] = None,
    ) -> TrendData:
        """Regression, forecast, moving averages and statistics for ``metric``.

        An empty series short-circuits to zeros. Fewer than 7 points still
        forecast; ``TrendData.is_low_confidence`` flags them.
        """
        if days_ahead is None:
            days_ahead = self.default_forecast_days

        historical = self.to_series(snapshots, metric)
        if not historical:
            logger.debug("No history for metric %s; returning empty trend", metric)
            return _empty_trend()

        values = [p.value for p in historical]
        regression = self._stats.linear_regression(historical)
        forecast = self._stats.forecast_future(historical, days_ahead)

        moving_7 = None
        if len(historical) >= _SHORT_WINDOW:
            moving_7 = self._stats.moving_average(historical, _SHORT_WINDOW)
        moving_30 = None
        if len(historical) >= _LONG_WINDOW:
            moving_30 = self._stats.moving_average(historical, _LONG_WINDOW)

        return TrendData(
            historical=historical,
            forecast=forecast,
            regression=TrendRegression(
                slope=regression.slope,
                intercept=regression.intercept,
                r_squared=regression.r_squared,
            ),
            statistics=TrendStatistics(
                mean=self._stats.mean(values),
                standard_deviation=self._stats.standard_deviation(values),
                growth_rate=self._stats.growth_rate(historical),
                coefficient_of_variation=self._stats.coefficient_of_variation(values),
            ),
            moving_average_7_day=moving_7,
            moving_average_30_day=moving_30,
        )

    @staticmethod
    def aggregate_snapshots_by_date(
        snapshots: Sequence[HistoricalSnapshot],
    ) -> list[HistoricalSnapshot]:
        """Roll per-agent snapshots up to one snapshot per date.

        Totals are summed; ``active_agents`` takes the largest value seen.
        """
        by_date: dict[date, HistoricalSnapshot] = {}
        for snapshot in snapshots:
            existing = by_date.get(snapshot.snapshot_date)
            if existing is None:
                by_date[snapshot.snapshot_date] = snapshot
                continue
            by_date[snapshot.snapshot_date] = existing.model_copy(
                update={
                    "total_studies": existing.total_studies + snapshot.total_studies,
                    "total_time_saved_hours": (
                        existing.total_time_saved_hours + snapshot.total_time_saved_hours
                    ),
                    "total_cost_savings": (
                        existing.total_cost_savings + snapshot.total_cost_savings
                    ),
                    "active_agents": max(existing.active_agents, snapshot.active_agents),
                }
            )
        return [by_date[d] for d in sorted(by_date)]

    @staticmethod
    def data_source_info(snapshots: Sequence[HistoricalSnapshot]) -> DataSourceInfo:
        synthetic = sum(
            1 for s in snapshots if s.data_source == SnapshotDataSource.SYNTHETIC
        )
        real = sum(1 for s in snapshots if s.data_source == SnapshotDataSource.REAL)
        return DataSourceInfo(
            has_synthetic=synthetic > 0,
            has_real=real > 0,
            synthetic_count=synthetic,
            real_count=real,
            total_count=len(snapshots),
        )

    def compare_agent_performance(
        self,
        agents: Sequence[AgentRecord],
        snapshots_by_agent: Mapping[str, Sequence[HistoricalSnapshot]],
        metric: TrendMetric | str = TrendMetric.COST_SAVINGS,
        days_ahead: Optional[int] = None,
    ) -> list[AgentPerformance]:
        """Rank active agents by their latest value for ``metric``.

        Consistency is ``100 - min(100, coefficient of variation)``.
        """
        comparisons: list[AgentPerformance] = []
        for agent in agents:
            if not agent.is_active:
                continue
            trend = self.analyze(
                snapshots_by_agent.get(agent.id, []), metric, days_ahead
            )
            comparisons.append(
                AgentPerformance(
                    agent_id=agent.id,
                    agent_name=agent.name,
                    category=agent.category,
                    current_value=trend.current_value,
                    forecasted_value=trend.forecasted_value,
                    growth_rate=trend.statistics.growth_rate,
                    consistency=100 - min(100.0, trend.statistics.coefficient_of_variation),
                )
            )

        return sorted(comparisons, key=lambda c: c.current_value, reverse=True)
