"""Generic statistical primitives used by the trend and forecast engines.

Every function is total over its input: empty series and zero denominators
produce ``0`` (or an empty list) rather than raising.
"""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Sequence

from runrate.engine.result import (
    ConfidenceInterval,
    OutlierResult,
    RegressionResult,
    StatisticalSummary,
)
from runrate.models.snapshot import DataPoint

# Fixed z-scores; no t-distribution correction for small samples.
_Z_SCORES = {0.95: 1.96, 0.99: 2.576}
_DEFAULT_Z_SCORE = 1.645


class StatisticsService:
    """Stateless statistics over plain value lists and dated series."""

    def mean(self, values: Sequence[float]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)

    def median(self, values: Sequence[float]) -> float:
        if not values:
            return 0.0
        ordered = sorted(values)
        mid = len(ordered) // 2
        if len(ordered) % 2 == 0:
            return (ordered[mid - 1] + ordered[mid]) / 2
        return ordered[mid]

    def variance(self, values: Sequence[float]) -> float:
        """Population variance (divides by N)."""
        if not values:
            return 0.0
        avg = self.mean(values)
        return self.mean([(v - avg) ** 2 for v in values])

    def standard_deviation(self, values: Sequence[float]) -> float:
        return math.sqrt(self.variance(values))

    def summary(self, values: Sequence[float]) -> StatisticalSummary:
        if not values:
            return StatisticalSummary(
                mean=0.0,
                median=0.0,
                standard_deviation=0.0,
                variance=0.0,
                min=0.0,
                max=0.0,
                count=0,
            )
        return StatisticalSummary(
            mean=self.mean(values),
            median=self.median(values),
            standard_deviation=self.standard_deviation(values),
            variance=self.variance(values),
            min=min(values),
            max=max(values),
            count=len(values),
        )

    def confidence_interval(
        self,
        values: Sequence[float],
        confidence_level: float = 0.95,
    ) -> ConfidenceInterval:
        """Normal-approximation interval around the mean."""
        if not values:
            return ConfidenceInterval(
                lower=0.0, upper=0.0, confidence_level=confidence_level
            )
        avg = self.mean(values)
        std_dev = self.standard_deviation(values)
        z_score = _Z_SCORES.get(confidence_level, _DEFAULT_Z_SCORE)
        margin = z_score * (std_dev / math.sqrt(len(values)))
        return ConfidenceInterval(
            lower=avg - margin,
            upper=avg + margin,
            confidence_level=confidence_level,
        )

    def detect_outliers(
        self,
        values: Sequence[float],
        threshold: float = 3.0,
    ) -> list[OutlierResult]:
        avg = self.mean(values)
        std_dev = self.standard_deviation(values)

        results: list[OutlierResult] = []
        for index, value in enumerate(values):
            z_score = 0.0 if std_dev == 0 else (value - avg) / std_dev
            results.append(
                OutlierResult(
                    value=value,
                    index=index,
                    z_score=z_score,
                    is_outlier=abs(z_score) > threshold,
                )
            )
        return results

    def moving_average(
        self,
        points: Sequence[DataPoint],
        window_size: int,
    ) -> list[DataPoint]:
        """Trailing simple moving average, dated at the end of each window."""
        if window_size <= 0 or len(points) < window_size:
            return []

        averaged: list[DataPoint] = []
        for i in range(window_size - 1, len(points)):
            window = points[i - window_size + 1 : i + 1]
            averaged.append(
                DataPoint(
                    date=points[i].date,
                    value=self.mean([p.value for p in window]),
                )
            )
        return averaged

    def linear_regression(self, points: Sequence[DataPoint]) -> RegressionResult:
        """Ordinary least squares with the point index as x.

        Dates are ignored: points are assumed to be evenly spaced.
        """
        n = len(points)
        if n < 2:
            return RegressionResult(slope=0.0, intercept=0.0, r_squared=0.0)

        y_values = [p.value for p in points]
        sum_x = sum(range(n))
        sum_y = sum(y_values)
        sum_xy = sum(i * y for i, y in enumerate(y_values))
        sum_xx = sum(i * i for i in range(n))

        slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
        intercept = (sum_y - slope * sum_x) / n

        y_mean = sum_y / n
        ss_total = sum((y - y_mean) ** 2 for y in y_values)
        ss_residual = sum(
            (y - (slope * i + intercept)) ** 2 for i, y in enumerate(y_values)
        )
        r_squared = 0.0 if ss_total == 0 else 1 - ss_residual / ss_total

        predictions = [
            DataPoint(date=p.date, value=slope * i + intercept)
            for i, p in enumerate(points)
        ]
        return RegressionResult(
            slope=slope,
            intercept=intercept,
            r_squared=r_squared,
            predictions=predictions,
        )

    def forecast_future(
        self,
        points: Sequence[DataPoint],
        periods_ahead: int,
    ) -> list[DataPoint]:
        """Extend the regression line one day per period, never below zero."""
        if not points:
            return []

        regression = self.linear_regression(points)
        last_index = len(points) - 1
        last_date = points[last_index].date

        forecasts: list[DataPoint] = []
        for i in range(1, periods_ahead + 1):
            predicted = regression.slope * (last_index + i) + regression.intercept
            forecasts.append(
                DataPoint(date=last_date + timedelta(days=i), value=max(0.0, predicted))
            )
        return forecasts

    def growth_rate(self, points: Sequence[DataPoint]) -> float:
        """Percent change from the first point to the last one."""
        if len(points) < 2:
            return 0.0
        first = points[0].value
        last = points[-1].value
        if first == 0:
            return 0.0
        return ((last - first) / first) * 100

    def correlation(
        self,
        values1: Sequence[float],
        values2: Sequence[float],
    ) -> float:
        """Pearson correlation over the overlapping prefix of both lists."""
        n = min(len(values1), len(values2))
        if n < 2:
            return 0.0

        a = list(values1[:n])
        b = list(values2[:n])
        mean_a, mean_b = self.mean(a), self.mean(b)
        std_a, std_b = self.standard_deviation(a), self.standard_deviation(b)
        if std_a == 0 or std_b == 0:
            return 0.0

        total = sum(
            ((x - mean_a) / std_a) * ((y - mean_b) / std_b) for x, y in zip(a, b)
        )
        return total / n

    def coefficient_of_variation(self, values: Sequence[float]) -> float:
        avg = self.mean(values)
        if avg == 0:
            return 0.0
        return (self.standard_deviation(values) / avg) * 100


statistics_service = StatisticsService()
