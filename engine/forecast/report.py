"""
Assembles a full trend report: fits the observations, samples the projection, solves the targets and applies boundary rounding to the published figures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

from config import settings
from engine.enums import CriticalValueMethod
from engine.forecast.ols import Observation, RegressionModel, fit
from engine.forecast.projection import TrendPoint, TrendProjection, project
from engine.forecast.targets import Prediction, solve

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendReport:
    slope: float
    intercept: float
    r_squared: float
    standard_error: float
    n: int
    data_points: Tuple[Observation, ...]
    trend_line: Tuple[TrendPoint, ...]
    predictions: Tuple[Prediction, ...]
    weekly_growth: float
    daily_growth: float
    current_estimate: float


def empty_report() -> TrendReport:
    return TrendReport(
        slope=0.0,
        intercept=0.0,
        r_squared=0.0,
        standard_error=0.0,
        n=0,
        data_points=(),
        trend_line=(),
        predictions=(),
        weekly_growth=0.0,
        daily_growth=0.0,
        current_estimate=0.0,
    )


def _rounded_trend(projection: TrendProjection) -> Tuple[TrendPoint, ...]:
    digits = settings.forecast_round_trend
    return tuple(
        TrendPoint(
            time_offset=p.time_offset,
            predicted=round(p.predicted, digits),
            lower=round(p.lower, digits),
            upper=round(p.upper, digits),
        )
        for p in projection
    )


def assemble(
    model: RegressionModel,
    observations: Sequence[Observation],
    projection: TrendProjection,
    predictions: Sequence[Prediction],
    today_offset: float,
) -> TrendReport:
    return TrendReport(
        slope=model.slope,
        intercept=model.intercept,
        r_squared=model.r_squared,
        standard_error=model.standard_error,
        n=model.n,
        data_points=tuple(observations),
        trend_line=_rounded_trend(projection),
        predictions=tuple(predictions),
        weekly_growth=round(model.slope * 7, settings.forecast_round_weekly_growth),
        daily_growth=round(model.slope, settings.forecast_round_daily_growth),
        current_estimate=round(model.predict(today_offset), settings.forecast_round_current_estimate),
    )


def build_report(
    observations: Sequence[Observation],
    today_offset: float,
    targets: Iterable[float],
    method: Optional[Union[CriticalValueMethod, str]] = None,
    horizon_days: float | None = None,
) -> TrendReport:
    """Run the whole pipeline for one series.

    ``today_offset`` is elapsed days from the same zero as the observations;
    the wall clock is never consulted here.
    """
    model = fit(observations)
    if model.n == 0:
        return empty_report()

    log.debug(
        "trend fit n=%d slope=%.6f intercept=%.4f r2=%.4f se=%.4f",
        model.n, model.slope, model.intercept, model.r_squared, model.standard_error,
    )
    projection = project(model, today_offset, horizon_days=horizon_days, method=method)
    predictions = solve(model, today_offset, targets, method=method)
    return assemble(model, observations, projection, predictions, today_offset)
