"""
Forecast service: normalizes dated records into elapsed-day observations, runs the trend engine and maps the report onto the API response with calendar dates.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from api.requests import ObservationRecord, RegressionRequest
from api.responses import DataPoint, RegressionResponse, TargetPrediction, TrendLinePoint
from config import settings
from engine.forecast import Observation, TrendReport, build_report
from engine.forecast.numeric import round_half_up

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedSeries:
    observations: Tuple[Observation, ...]
    today_offset: float
    day_zero: Optional[dt.date]


def normalize(records: Sequence[ObservationRecord], today: dt.date) -> NormalizedSeries:
    if not records:
        return NormalizedSeries(observations=(), today_offset=0.0, day_zero=None)

    ordered = sorted(records, key=lambda r: r.date)
    day_zero = ordered[0].date
    observations = tuple(
        Observation(x=float((r.date - day_zero).days), y=r.value, label=r.label)
        for r in ordered
    )
    return NormalizedSeries(
        observations=observations,
        today_offset=float((today - day_zero).days),
        day_zero=day_zero,
    )


def date_at(day_zero: Optional[dt.date], offset: Optional[float]) -> Optional[dt.date]:
    if day_zero is None or offset is None:
        return None
    try:
        return day_zero + dt.timedelta(days=round_half_up(offset))
    except OverflowError:
        return None


def to_response(report: TrendReport, day_zero: Optional[dt.date]) -> RegressionResponse:
    return RegressionResponse(
        slope=report.slope,
        intercept=report.intercept,
        r_squared=report.r_squared,
        standard_error=report.standard_error,
        n=report.n,
        data_points=[
            DataPoint(x=o.x, y=o.y, label=o.label, date=date_at(day_zero, o.x))
            for o in report.data_points
        ],
        trend_line=[
            TrendLinePoint(
                time_offset=p.time_offset,
                date=date_at(day_zero, p.time_offset),
                predicted=p.predicted,
                lower=p.lower,
                upper=p.upper,
            )
            for p in report.trend_line
        ],
        predictions=[
            TargetPrediction(
                target_value=p.target_value,
                reachable=p.reachable,
                status=p.status,
                estimated_time_offset=p.estimated_time_offset,
                estimated_date=date_at(day_zero, p.estimated_time_offset),
                days_from_now=p.days_from_now,
                confidence_percent=p.confidence_percent,
                lower_time_offset=p.lower_time_offset,
                lower_date=date_at(day_zero, p.lower_time_offset),
                upper_time_offset=p.upper_time_offset,
                upper_date=date_at(day_zero, p.upper_time_offset),
            )
            for p in report.predictions
        ],
        weekly_growth=report.weekly_growth,
        daily_growth=report.daily_growth,
        current_estimate=report.current_estimate,
    )


def run_forecast(req: RegressionRequest, today: dt.date) -> RegressionResponse:
    targets: List[float] = (
        list(req.targets) if req.targets is not None else list(settings.forecast_default_targets)
    )
    series = normalize(req.records, today)
    if series.day_zero is not None and series.today_offset < 0:
        log.warning("today %s precedes the first record %s", today, series.day_zero)

    report = build_report(
        series.observations,
        series.today_offset,
        targets,
        method=req.critical_value_method,
    )
    log.info(
        "forecast n=%d targets=%d slope=%.4f r2=%.3f",
        report.n, len(targets), report.slope, report.r_squared,
    )
    return to_response(report, series.day_zero)
