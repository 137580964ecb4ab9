"""
Target solver: inverts a fitted trend to estimate when each requested target value will be crossed, with a confidence-bounded range of day offsets.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from config import settings
from engine.enums import CriticalValueMethod, TargetStatus
from engine.forecast.numeric import round_half_up
from engine.forecast.ols import RegressionModel
from engine.forecast.projection import band_critical_value, prediction_margin


@dataclass(frozen=True)
class Prediction:
    target_value: float
    reachable: bool
    status: TargetStatus
    estimated_time_offset: Optional[float]
    days_from_now: Optional[int]
    confidence_percent: int
    lower_time_offset: Optional[float]
    upper_time_offset: Optional[float]


def _confidence(model: RegressionModel) -> int:
    if not math.isfinite(model.r_squared):
        return 0
    return max(0, round_half_up(min(100.0, model.r_squared * 100.0)))


def _unreachable(target: float) -> Prediction:
    return Prediction(
        target_value=target,
        reachable=False,
        status=TargetStatus.unreachable,
        estimated_time_offset=None,
        days_from_now=None,
        confidence_percent=0,
        lower_time_offset=None,
        upper_time_offset=None,
    )


def _bounds(
    model: RegressionModel, target: float, target_x: float, t_value: float
) -> Tuple[Optional[float], Optional[float]]:
    if model.n <= 2 or model.standard_error <= 0:
        return None, None
    margin = prediction_margin(model, target_x, t_value)
    early = (target - margin - model.intercept) / model.slope
    late = (target + margin - model.intercept) / model.slope
    lower = min(early, late)
    upper = max(early, late)
    # a bound before day zero is unknown rather than clamped
    if not math.isfinite(lower) or lower <= 0:
        lower = None
    if not math.isfinite(upper):
        upper = None
    return lower, upper


def _solve_one(
    model: RegressionModel,
    today_offset: float,
    target: float,
    t_value: float,
    max_horizon_days: float,
) -> Prediction:
    if not (math.isfinite(model.slope) and math.isfinite(model.intercept)) or model.slope <= 0:
        return _unreachable(target)

    confidence = _confidence(model)
    if model.predict(today_offset) >= target:
        return Prediction(
            target_value=target,
            reachable=True,
            status=TargetStatus.achieved,
            estimated_time_offset=today_offset,
            days_from_now=0,
            confidence_percent=confidence,
            lower_time_offset=today_offset,
            upper_time_offset=today_offset,
        )

    target_x = (target - model.intercept) / model.slope
    if not math.isfinite(target_x):
        return Prediction(
            target_value=target,
            reachable=True,
            status=TargetStatus.beyond_horizon,
            estimated_time_offset=None,
            days_from_now=None,
            confidence_percent=confidence,
            lower_time_offset=None,
            upper_time_offset=None,
        )

    days_from_now = round_half_up(target_x) - round_half_up(today_offset)
    lower, upper = _bounds(model, target, target_x, t_value)

    if abs(days_from_now) >= max_horizon_days:
        return Prediction(
            target_value=target,
            reachable=True,
            status=TargetStatus.beyond_horizon,
            estimated_time_offset=None,
            days_from_now=None,
            confidence_percent=confidence,
            lower_time_offset=lower,
            upper_time_offset=upper,
        )

    return Prediction(
        target_value=target,
        reachable=True,
        status=TargetStatus.projected,
        estimated_time_offset=target_x,
        days_from_now=days_from_now,
        confidence_percent=confidence,
        lower_time_offset=lower,
        upper_time_offset=upper,
    )


def solve(
    model: RegressionModel,
    today_offset: float,
    targets: Iterable[float],
    max_horizon_days: float | None = None,
    method: Optional[Union[CriticalValueMethod, str]] = None,
) -> List[Prediction]:
    """One Prediction per target, in input order.

    Targets must already be finite; NaN filtering belongs to the caller.
    """
    if max_horizon_days is None:
        max_horizon_days = settings.forecast_max_horizon_days
    t_value = band_critical_value(model, method)
    return [
        _solve_one(model, today_offset, float(target), t_value, max_horizon_days)
        for target in targets
    ]
