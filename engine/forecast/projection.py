"""
Trend projection: samples a fitted line with its 95% prediction band from day zero through a fixed horizon past today.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from config import settings
from engine.enums import CriticalValueMethod
from engine.forecast.critical import t_critical
from engine.forecast.numeric import round_half_up
from engine.forecast.ols import RegressionModel


@dataclass(frozen=True)
class TrendPoint:
    time_offset: float
    predicted: float
    lower: float
    upper: float


def band_critical_value(
    model: RegressionModel,
    method: Optional[Union[CriticalValueMethod, str]] = None,
) -> float:
    return t_critical(max(1, model.n - 2), method)


def prediction_margin(model: RegressionModel, x: float, t_value: float) -> float:
    """Half-width of the prediction interval at ``x``.

    With more than two points this is the usual OLS prediction interval,
    ``t * se * sqrt(1 + 1/n + (x - mean_x)^2 / ss_x)``, where a zero ``ss_x``
    is replaced by 1. Smaller fits fall back to a flat multiple of the
    standard error, which is zero in that regime anyway.
    """
    if model.n > 2:
        # round-off can leave a tiny negative spread; treat it like zero
        ss_x = model.ss_x if model.ss_x > 0 else 1.0
        return t_value * model.standard_error * math.sqrt(
            1.0 + 1.0 / model.n + (x - model.mean_x) * (x - model.mean_x) / ss_x
        )
    return settings.forecast_small_sample_multiplier * model.standard_error


class TrendProjection:
    """Finite, restartable sequence of TrendPoints.

    Nothing is cached; each iteration recomputes the points from the model.
    """

    def __init__(self, model: RegressionModel, end: float, step: int, t_value: float) -> None:
        self.model = model
        self.end = end
        self.step = step
        self.t_value = t_value

    def __len__(self) -> int:
        if self.model.n == 0 or self.end < 0:
            return 0
        return int(math.floor(self.end / self.step)) + 1

    def __iter__(self) -> Iterator[TrendPoint]:
        for i in range(len(self)):
            x = float(i * self.step)
            predicted = self.model.predict(x)
            margin = prediction_margin(self.model, x, self.t_value)
            yield TrendPoint(
                time_offset=x,
                predicted=predicted,
                lower=predicted - margin,
                upper=predicted + margin,
            )


def project(
    model: RegressionModel,
    today_offset: float,
    horizon_days: float | None = None,
    samples: int | None = None,
    method: Optional[Union[CriticalValueMethod, str]] = None,
) -> TrendProjection:
    if horizon_days is None:
        horizon_days = settings.forecast_horizon_days
    if samples is None:
        samples = settings.forecast_trend_samples

    end = today_offset + horizon_days
    step = max(1, round_half_up(end / samples)) if samples > 0 else 1
    return TrendProjection(model, end, step, band_critical_value(model, method))
