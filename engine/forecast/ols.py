"""
Ordinary least squares fit of a straight line through elapsed-day observations, with goodness-of-fit statistics (R², standard error of the estimate) and the spread terms needed later for prediction bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Observation:
    x: float
    y: float
    label: str = ""


@dataclass(frozen=True)
class RegressionModel:
    slope: float
    intercept: float
    r_squared: float
    standard_error: float
    n: int
    mean_x: float
    ss_x: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def _arrays(observations: Sequence[Observation]) -> tuple[np.ndarray, np.ndarray]:
    x = np.array([o.x for o in observations], dtype=float)
    y = np.array([o.y for o in observations], dtype=float)
    return x, y


def fit(observations: Sequence[Observation]) -> RegressionModel:
    n = len(observations)
    if n == 0:
        return RegressionModel(
            slope=0.0, intercept=0.0, r_squared=0.0, standard_error=0.0,
            n=0, mean_x=0.0, ss_x=0.0,
        )

    x, y = _arrays(observations)
    if n < 2:
        return RegressionModel(
            slope=0.0,
            intercept=float(y[0]),
            r_squared=0.0,
            standard_error=0.0,
            n=n,
            mean_x=float(x[0]),
            ss_x=0.0,
        )

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))
    mean_x = sum_x / n

    denom = n * sum_x2 - sum_x * sum_x
    if denom == 0 or bool(np.all(x == x[0])):
        # every observation on the same day; no horizontal spread to fit
        return RegressionModel(
            slope=0.0,
            intercept=sum_y / n,
            r_squared=0.0,
            standard_error=0.0,
            n=n,
            mean_x=mean_x,
            ss_x=0.0,
        )

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    mean_y = sum_y / n
    ss_tot = float(np.sum((y - mean_y) ** 2))
    ss_res = float(np.sum((y - (slope * x + intercept)) ** 2))

    # not clamped: a negative value flags a pathological fit
    r_squared = 0.0 if ss_tot == 0 else 1.0 - ss_res / ss_tot
    standard_error = math.sqrt(ss_res / (n - 2)) if n > 2 else 0.0

    return RegressionModel(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        standard_error=standard_error,
        n=n,
        mean_x=mean_x,
        ss_x=sum_x2 - (sum_x * sum_x) / n,
    )
