"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import datetime as dt
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from engine.enums import TargetStatus


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class DataPoint(NpModel):

    x: float
    y: float
    label: str
    date: Optional[dt.date] = None


class TrendLinePoint(NpModel):

    time_offset: float
    date: Optional[dt.date] = None
    predicted: float
    lower: float
    upper: float


class TargetPrediction(NpModel):

    target_value: float
    reachable: bool
    status: TargetStatus
    estimated_time_offset: Optional[float] = None
    estimated_date: Optional[dt.date] = None
    days_from_now: Optional[int] = None
    confidence_percent: int = Field(ge=0, le=100)
    lower_time_offset: Optional[float] = None
    lower_date: Optional[dt.date] = None
    upper_time_offset: Optional[float] = None
    upper_date: Optional[dt.date] = None


class RegressionResponse(NpModel):

    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0
    standard_error: float = 0.0
    n: int = 0
    data_points: List[DataPoint] = Field(default_factory=list)
    trend_line: List[TrendLinePoint] = Field(default_factory=list)
    predictions: List[TargetPrediction] = Field(default_factory=list)
    weekly_growth: float = 0.0
    daily_growth: float = 0.0
    current_estimate: float = 0.0
