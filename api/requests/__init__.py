from __future__ import annotations

import math
import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from engine.enums import CriticalValueMethod


def parse_targets(raw: Any) -> List[float]:
    """Accept a list or a comma separated string; drop non-numeric and non-finite entries."""
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    targets: List[float] = []
    for item in items:
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        try:
            value = float(item)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value):
            targets.append(value)
    return targets


class ObservationRecord(BaseModel):
    date: dt.date
    value: float = Field(allow_inf_nan=False)
    label: str = ""


class RegressionRequest(BaseModel):
    records: List[ObservationRecord] = Field(default_factory=list)
    targets: Optional[List[float]] = None
    today: Optional[dt.date] = None
    critical_value_method: Optional[CriticalValueMethod] = None

    @field_validator("targets", mode="before")
    @classmethod
    def _clean_targets(cls, value: Any) -> Any:
        if value is None:
            return None
        return parse_targets(value)
