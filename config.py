"""
Constants and configuration for Trendcast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict


TRENDCAST_HOST = os.getenv("TRENDCAST_HOST", "0.0.0.0")
TRENDCAST_PORT = int(os.getenv("TRENDCAST_PORT", "4323"))
TRENDCAST_LOG_LEVEL = os.getenv("TRENDCAST_LOG_LEVEL", "info").lower()

TRENDCAST_HORIZON_DAYS = float(os.getenv("TRENDCAST_HORIZON_DAYS", "90"))
TRENDCAST_TREND_SAMPLES = int(os.getenv("TRENDCAST_TREND_SAMPLES", "60"))
TRENDCAST_MAX_HORIZON_DAYS = float(os.getenv("TRENDCAST_MAX_HORIZON_DAYS", "3650"))
TRENDCAST_CRITICAL_VALUE_METHOD = os.getenv("TRENDCAST_CRITICAL_VALUE_METHOD", "table").lower()

CRITICAL_VALUE_METHOD_TABLE = "table"
CRITICAL_VALUE_METHOD_EXACT = "exact"

# two-tailed 95% Student's t critical values keyed by degrees of freedom
T_CRITICAL_95: Dict[int, float] = {
    1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571,
    6: 2.447, 7: 2.365, 8: 2.306, 9: 2.262, 10: 2.228,
    15: 2.131, 20: 2.086, 25: 2.060, 30: 2.042, 40: 2.021,
    60: 2.000, 120: 1.980,
}

DEFAULT_TARGETS: List[float] = [70.0, 80.0, 90.0, 100.0]

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRENDCAST_")

    host: str = TRENDCAST_HOST
    port: int = TRENDCAST_PORT
    log_level: str = TRENDCAST_LOG_LEVEL

    # trend projection window
    forecast_horizon_days: float = TRENDCAST_HORIZON_DAYS
    forecast_trend_samples: int = TRENDCAST_TREND_SAMPLES

    # predictions further away than this (either direction) carry no date
    forecast_max_horizon_days: float = TRENDCAST_MAX_HORIZON_DAYS

    # "table" interpolates T_CRITICAL_95, "exact" asks scipy for the quantile
    forecast_critical_value_method: str = TRENDCAST_CRITICAL_VALUE_METHOD
    # returned when there are no degrees of freedom to speak of
    forecast_critical_value_fallback: float = 2.0
    # large-sample normal approximation past the last table breakpoint
    forecast_critical_value_asymptote: float = 1.96
    # used for the band width when n <= 2
    forecast_small_sample_multiplier: float = 2.0

    forecast_default_targets: List[float] = DEFAULT_TARGETS

    # boundary rounding of the assembled report
    forecast_round_daily_growth: int = 4
    forecast_round_weekly_growth: int = 2
    forecast_round_current_estimate: int = 1
    forecast_round_trend: int = 2


settings = Settings()
