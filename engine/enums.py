"""
Enumerations for critical value methods and prediction outcomes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import CRITICAL_VALUE_METHOD_EXACT, CRITICAL_VALUE_METHOD_TABLE


class CriticalValueMethod(str, Enum):
    table = CRITICAL_VALUE_METHOD_TABLE
    exact = CRITICAL_VALUE_METHOD_EXACT

    @classmethod
    def from_settings(cls) -> CriticalValueMethod:
        # unknown values in the environment fall back to the table
        from config import settings

        try:
            return cls(settings.forecast_critical_value_method.lower())
        except ValueError:
            return cls.table


class TargetStatus(str, Enum):
    unreachable = "unreachable"
    achieved = "achieved"
    projected = "projected"
    beyond_horizon = "beyond_horizon"
