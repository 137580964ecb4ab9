"""
Two-tailed 95% Student's t critical values used to size prediction bands, either interpolated from a fixed table or computed exactly from the t distribution.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional, Union

from config import T_CRITICAL_95, settings
from engine.enums import CriticalValueMethod

_UPPER_QUANTILE = 0.975
_BREAKPOINTS = sorted(T_CRITICAL_95)


def _interpolate(df: int) -> float:
    if df in T_CRITICAL_95:
        return T_CRITICAL_95[df]
    for lo, hi in zip(_BREAKPOINTS, _BREAKPOINTS[1:]):
        if lo < df < hi:
            ratio = (df - lo) / (hi - lo)
            return T_CRITICAL_95[lo] + ratio * (T_CRITICAL_95[hi] - T_CRITICAL_95[lo])
    return settings.forecast_critical_value_asymptote


def _exact(df: int) -> float:
    from scipy import stats

    return float(stats.t.ppf(_UPPER_QUANTILE, df))


def t_critical(
    df: int,
    method: Optional[Union[CriticalValueMethod, str]] = None,
) -> float:
    """Critical value for ``df`` degrees of freedom.

    ``df <= 0`` returns the conservative fallback (2.0 by default) whatever
    the method. The table method returns tabulated values exactly on a
    breakpoint, interpolates linearly between breakpoints and returns the
    normal approximation (1.96) past the last one.
    """
    if df <= 0:
        return settings.forecast_critical_value_fallback

    resolved = CriticalValueMethod(method) if method else CriticalValueMethod.from_settings()
    if resolved is CriticalValueMethod.exact:
        return _exact(df)
    return _interpolate(df)
