"""
Trend forecasting over elapsed-day observations: OLS fit, t critical values, projection with prediction bands, target crossing estimates and report assembly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.ols import Observation, RegressionModel, fit
from engine.forecast.critical import t_critical
from engine.forecast.projection import TrendPoint, TrendProjection, project
from engine.forecast.targets import Prediction, solve
from engine.forecast.report import TrendReport, build_report, empty_report

__all__ = [
    "Observation",
    "RegressionModel",
    "fit",
    "t_critical",
    "TrendPoint",
    "TrendProjection",
    "project",
    "Prediction",
    "solve",
    "TrendReport",
    "build_report",
    "empty_report",
]
