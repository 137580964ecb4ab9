"""
Test cases for the trend projection: sampling window, band width and restartable iteration.
"""

import math

import pytest

from config import settings
from engine.forecast import Observation, RegressionModel, TrendProjection, fit, project
from engine.forecast.projection import prediction_margin


def test_projection_window_and_step(line_observations):
    model = fit(line_observations)
    proj = project(model, today_offset=20.0)
    assert isinstance(proj, TrendProjection)
    # 110 days / 60 samples rounds to a 2 day step
    assert proj.step == 2
    points = list(proj)
    assert len(points) == len(proj) == 56
    assert points[0].time_offset == 0.0
    assert points[-1].time_offset == 110.0


def test_projection_short_window_uses_unit_step(line_observations):
    model = fit(line_observations)
    proj = project(model, today_offset=0.0, horizon_days=30)
    assert proj.step == 1
    assert [p.time_offset for p in proj] == [float(x) for x in range(31)]


def test_projection_is_monotonic_for_positive_slope(zigzag_observations):
    model = fit(zigzag_observations)
    assert model.slope > 0
    predicted = [p.predicted for p in project(model, today_offset=9.0)]
    assert all(a <= b for a, b in zip(predicted, predicted[1:]))


def test_projection_is_restartable(noisy_observations):
    proj = project(fit(noisy_observations), today_offset=3.0)
    assert list(proj) == list(proj)


def test_projection_of_empty_model():
    proj = project(fit([]), today_offset=0.0)
    assert len(proj) == 0
    assert list(proj) == []


def test_single_point_projection_is_flat():
    proj = project(fit([Observation(x=0.0, y=12.0)]), today_offset=5.0)
    points = list(proj)
    assert points
    for p in points:
        assert p.predicted == 12.0
        assert p.lower == p.upper == 12.0


def test_exact_line_has_no_band(line_observations):
    for p in project(fit(line_observations), today_offset=20.0):
        assert p.lower == pytest.approx(p.predicted, abs=1e-6)
        assert p.upper == pytest.approx(p.predicted, abs=1e-6)


def test_band_is_narrowest_at_mean(noisy_observations):
    model = fit(noisy_observations)
    at_mean = prediction_margin(model, 1.5, 4.303)
    assert at_mean == pytest.approx(4.564020719, rel=1e-6)
    assert prediction_margin(model, 10.0, 4.303) > at_mean
    assert prediction_margin(model, -5.0, 4.303) > at_mean


def test_band_uses_t_for_n_minus_two(noisy_observations):
    model = fit(noisy_observations)
    points = {p.time_offset: p for p in project(model, today_offset=3.0)}
    p = points[2.0]
    expected = prediction_margin(model, 2.0, 4.303)
    assert p.upper - p.predicted == pytest.approx(expected)
    assert p.predicted - p.lower == pytest.approx(expected)


def test_small_sample_band_multiplier(monkeypatch):
    monkeypatch.setattr(settings, "forecast_small_sample_multiplier", 3.0)
    model = fit([Observation(x=0.0, y=1.0), Observation(x=1.0, y=2.0)])
    assert prediction_margin(model, 0.5, 12.706) == 0.0


def test_horizon_from_settings(monkeypatch, line_observations):
    monkeypatch.setattr(settings, "forecast_horizon_days", 10.0)
    proj = project(fit(line_observations), today_offset=20.0)
    assert proj.end == 30.0


def test_margin_far_from_data_does_not_overflow(noisy_observations):
    model = fit(noisy_observations)
    assert prediction_margin(model, 1e200, 4.303) == math.inf


def test_negative_spread_treated_as_zero():
    model = RegressionModel(
        slope=1.0, intercept=0.0, r_squared=0.5, standard_error=1.0,
        n=4, mean_x=1.0, ss_x=-1e-12,
    )
    assert prediction_margin(model, 3.0, 2.0) == pytest.approx(2.0 * math.sqrt(1.0 + 0.25 + 4.0))
