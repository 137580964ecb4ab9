import pytest

from config import T_CRITICAL_95, settings
from engine.enums import CriticalValueMethod
from engine.forecast import t_critical


@pytest.mark.parametrize("df", [0, -1, -30])
def test_no_degrees_of_freedom_falls_back(df):
    assert t_critical(df) == 2.0
    assert t_critical(df, CriticalValueMethod.exact) == 2.0


def test_table_breakpoints():
    assert t_critical(1) == 12.706
    assert t_critical(2) == 4.303
    assert t_critical(120) == 1.980
    for df, value in T_CRITICAL_95.items():
        assert t_critical(df, "table") == value


def test_table_interpolates_between_breakpoints():
    value = t_critical(12)
    assert T_CRITICAL_95[15] < value < T_CRITICAL_95[10]
    assert value == pytest.approx(2.228 + 0.4 * (2.131 - 2.228))

    value = t_critical(90)
    assert T_CRITICAL_95[120] < value < T_CRITICAL_95[60]


@pytest.mark.parametrize("df", [121, 500, 10_000])
def test_table_beyond_last_breakpoint(df):
    assert t_critical(df) == 1.96


def test_exact_matches_table_breakpoints():
    for df, value in T_CRITICAL_95.items():
        assert t_critical(df, CriticalValueMethod.exact) == pytest.approx(value, abs=1e-3)


def test_method_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_critical_value_method", "exact")
    # 13 is not a breakpoint, so the exact quantile differs from the interpolation
    assert t_critical(13) == pytest.approx(2.1604, abs=1e-4)

    monkeypatch.setattr(settings, "forecast_critical_value_method", "bogus")
    assert t_critical(13) == pytest.approx(2.228 + 0.6 * (2.131 - 2.228))


def test_explicit_method_overrides_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_critical_value_method", "exact")
    assert t_critical(200, "table") == 1.96
