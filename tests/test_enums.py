from config import settings
from engine.enums import CriticalValueMethod, TargetStatus


def test_critical_value_method_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_critical_value_method", "exact")
    assert CriticalValueMethod.from_settings() is CriticalValueMethod.exact
    monkeypatch.setattr(settings, "forecast_critical_value_method", "nonsense")
    assert CriticalValueMethod.from_settings() is CriticalValueMethod.table


def test_target_status_values():
    assert {s.value for s in TargetStatus} == {"unreachable", "achieved", "projected", "beyond_horizon"}
