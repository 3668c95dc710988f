"""
Tests for metric registry helpers.
"""

from types import SimpleNamespace

from oss_trust_score import metrics
from oss_trust_score.metrics.base import MetricSpec


def _spec(name: str) -> MetricSpec:
    return MetricSpec(name=name, checker=lambda _subject, _collaborators: 0.0)


def test_load_metric_specs_order():
    """Builtin metrics load in evaluation order."""
    names = [spec.name for spec in metrics.load_metric_specs()]
    assert names == [
        "BusFactor",
        "ResponsiveMaintainer",
        "License",
        "RampUp",
        "Correctness",
    ]


def test_self_healing_policy():
    """License, Correctness and Responsiveness recover; the others propagate."""
    policies = {
        spec.name: spec.on_error is not None for spec in metrics.load_metric_specs()
    }
    assert policies == {
        "BusFactor": False,
        "ResponsiveMaintainer": True,
        "License": True,
        "RampUp": False,
        "Correctness": True,
    }


def test_load_builtin_metric_specs_filters_missing_metric(monkeypatch):
    """Test builtin metric loading skips modules without METRIC."""
    spec = _spec("Builtin Metric")
    modules = {
        "mod.with.metric": SimpleNamespace(METRIC=spec),
        "mod.without.metric": SimpleNamespace(),
        "mod.with.other": SimpleNamespace(METRIC="not a spec"),
    }

    def fake_import_module(module_path: str):
        return modules[module_path]

    monkeypatch.setattr(metrics, "_BUILTIN_MODULES", list(modules.keys()))
    monkeypatch.setattr(metrics, "import_module", fake_import_module)

    assert metrics._load_builtin_metric_specs() == [spec]
