"""
Metric registry.

Metrics are evaluated in the order of ``_BUILTIN_MODULES``; each module
exposes a ``METRIC`` MetricSpec.
"""

from importlib import import_module

from oss_trust_score.metrics.base import (
    Collaborators,
    MetricResult,
    MetricSpec,
    Subject,
    compute_metric,
)

_BUILTIN_MODULES = [
    "oss_trust_score.metrics.bus_factor",
    "oss_trust_score.metrics.responsiveness",
    "oss_trust_score.metrics.license",
    "oss_trust_score.metrics.ramp_up",
    "oss_trust_score.metrics.correctness",
]

__all__ = [
    "Collaborators",
    "MetricResult",
    "MetricSpec",
    "Subject",
    "compute_metric",
    "load_metric_specs",
]


def _load_builtin_metric_specs() -> list[MetricSpec]:
    specs: list[MetricSpec] = []
    for module_path in _BUILTIN_MODULES:
        module = import_module(module_path)
        spec = getattr(module, "METRIC", None)
        if isinstance(spec, MetricSpec):
            specs.append(spec)
    return specs


def load_metric_specs() -> list[MetricSpec]:
    """Return the built-in metric specs in evaluation order."""
    return _load_builtin_metric_specs()
