"""Metrics and best-fit unit selection.

Exports:
    Metric: Dimension-scoped, preference-ranked collection of units
    MetricRegistry: Registry of metrics by name
    METRICS: Process-wide metric registry
    resolve_metric: Turn a name or instance into a Metric
    preferred: Most human-scale unit for a value
    localize: Most human-scale unit within a locale's first usable system
    change_system: Counterpart of a unit in another system
"""

from .metric import METRICS, PREFERENCE_OPTIONS, Metric, MetricRegistry, resolve_metric
from .selection import best_fit, change_system, localize, order_of_magnitude, preferred

__all__ = [
    "Metric",
    "MetricRegistry",
    "METRICS",
    "PREFERENCE_OPTIONS",
    "resolve_metric",
    "best_fit",
    "change_system",
    "localize",
    "order_of_magnitude",
    "preferred",
]
