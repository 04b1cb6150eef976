"""Metrics hooks for annotation checks and dissection runs.

The library never talks to a metrics backend directly; callers pass a
MetricsHook and the metric names below.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
