"""Domain services for running and aggregating probes."""

from .health_aggregator import HealthAggregator
from .probe_registry import ProbeRegistry

__all__ = ["HealthAggregator", "ProbeRegistry"]
