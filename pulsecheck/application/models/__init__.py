from .health_policy import HealthCheckPolicy

__all__ = ["HealthCheckPolicy"]
