from .health_use_cases import GetHealthStatusUseCase, HealthResponse

__all__ = ["GetHealthStatusUseCase", "HealthResponse"]
