from .health_dto import HealthResponseDTO, ResponseMapper, describe_outcome

__all__ = ["HealthResponseDTO", "ResponseMapper", "describe_outcome"]
