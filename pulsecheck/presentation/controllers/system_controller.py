"""System endpoint exposing dependency health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from pulsecheck.application.dtos.health_dto import HealthResponseDTO
from pulsecheck.application.use_cases.health_use_cases import GetHealthStatusUseCase
from pulsecheck.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthResponseDTO,
    responses={
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": HealthResponseDTO,
            "description": "At least one dependency is failing or timed out",
        }
    },
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> JSONResponse:
    """Return the health status of the application dependencies."""
    try:
        result = await get_health_status_use_case.execute()
    except Exception as exc:  # pragma: no cover - defensive logging path
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc

    logger.debug(
        "health.check.served",
        status_code=result.status_code,
        status=result.payload["status"],
    )
    return JSONResponse(status_code=result.status_code, content=result.payload)
