from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from app.api.v1.dto.responses.health import (
    DetailedHealthResponse,
    LivenessResponse,
    ReadinessResponse,
)
from app.api.v1.limiter import limiter
from app.services.interfaces import IHealthService

router = APIRouter(prefix="", tags=["base"])

# Проверки здоровья не требуют авторизации и не попадают под rate limit
health_router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", include_in_schema=False)
async def redirect_to_docs() -> RedirectResponse:
    """Редирект на документацию"""
    return RedirectResponse(url="/docs")


@health_router.get("", response_model=LivenessResponse)
@limiter.exempt
@inject
async def liveness(
    service: FromDishka[IHealthService] = None,
) -> JSONResponse:
    """Жив ли процесс. Зависимости не проверяются."""
    response, status_code = await service.liveness()
    return JSONResponse(content=jsonable_encoder(response), status_code=status_code)


@health_router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
@limiter.exempt
@inject
async def readiness(
    service: FromDishka[IHealthService] = None,
) -> JSONResponse:
    """Готов ли сервис принимать трафик"""
    response, status_code = await service.readiness()
    return JSONResponse(content=jsonable_encoder(response), status_code=status_code)


@health_router.get(
    "/detailed",
    response_model=DetailedHealthResponse,
    responses={503: {"model": DetailedHealthResponse}},
)
@limiter.exempt
@inject
async def detailed(
    service: FromDishka[IHealthService] = None,
) -> JSONResponse:
    """Детальное состояние всех зависимостей"""
    response, status_code = await service.detailed()
    return JSONResponse(
        content=jsonable_encoder(response, exclude_none=True), status_code=status_code
    )


router.include_router(health_router)
