from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.domain.exceptions import HealthAggregationError


async def validation_exception_handler(
    request: Request, exception: RequestValidationError
) -> JSONResponse:
    """Обработчик ошибки валидации"""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": jsonable_encoder(exception.errors()),
        },
    )


async def health_aggregation_exception_handler(
    request: Request, exception: HealthAggregationError
) -> JSONResponse:
    """Обработчик HealthAggregationError: сбой самой проверки, а не зависимости"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exception) or "Health aggregation failed"},
    )


async def any_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    """Обработчик Exception"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


exception_config = {
    RequestValidationError: validation_exception_handler,
    Exception: any_exception_handler,
    HealthAggregationError: health_aggregation_exception_handler,
    RateLimitExceeded: _rate_limit_exceeded_handler,
}
