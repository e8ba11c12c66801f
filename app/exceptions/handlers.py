import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import LocationServiceError, RateLimitError

logger = logging.getLogger(__name__)


async def location_service_error_handler(
    _request: Request, exc: LocationServiceError
) -> JSONResponse:
    logger.error("AWS Location Service error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"AWS Location Service error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
