import logging

from fastapi import APIRouter

from app.dependencies import HealthCheckDep, LookupDep
from app.schemas.address import AddressResult
from app.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/test/lookup/{zip_code}", response_model=AddressResult)
async def lookup_zip_code(zip_code: str, service: LookupDep) -> AddressResult:
    logger.info("Test endpoint called for ZIP code: %s", zip_code)
    return await service.lookup(zip_code)


@router.get("/health", response_model=HealthResponse)
async def health(check: HealthCheckDep) -> HealthResponse:
    results = await check.probe()
    return HealthResponse(
        status="ok",
        place_index=check.index_name,
        region=check.region,
        results=results,
    )
