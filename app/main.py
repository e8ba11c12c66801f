import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import LocationServiceError, RateLimitError
from app.exceptions.handlers import (
    location_service_error_handler,
    rate_limit_error_handler,
)
from app.routers.lookup import router as lookup_router
from app.routers.ui import router as ui_router
from app.services.health import LocationHealthCheck
from app.services.location import (
    AddressLookupClient,
    PlaceSearchTransport,
    RestPlaceSearchTransport,
    SdkPlaceSearchTransport,
    build_location_client,
    resolve_region,
)
from app.services.lookup import AddressLookupService


def build_transport(settings: Settings, client: httpx.AsyncClient) -> PlaceSearchTransport:
    if settings.location_transport == "sdk":
        return SdkPlaceSearchTransport(
            build_location_client(settings),
            settings.location_place_index_name,
        )
    return RestPlaceSearchTransport(
        client,
        settings.location_api_key,
        settings.location_place_index_name,
        region=settings.location_region,
        endpoint=settings.location_endpoint,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    for noisy in ("httpx", "botocore", "boto3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    settings = settings.model_copy(
        update={"location_region": resolve_region(settings.location_region)}
    )

    timeout = httpx.Timeout(settings.read_timeout, connect=settings.connect_timeout)
    transport = httpx.AsyncHTTPTransport(retries=settings.max_retries)
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        lookup_client = AddressLookupClient(
            build_transport(settings, client),
            max_results=settings.lookup_max_results,
        )
        health_check = LocationHealthCheck(
            lookup_client,
            settings.location_place_index_name,
            settings.location_region,
        )

        app.state.settings = settings
        app.state.lookup_service = AddressLookupService(lookup_client)
        app.state.health_check = health_check

        if settings.startup_check:
            await health_check.run_startup_check()

        yield


app = FastAPI(title="ZIP Code Lookup", lifespan=lifespan)

app.add_exception_handler(LocationServiceError, location_service_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)

app.include_router(lookup_router)
app.include_router(ui_router)
