from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.health import LocationHealthCheck
from app.services.lookup import AddressLookupService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_lookup_service(request: Request) -> AddressLookupService:
    return request.app.state.lookup_service


def get_health_check(request: Request) -> LocationHealthCheck:
    return request.app.state.health_check


SettingsDep = Annotated[Settings, Depends(get_settings)]
LookupDep = Annotated[AddressLookupService, Depends(get_lookup_service)]
HealthCheckDep = Annotated[LocationHealthCheck, Depends(get_health_check)]
