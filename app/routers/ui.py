import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.dependencies import LookupDep, SettingsDep
from app.schemas.address import AddressResult, LookupStatus
from app.zip_code import ZIP_CODE_PATTERN

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")

EMPTY_INPUT_NOTICE = "Please enter a ZIP code"
INVALID_INPUT_NOTICE = (
    "Invalid ZIP code format. Please enter a valid US ZIP code (e.g., 92021 or 92021-1234)"
)


def _detail_rows(result: AddressResult) -> list[tuple[str, str]]:
    place = result.places[0]
    rows = [
        ("Street Number", place.address_number),
        ("Street", place.street),
        ("City", place.municipality),
        ("State", place.region),
        ("Postal Code", place.postal_code),
        ("Country", place.country),
    ]
    return [(label, value) for label, value in rows if value]


@router.get("/", response_class=HTMLResponse)
async def lookup_form(
    request: Request,
    service: LookupDep,
    settings: SettingsDep,
    zip_code: str | None = None,
) -> HTMLResponse:
    context: dict = {
        "zip_pattern": ZIP_CODE_PATTERN,
        "zip_code": zip_code or "",
        "notice": None,
        "result": None,
        "details": [],
        "map": None,
    }

    if zip_code is not None:
        value = zip_code.strip()
        context["zip_code"] = value
        if not value:
            context["notice"] = EMPTY_INPUT_NOTICE
        elif not service.is_valid_zip_code(value):
            context["notice"] = INVALID_INPUT_NOTICE
        else:
            logger.debug("Looking up address for ZIP code: %s", value)
            result = await service.lookup(value)
            context["result"] = result
            if result.status is LookupStatus.success and result.places:
                context["details"] = _detail_rows(result)
                if settings.map_enabled and result.has_coordinates:
                    context["map"] = {
                        "api_key": settings.location_api_key,
                        "region": settings.location_region,
                        "map_name": settings.location_map_name,
                        "latitude": result.latitude,
                        "longitude": result.longitude,
                    }

    return templates.TemplateResponse(request, "index.html", context)
