import logging
from typing import Any

from pydantic import ValidationError

from app.schemas.address import AddressResult, LookupStatus, Place
from app.schemas.location import (
    CoordinateStrategy,
    LocationPlace,
    SearchPlaceIndexResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5


def to_place(place: LocationPlace) -> Place:
    return Place(
        address_number=place.AddressNumber or "",
        street=place.Street or "",
        municipality=place.Municipality or "",
        region=place.Region or "",
        sub_region=place.SubRegion or "",
        postal_code=place.PostalCode or "",
        country=place.Country or "",
        label=place.Label or "",
    )


def point_coordinates(place: LocationPlace) -> tuple[float, float]:
    """(latitude, longitude) from a ``[lon, lat]`` point, or the (0, 0) sentinel."""
    if place.Geometry is None or len(place.Geometry.Point) < 2:
        return 0.0, 0.0
    longitude, latitude = place.Geometry.Point[0], place.Geometry.Point[1]
    return latitude, longitude


def bbox_center(bbox: list[float]) -> tuple[float, float]:
    """(latitude, longitude) at the centre of ``[west, south, east, north]``."""
    if len(bbox) < 4:
        return 0.0, 0.0
    west, south, east, north = bbox[:4]
    return (south + north) / 2, (west + east) / 2


def _coordinates(
    response: SearchPlaceIndexResponse, strategy: CoordinateStrategy
) -> tuple[float, float]:
    if strategy is CoordinateStrategy.bbox:
        if response.Summary is None:
            return 0.0, 0.0
        return bbox_center(response.Summary.ResultBBox)
    return point_coordinates(response.Results[0].Place)


def translate_search_response(
    raw: dict[str, Any] | SearchPlaceIndexResponse,
    zip_code: str,
    strategy: CoordinateStrategy = CoordinateStrategy.point,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> AddressResult:
    """Map a provider search response onto an AddressResult. Never raises."""
    try:
        if isinstance(raw, SearchPlaceIndexResponse):
            response = raw
        else:
            response = SearchPlaceIndexResponse.model_validate(raw)

        if not response.Results:
            logger.warning("No results found for ZIP code: %s", zip_code)
            return AddressResult(
                status=LookupStatus.not_found,
                zip_code=zip_code,
                error_message=f"No results found for ZIP code {zip_code}",
            )

        places = tuple(to_place(r.Place) for r in response.Results[:max_results])
        latitude, longitude = _coordinates(response, strategy)

        return AddressResult(
            status=LookupStatus.success,
            zip_code=zip_code,
            formatted_address=places[0].label,
            places=places,
            latitude=latitude,
            longitude=longitude,
        )
    except (ValidationError, TypeError, ValueError, IndexError) as exc:
        logger.error("Error parsing AWS Location Service response: %s", exc)
        return AddressResult.error(f"Error parsing response: {exc}", zip_code=zip_code)
