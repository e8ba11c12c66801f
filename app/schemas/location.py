from enum import StrEnum

from pydantic import BaseModel


class CoordinateStrategy(StrEnum):
    point = "point"
    bbox = "bbox"


class PlaceGeometry(BaseModel):
    Point: list[float] = []  # [longitude, latitude]


class LocationPlace(BaseModel):
    Label: str | None = None
    AddressNumber: str | None = None
    Street: str | None = None
    Municipality: str | None = None
    Region: str | None = None
    SubRegion: str | None = None
    PostalCode: str | None = None
    Country: str | None = None
    Geometry: PlaceGeometry | None = None


class SearchForTextResult(BaseModel):
    Place: LocationPlace
    Relevance: float | None = None
    PlaceId: str | None = None


class SearchSummary(BaseModel):
    Text: str | None = None
    MaxResults: int | None = None
    ResultBBox: list[float] = []  # [west, south, east, north]
    DataSource: str | None = None


class SearchPlaceIndexResponse(BaseModel):
    Results: list[SearchForTextResult] = []
    Summary: SearchSummary | None = None


class TransportError(BaseModel):
    message: str
    status_code: int | None = None
