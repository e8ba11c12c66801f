from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class LookupStatus(StrEnum):
    success = "SUCCESS"
    not_found = "NOT_FOUND"
    error = "ERROR"


class Place(BaseModel):
    """One candidate address. Fields the provider omits are empty strings."""

    model_config = ConfigDict(frozen=True)

    address_number: str = ""
    street: str = ""
    municipality: str = ""
    region: str = ""
    sub_region: str = ""
    postal_code: str = ""
    country: str = ""
    label: str = ""


class AddressResult(BaseModel):
    """Outcome of a single ZIP code lookup.

    ``(0.0, 0.0)`` means "no coordinates", never a real location.
    ``error_message`` is only set when ``status`` is not SUCCESS.
    """

    model_config = ConfigDict(frozen=True)

    status: LookupStatus
    zip_code: str | None = None
    formatted_address: str = ""
    places: tuple[Place, ...] = ()
    latitude: float = 0.0
    longitude: float = 0.0
    error_message: str | None = None

    @model_validator(mode="after")
    def check_status_fields(self) -> AddressResult:
        if self.status is LookupStatus.success:
            if self.error_message is not None:
                raise ValueError("a successful result carries no error_message")
            return self
        if not self.error_message:
            raise ValueError(f"a {self.status} result needs an error_message")
        if self.places or self.formatted_address:
            raise ValueError(f"a {self.status} result carries no places or formatted_address")
        return self

    @classmethod
    def error(cls, message: str, zip_code: str | None = None) -> AddressResult:
        return cls(status=LookupStatus.error, zip_code=zip_code, error_message=message)

    @property
    def has_coordinates(self) -> bool:
        return not (self.latitude == 0.0 and self.longitude == 0.0)
