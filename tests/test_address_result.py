"""Tests for the status/field invariants of AddressResult."""

import pytest
from pydantic import ValidationError

from app.schemas.address import AddressResult, LookupStatus, Place


def test_error_requires_message():
    with pytest.raises(ValidationError):
        AddressResult(status=LookupStatus.error)


def test_not_found_requires_message():
    with pytest.raises(ValidationError):
        AddressResult(status=LookupStatus.not_found, error_message="")


def test_error_rejects_places():
    with pytest.raises(ValidationError):
        AddressResult(
            status=LookupStatus.error,
            error_message="boom",
            places=(Place(label="123 Main St"),),
        )


def test_error_rejects_formatted_address():
    with pytest.raises(ValidationError):
        AddressResult(
            status=LookupStatus.not_found,
            error_message="No results",
            formatted_address="123 Main St",
        )


def test_success_rejects_error_message():
    with pytest.raises(ValidationError):
        AddressResult(status=LookupStatus.success, error_message="boom")


def test_error_helper():
    result = AddressResult.error("Invalid ZIP code format", zip_code="abc")

    assert result.status is LookupStatus.error
    assert result.zip_code == "abc"
    assert result.places == ()
    assert result.has_coordinates is False


def test_result_is_frozen():
    result = AddressResult(status=LookupStatus.success, formatted_address="x")

    with pytest.raises(ValidationError):
        result.formatted_address = "y"
