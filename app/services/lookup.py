import logging

from app.mappers.location_mapper import translate_search_response
from app.schemas.address import AddressResult
from app.schemas.location import TransportError
from app.services.location import AddressLookupClient
from app.zip_code import is_valid_zip_code

logger = logging.getLogger(__name__)

EMPTY_ZIP_MESSAGE = "ZIP code cannot be null or empty"
INVALID_ZIP_MESSAGE = "Invalid ZIP code format"


class AddressLookupService:
    def __init__(self, client: AddressLookupClient):
        self._client = client

    def is_valid_zip_code(self, zip_code: str | None) -> bool:
        return is_valid_zip_code(zip_code)

    async def lookup(self, zip_code: str | None) -> AddressResult:
        """Validate, search and translate. Always returns a result, never raises."""
        logger.info("Looking up address for ZIP code: %s", zip_code)

        if zip_code is None or not zip_code.strip():
            logger.warning("ZIP code is null or empty")
            return AddressResult.error(EMPTY_ZIP_MESSAGE)

        try:
            if not is_valid_zip_code(zip_code):
                logger.warning("Invalid ZIP code format: %s", zip_code)
                return AddressResult.error(INVALID_ZIP_MESSAGE, zip_code=zip_code)

            outcome = await self._client.search(zip_code)
            if isinstance(outcome, TransportError):
                return AddressResult.error(
                    f"Error calling AWS Location Service: {outcome.message}",
                    zip_code=zip_code,
                )

            return translate_search_response(
                outcome,
                zip_code,
                strategy=self._client.coordinate_strategy,
                max_results=self._client.max_results,
            )
        except Exception as exc:
            logger.exception("Unexpected error looking up ZIP code %s", zip_code)
            return AddressResult.error(
                f"Unexpected error during lookup: {exc}", zip_code=zip_code
            )
