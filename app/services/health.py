import logging

from app.exceptions.custom import LocationServiceError, RateLimitError
from app.schemas.location import TransportError
from app.services.location import AddressLookupClient

logger = logging.getLogger(__name__)

PROBE_ZIP_CODE = "90210"


class LocationHealthCheck:
    """Probes the place index once with a well-known ZIP code."""

    def __init__(self, client: AddressLookupClient, index_name: str, region: str):
        self._client = client
        self.index_name = index_name
        self.region = region

    async def probe(self) -> int:
        """Return the number of results, or raise LocationServiceError (RateLimitError on throttling)."""
        outcome = await self._client.search(PROBE_ZIP_CODE, max_results=1)
        if isinstance(outcome, TransportError):
            if outcome.status_code == 429:
                raise RateLimitError("AWS Location Service")
            raise LocationServiceError(outcome.message, status_code=outcome.status_code)
        results = outcome.get("Results")
        return len(results) if isinstance(results, list) else 0

    async def run_startup_check(self) -> bool:
        """Log whether the provider is reachable. Never raises."""
        logger.info("Validating AWS Location Service configuration...")
        logger.info(
            "Testing connection to AWS Location Service with place index: %s",
            self.index_name,
        )
        try:
            count = await self.probe()
        except (LocationServiceError, RateLimitError) as exc:
            logger.error("AWS Location Service credentials validation FAILED")
            logger.error("Failed to connect to AWS Location Service: %s", exc)
            self._log_configuration_hints()
            return False
        except Exception:
            logger.exception("Unexpected error validating AWS Location Service configuration")
            self._log_configuration_hints()
            return False

        logger.info("AWS Location Service credentials validation SUCCESSFUL")
        logger.info("Found %d results in response.", count)
        return True

    def _log_configuration_hints(self) -> None:
        logger.error("=== CONFIGURATION HINTS ===")
        logger.error(
            "1. Check LOCATION_API_KEY (rest) or AWS_ACCESS_KEY_ID/AWS_SECRET_ACCESS_KEY (sdk)"
        )
        logger.error("2. Verify that place index '%s' exists in your AWS account", self.index_name)
        logger.error("3. Ensure the credentials have permission to search the place index")
        logger.error("4. Confirm that region '%s' is correct", self.region)
        logger.error(
            "5. The application keeps running, but address lookups will fail until this is fixed"
        )
