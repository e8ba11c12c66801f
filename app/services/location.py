import asyncio
import logging
from typing import Any, Protocol

import boto3
import httpx
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import Settings
from app.exceptions.custom import LocationServiceError, RateLimitError
from app.schemas.location import CoordinateStrategy, TransportError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-west-2"
SERVICE_NAME = "AWS Location Service"

ENDPOINT_TEMPLATE = "https://places.geo.{region}.amazonaws.com"
SEARCH_PATH = "/places/v0/indexes/{index_name}/search/text"


def resolve_region(region: str | None) -> str:
    """Return a usable region name, falling back to us-west-2."""
    if not region or not region.strip():
        logger.warning("Region is empty, using default region %s", DEFAULT_REGION)
        return DEFAULT_REGION
    region = region.strip()
    session = boto3.session.Session()
    known = {
        name
        for partition in session.get_available_partitions()
        for name in session.get_available_regions("location", partition_name=partition)
    }
    if known and region not in known:
        logger.warning("Invalid region name: %s, falling back to %s", region, DEFAULT_REGION)
        return DEFAULT_REGION
    return region


def mask_key(key: str) -> str:
    return key[:4] + "****"


class PlaceSearchTransport(Protocol):
    coordinate_strategy: CoordinateStrategy

    async def search_text(self, text: str, max_results: int) -> dict[str, Any]: ...


class RestPlaceSearchTransport:
    """Place index text search over HTTPS, authenticated with an API key."""

    coordinate_strategy = CoordinateStrategy.point

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        index_name: str,
        region: str = DEFAULT_REGION,
        endpoint: str = "",
    ):
        self._client = client
        self._api_key = api_key
        base = (endpoint or ENDPOINT_TEMPLATE.format(region=region)).rstrip("/")
        self.search_url = base + SEARCH_PATH.format(index_name=index_name)

    async def search_text(self, text: str, max_results: int) -> dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "X-Api-Key": self._api_key,
        }
        payload = {"Text": text, "MaxResults": max_results}

        try:
            resp = await self._client.post(self.search_url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise LocationServiceError(f"Request timed out: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise LocationServiceError(f"Request failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError(SERVICE_NAME)
        if not resp.is_success:
            raise LocationServiceError(
                resp.text or f"Unexpected HTTP status {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise LocationServiceError(
                f"Malformed response body: {exc}", status_code=resp.status_code
            ) from exc
        if not isinstance(data, dict):
            raise LocationServiceError(
                "Malformed response body: expected a JSON object",
                status_code=resp.status_code,
            )
        return data


def build_location_client(settings: Settings):
    """Create a boto3 ``location`` client from static or session credentials."""
    access_key = settings.aws_access_key_id
    logger.info("Configuring AWS client with access key: %s", mask_key(access_key))

    session_token = settings.aws_session_token.strip() or None
    if session_token:
        logger.info("Using session token for temporary credentials")
    else:
        logger.info("Using long-term credentials (no session token)")

    region = resolve_region(settings.location_region)
    logger.info("AWS Location Service region: %s", region)

    config = Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"max_attempts": settings.max_retries, "mode": "standard"},
    )
    return boto3.client(
        "location",
        region_name=region,
        aws_access_key_id=access_key,
        aws_secret_access_key=settings.aws_secret_access_key,
        aws_session_token=session_token,
        config=config,
    )


class SdkPlaceSearchTransport:
    """Place index text search through the boto3 ``location`` client."""

    coordinate_strategy = CoordinateStrategy.bbox

    def __init__(self, location_client: Any, index_name: str):
        self._client = location_client
        self._index_name = index_name

    async def search_text(self, text: str, max_results: int) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(
                self._client.search_place_index_for_text,
                IndexName=self._index_name,
                Text=text,
                MaxResults=max_results,
            )
        except ClientError as exc:
            error = exc.response.get("Error", {})
            status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            if error.get("Code") in ("ThrottlingException", "TooManyRequestsException"):
                raise RateLimitError(SERVICE_NAME) from exc
            raise LocationServiceError(
                error.get("Message") or str(exc), status_code=status
            ) from exc
        except BotoCoreError as exc:
            raise LocationServiceError(str(exc)) from exc


class AddressLookupClient:
    """Runs one provider search per call and never lets a transport fault escape."""

    def __init__(self, transport: PlaceSearchTransport, max_results: int = 5):
        self._transport = transport
        self._max_results = max_results

    @property
    def coordinate_strategy(self) -> CoordinateStrategy:
        return self._transport.coordinate_strategy

    @property
    def max_results(self) -> int:
        return self._max_results

    async def search(
        self, zip_code: str, max_results: int | None = None
    ) -> dict[str, Any] | TransportError:
        limit = max_results or self._max_results
        logger.debug("Searching place index for %s (max_results=%d)", zip_code, limit)
        try:
            return await self._transport.search_text(zip_code, limit)
        except RateLimitError as exc:
            logger.warning("Rate limit hit for %s", exc.service)
            return TransportError(message=str(exc), status_code=429)
        except LocationServiceError as exc:
            logger.error(
                "Error calling AWS Location Service: %s (status=%s)",
                exc.message,
                exc.status_code,
            )
            return TransportError(message=exc.message, status_code=exc.status_code)
