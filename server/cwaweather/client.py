"""Client for the CWA open-data forecast API.

Every call opens its own ``httpx.AsyncClient``; nothing is kept between
requests.
"""

import logging
from typing import Any

import httpx

from cwaweather.config import Settings
from cwaweather.errors import UpstreamError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


class CwaClient:
    """Fetches the forecast dataset configured in ``Settings``."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = settings.cwa_api_key
        self.url = f"{settings.cwa_api_base_url.rstrip('/')}/v1/rest/datastore/{settings.cwa_dataset_id}"
        self._transport = transport

    async def fetch_dataset(self, location_name: str = "") -> dict[str, Any]:
        """GET the dataset, optionally filtered to one ``locationName``.

        An empty ``location_name`` returns every county and city.

        Raises UpstreamError if CWA answers with a non-2xx status and
        UpstreamUnavailableError if no usable response arrives.
        """
        params = {"Authorization": self.api_key or "", "locationName": location_name}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.get(self.url, params=params)
        except httpx.RequestError as e:
            logger.error("CWA request failed (locationName=%r): %s", location_name, e)
            raise UpstreamUnavailableError() from e

        if not resp.is_success:
            logger.warning("CWA returned HTTP %s (locationName=%r)", resp.status_code, location_name)
            raise UpstreamError(resp.status_code, details=_response_body(resp))

        try:
            return resp.json()
        except ValueError as e:
            logger.error("CWA returned a non-JSON body: %s", e)
            raise UpstreamUnavailableError() from e


def _response_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text or None
