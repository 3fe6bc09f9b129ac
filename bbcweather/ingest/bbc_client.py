"""BBC Weather page client."""

import logging

import httpx

from bbcweather.config.schema import BBC_WEATHER_BASE_URL, DEFAULT_USER_AGENT
from bbcweather.ingest.errors import NetworkError

logger = logging.getLogger(__name__)


class BbcWeatherClient:
    def __init__(
        self,
        base_url: str = BBC_WEATHER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 5.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_page(self, location_code: str) -> str:
        """Fetch the forecast page for a location code and return its HTML.

        Single attempt, no retry. Any transport failure or non-2xx status
        is raised as NetworkError.
        """
        url = f"{self.base_url}{location_code}"
        headers = {"User-Agent": self.user_agent, "Accept": "text/html"}
        try:
            resp = httpx.get(
                url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
            resp.raise_for_status()
            return resp.text
        except httpx.HTTPStatusError as e:
            logger.error("Network Error: %s returned %d", url, e.response.status_code)
            raise NetworkError(
                f"{url} returned {e.response.status_code}",
                url,
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error("Network Error: request to %s failed: %s", url, e)
            raise NetworkError(f"Request to {url} failed: {e}", url) from e
