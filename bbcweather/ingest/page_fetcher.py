"""Page fetcher: resolves a catalog city to its forecast page markup."""

import logging

from bbcweather.config.defaults import CITY_CATALOG
from bbcweather.ingest.bbc_client import BbcWeatherClient
from bbcweather.ingest.errors import CityLookupError
from bbcweather.models.common import CityId

logger = logging.getLogger(__name__)


def resolve_city(city_id: CityId | str) -> CityId:
    """Map a city identifier onto the catalog, or raise CityLookupError."""
    if isinstance(city_id, CityId):
        return city_id
    if isinstance(city_id, str):
        try:
            return CityId(city_id)
        except ValueError:
            pass
    raise CityLookupError(city_id)


class PageFetcher:
    def __init__(self, client: BbcWeatherClient | None = None):
        self.client = client if client is not None else BbcWeatherClient()

    def fetch(self, city_id: CityId | str) -> str:
        """Return the raw forecast page for a city.

        Unknown cities fail before any request is made.
        """
        city = resolve_city(city_id)
        location_code = CITY_CATALOG[city]
        logger.debug("Fetching %s (location %s)", city.value, location_code)
        return self.client.get_page(location_code)
