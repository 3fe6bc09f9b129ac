"""Error kinds raised by the fetch and extract stages."""


class WeatherScraperError(Exception):
    """Base class for all scraper failures."""


class CityLookupError(WeatherScraperError, LookupError):
    """City identifier is not in the catalog. Raised before any request."""

    def __init__(self, city_id: object):
        self.city_id = city_id
        super().__init__(f"Unknown city: {city_id!r}")


class NetworkError(WeatherScraperError):
    """Transport failure: DNS, refused connection, timeout or non-2xx status."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ParsingError(WeatherScraperError):
    """Unexpected structural failure while extracting or rendering a report."""
