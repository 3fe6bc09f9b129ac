"""Report pipeline: fetch, extract and render weather for catalog cities."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from bbcweather.ingest.errors import WeatherScraperError
from bbcweather.ingest.page_fetcher import PageFetcher
from bbcweather.ingest.page_parser import extract_city_report
from bbcweather.models.common import CityId
from bbcweather.models.forecast import CityReport
from bbcweather.reporting.formatters import format_report_json, format_report_text

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    reports: dict[str, str] = field(default_factory=dict)
    errors: dict[str, WeatherScraperError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def fetch_city_report(
    city_id: CityId | str, fetcher: PageFetcher | None = None
) -> CityReport:
    """Fetch and parse one city's report without rendering it."""
    if fetcher is None:
        fetcher = PageFetcher()
    markup = fetcher.fetch(city_id)
    return extract_city_report(markup)


def report_weather(
    city_id: CityId | str,
    fetcher: PageFetcher | None = None,
    *,
    as_json: bool = False,
) -> str:
    """Fetch, parse and render a city report.

    Errors from any stage are logged and re-raised; no partial report
    is returned.
    """
    try:
        report = fetch_city_report(city_id, fetcher)
        rendered = format_report_json(report) if as_json else format_report_text(report)
    except WeatherScraperError as e:
        logger.error("Failed to fetch weather for %s: %s", city_id, e)
        raise
    logger.info("Weather report for %s:\n%s", city_id, rendered)
    return rendered


def report_many(
    city_ids: Iterable[CityId | str],
    fetcher: PageFetcher | None = None,
    *,
    as_json: bool = False,
) -> BatchResult:
    """Report several cities in order, skipping those that fail."""
    if fetcher is None:
        fetcher = PageFetcher()
    result = BatchResult()
    for city_id in city_ids:
        key = str(city_id)
        try:
            result.reports[key] = report_weather(city_id, fetcher, as_json=as_json)
        except WeatherScraperError as e:
            logger.warning("Skipping %s due to %s", key, type(e).__name__)
            result.errors[key] = e
    return result
