"""Extracts a CityReport from BBC Weather forecast page markup.

Extraction is forgiving: a missing element yields an empty string rather
than an error, so partial layout changes on the page degrade the report
instead of breaking it.
"""

import logging

from bs4 import BeautifulSoup, Tag

from bbcweather.ingest.errors import ParsingError
from bbcweather.models.forecast import CityReport, DayCondition

logger = logging.getLogger(__name__)

MAX_DAYS = 7
CITY_SEPARATOR = " - "

LOCATION_NAME_SELECTOR = "#wr-location-name-id"
DAY_CAROUSEL_SELECTOR = "ol.wr-day-carousel__list li"


def day_title_selector(index: int) -> str:
    return f"a#daylink-{index} div.wr-day__title"


def forecast_description_selector(index: int) -> str:
    return (
        f"a#daylink-{index} "
        "div.wr-day__content__weather-type-description--opaque"
    )


def temperature_selector(index: int) -> str:
    return f"a#daylink-{index} span.wr-value--temperature--c"


def extract_city_report(markup: str | bytes) -> CityReport:
    """Parse forecast page markup into a CityReport.

    Raises ParsingError only for input that is not markup at all, or for
    an unexpected failure inside the parser.
    """
    if not isinstance(markup, (str, bytes)):
        logger.error(
            "Parsing Error: expected markup text, got %s", type(markup).__name__
        )
        raise ParsingError(
            f"Expected markup text, got {type(markup).__name__}"
        )

    try:
        soup = BeautifulSoup(markup, "html.parser")
        return CityReport(
            city=extract_city_name(soup),
            week_list=extract_week(soup),
        )
    except Exception as e:
        logger.error("Parsing Error: %s", e)
        raise ParsingError(str(e)) from e


def extract_city_name(soup: BeautifulSoup) -> str:
    """City name is the part of the location heading before " - "."""
    full_text = _select_text(soup, LOCATION_NAME_SELECTOR)
    return full_text.split(CITY_SEPARATOR)[0] or full_text


def extract_week(soup: BeautifulSoup) -> list[DayCondition]:
    items = soup.select(DAY_CAROUSEL_SELECTOR)[:MAX_DAYS]
    return [extract_day(item, i) for i, item in enumerate(items)]


def extract_day(item: Tag, index: int) -> DayCondition:
    temperature = _select_text(item, temperature_selector(index))
    high_temp, low_temp = split_temperature(temperature, index)
    return DayCondition(
        day=_select_text(item, day_title_selector(index)),
        short_forecast=_select_text(item, forecast_description_selector(index)),
        temperature=temperature,
        high_temp=high_temp,
        low_temp=low_temp,
    )


def split_temperature(temperature: str, index: int) -> tuple[str, str]:
    """Derive (high, low) from a raw token like "18°11°".

    High is a fixed three-character slice. Today (index 0) carries a single
    reading, so low repeats high. Other days take the remainder as low,
    falling back to high when there is none.
    """
    if not temperature:
        return "", ""
    high = temperature[:3]
    if index == 0:
        return high, high
    return high, temperature[3:] or high


def _select_text(node: Tag, selector: str) -> str:
    # Text of all matches, concatenated, like a jQuery-style .text()
    return "".join(el.get_text() for el in node.select(selector)).strip()
