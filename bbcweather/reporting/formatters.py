"""Output formatters for city weather reports."""

import json

from bbcweather.ingest.errors import ParsingError
from bbcweather.models.forecast import CityReport


def format_report_text(report: CityReport) -> str:
    """Plain text summary of today's forecast."""
    today = report.today
    if today is None:
        raise ParsingError(f"No forecast days found for {report.city or 'unknown city'}")
    lines = [
        f"City: {report.city}",
        f"Today's Forecast: {today.short_forecast}",
        f"High: {today.high_temp}C",
        f"Low: {today.low_temp}C",
    ]
    return "\n".join(lines)


def format_report_json(report: CityReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
