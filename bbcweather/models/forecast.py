"""BBC Weather forecast data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DayCondition:
    day: str
    short_forecast: str
    temperature: str  # raw token, e.g. "18°11°"
    high_temp: str
    low_temp: str

    def to_dict(self) -> dict[str, str]:
        return {
            "day": self.day,
            "shortForecast": self.short_forecast,
            "temperature": self.temperature,
            "highTemp": self.high_temp,
            "lowTemp": self.low_temp,
        }


@dataclass(frozen=True)
class CityReport:
    city: str
    week_list: list[DayCondition] = field(default_factory=list)

    @property
    def today(self) -> DayCondition | None:
        return self.week_list[0] if self.week_list else None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape, keyed the way the page's consumers expect."""
        return {
            "city": self.city,
            "weekList": [d.to_dict() for d in self.week_list],
        }
