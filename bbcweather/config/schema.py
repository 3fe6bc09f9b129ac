"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from bbcweather.models.common import CityId

BBC_WEATHER_BASE_URL = "https://www.bbc.com/weather/"
DEFAULT_USER_AGENT = "bbcweather/0.1.0"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CityConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    id: CityId
    name: str
    location_code: str = Field(min_length=1, pattern=r"^\d+$")


class ScraperConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = BBC_WEATHER_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=5.0, gt=0.0)  # httpx's own default


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    log_level: LogLevel = "INFO"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    scraper: ScraperConfig = ScraperConfig()
    ops: OpsConfig = OpsConfig()
