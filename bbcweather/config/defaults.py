"""The fixed city catalog with BBC Weather location codes."""

from types import MappingProxyType

from bbcweather.config.schema import CityConfig
from bbcweather.models.common import CityId

DEFAULT_CITIES: tuple[CityConfig, ...] = (
    CityConfig(id=CityId.CAIRO, name="Cairo", location_code="360630"),
    CityConfig(id=CityId.MECCA, name="Mecca", location_code="104515"),
    CityConfig(id=CityId.ABU_DHABI, name="Abu Dhabi", location_code="292968"),
    CityConfig(id=CityId.LONDON, name="London", location_code="2643743"),
    CityConfig(id=CityId.NEW_YORK, name="New York", location_code="5128581"),
    CityConfig(id=CityId.BRASILIA, name="Brasilia", location_code="3469058"),
)

CITY_CATALOG: MappingProxyType[CityId, str] = MappingProxyType(
    {c.id: c.location_code for c in DEFAULT_CITIES}
)
