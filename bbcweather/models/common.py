"""Common types shared across models."""

from enum import StrEnum


class CityId(StrEnum):
    CAIRO = "cairo"
    MECCA = "mecca"
    ABU_DHABI = "abuDhabi"
    LONDON = "london"
    NEW_YORK = "newYork"
    BRASILIA = "brasilia"
