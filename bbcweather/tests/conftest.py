"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from bbcweather.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def cairo_html() -> str:
    return (FIXTURE_DIR / "bbc_weather_cairo.html").read_text(encoding="utf-8")


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "scraper": {"base_url": "https://test-bbc.example.com/weather/"},
        "ops": {"log_level": "DEBUG"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
