# File: tests/conftest.py
from typing import Any, Dict

import pytest

from tests.helpers import make_config_data
from wp_scraper.config import ScraperConfig


@pytest.fixture()
def config_data() -> Dict[str, Any]:
    return make_config_data()


@pytest.fixture()
def basic_config(config_data) -> ScraperConfig:
    return ScraperConfig(**config_data)
