"""Shared test fixtures for the date helper test suite."""

import pytest

from datehelper import DateHelper, DateHelperConfig
from datehelper.resolver import Resolver
from datehelper.zones import ZoneOracle


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def utc_config() -> DateHelperConfig:
    """Config pinned to UTC so no test depends on the host's zone."""
    return DateHelperConfig(default_timezone="UTC")


@pytest.fixture
def nyc_config() -> DateHelperConfig:
    return DateHelperConfig(default_timezone="America/New_York")


# =============================================================================
# COMPONENT FIXTURES
# =============================================================================


@pytest.fixture
def oracle() -> ZoneOracle:
    return ZoneOracle()


@pytest.fixture
def resolver(oracle, utc_config) -> Resolver:
    return Resolver(oracle, utc_config)


@pytest.fixture
def helper(utc_config) -> DateHelper:
    """DateHelper whose default zone is UTC."""
    return DateHelper(utc_config)


@pytest.fixture
def nyc_helper(nyc_config) -> DateHelper:
    """DateHelper whose default zone is America/New_York."""
    return DateHelper(nyc_config)
