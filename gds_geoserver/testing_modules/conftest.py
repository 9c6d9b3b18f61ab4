import pytest
import requests_mock

from gds_geoserver import settings
from gds_geoserver.geoserver import GeoserverServiceFixture
from gds_geoserver.testing_modules import get_toml_path


@pytest.fixture(autouse=True)
def cleanup_after_test():
    settings.TomlConfigLoader.reset()
    settings.TomlLogsLoader.reset()
    yield
    settings.TomlConfigLoader.reset()
    settings.TomlLogsLoader.reset()


@pytest.fixture
def config_loader():
    return settings.TomlConfigLoader(get_toml_path())


@pytest.fixture
def geoserver_fixture(config_loader):
    with GeoserverServiceFixture() as fixture:
        yield fixture


@pytest.fixture
def geoserver_mock():
    with requests_mock.Mocker() as m:
        yield m
