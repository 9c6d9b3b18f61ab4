import logging

from gds_geoserver.settings import TomlConfigLoader as ConfigLoader, TomlLogsLoader as LogsLoader, \
    configure_logging
from .geoserver_request import GeoserverRequest
from .geoserver_response import GeoserverResponse
from .geoserver_service_connection_manager import GeoserverServiceConnectionManager


class GeoserverServiceFixture:
    """
    Shared set up for tests that post to the geoserver service. Owns the base URL, the logging configuration and
    the connection manager; the HTTP session itself lives only for the duration of each post.

    Use as a context manager, or call close() when done.
    """

    def __init__(self, connection_manager: GeoserverServiceConnectionManager = None, configs_file_path=None):
        """

        :param connection_manager: If not provided, one is created from the [geoserver_service] config section.
        :param configs_file_path: Only used if the config has not been loaded yet.
        """
        if not ConfigLoader._instance:
            ConfigLoader(configs_file_path)

        configure_logging(level=ConfigLoader.get_config(section='logging', config_name='level', default='DEBUG'),
                          log_file=ConfigLoader.get_config(section='logging', config_name='log_file', default=None))
        self.logger = logging.getLogger(name='GeoserverServiceFixture')

        self.connection_manager = connection_manager or GeoserverServiceConnectionManager.from_config()

        log = LogsLoader.get_log(section='geoserver_fixture',
                                 log_name='setting_up',
                                 parameters={'url': self.service_url})
        self.logger.info(log)

    @property
    def service_url(self) -> str:
        return self.connection_manager._generate_api_url()

    def post_geoserver_request(self, geoserver_request: GeoserverRequest) -> GeoserverResponse:
        return self.connection_manager.post(geoserver_request)

    def close(self):
        log = LogsLoader.get_log(section='geoserver_fixture',
                                 log_name='tearing_down',
                                 parameters={'url': self.service_url})
        self.logger.info(log)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
