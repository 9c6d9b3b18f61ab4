import logging

import requests
from requests.auth import HTTPBasicAuth, HTTPDigestAuth

from gds_geoserver.settings import TomlConfigLoader as ConfigLoader, TomlLogsLoader as LogsLoader
from .geoserver_request import GeoserverRequest
from .geoserver_response import GeoserverResponse


class GeoserverTransportError(Exception):
    pass


class UnsupportedAuthTypeError(ValueError):
    pass


class UnsupportedParameterLocationError(ValueError):
    pass


AUTH_TYPES = {
    'digest': HTTPDigestAuth,
    'basic': HTTPBasicAuth,
    'none': None
}

PARAMETER_LOCATIONS = {
    'body': 'data',
    'query': 'params'
}


class GeoserverServiceConnectionManager:

    def __init__(self, base_url: str, resource_path: str = '', auth_type: str = 'none', username: str = None,
                 password: str = None, parameter_location: str = 'body', timeout_seconds: float = None):
        """

        :param base_url: Scheme, host and port of the server hosting the geoserver service
        :param resource_path: Path of the geoserver service endpoint on that server
        :param auth_type: 'digest', 'basic' or 'none'. Authenticates the POST against the hosting server.
        :param parameter_location: 'body' to send a form-encoded body, 'query' to send URL query parameters
        :param timeout_seconds: Falsy values mean no timeout
        """
        self.base_url = base_url
        self.resource_path = resource_path
        self.auth = self._create_auth(auth_type=auth_type, username=username, password=password)
        self.parameters_keyword = self._parameters_keyword(parameter_location=parameter_location)
        self.timeout = timeout_seconds or None
        self.logger = logging.getLogger(name='GeoserverServiceConnectionManager')

    @classmethod
    def from_config(cls, section='geoserver_service'):
        """
        Creates a connection manager from a section of the loaded TOML config - see config.toml.
        """
        return cls(base_url=ConfigLoader.get_config(section=section, config_name='base_url'),
                   resource_path=ConfigLoader.get_config(section=section, config_name='resource_path', default=''),
                   auth_type=ConfigLoader.get_config(section=section, config_name='auth_type', default='none'),
                   username=ConfigLoader.get_config(section=section, config_name='username', default=None),
                   password=ConfigLoader.get_config(section=section, config_name='password', default=None),
                   parameter_location=ConfigLoader.get_config(section=section, config_name='parameter_location',
                                                              default='body'),
                   timeout_seconds=ConfigLoader.get_config(section=section, config_name='timeout_seconds',
                                                           default=None))

    @staticmethod
    def _create_auth(auth_type, username, password):
        normalized_auth_type = str(auth_type).lower()
        if normalized_auth_type not in AUTH_TYPES:
            err_msg = LogsLoader.get_log(section='geoserver_connection_manager',
                                         log_name='unsupported_auth_type',
                                         parameters={
                                             'auth_type': auth_type,
                                             'supported': sorted(AUTH_TYPES)
                                         })
            logging.error(err_msg)
            raise UnsupportedAuthTypeError(err_msg)

        auth_class = AUTH_TYPES[normalized_auth_type]
        if auth_class is None:
            return None
        return auth_class(username, password)

    @staticmethod
    def _parameters_keyword(parameter_location):
        try:
            return PARAMETER_LOCATIONS[str(parameter_location).lower()]
        except KeyError:
            err_msg = LogsLoader.get_log(section='geoserver_connection_manager',
                                         log_name='unsupported_parameter_location',
                                         parameters={
                                             'parameter_location': parameter_location,
                                             'supported': sorted(PARAMETER_LOCATIONS)
                                         })
            logging.error(err_msg)
            raise UnsupportedParameterLocationError(err_msg)

    def _generate_api_url(self) -> str:
        if not self.resource_path:
            return self.base_url
        return f"{self.base_url.rstrip('/')}/{self.resource_path.lstrip('/')}"

    def post(self, geoserver_request: GeoserverRequest) -> GeoserverResponse:
        """
        Sends a single POST carrying the request's parameters. The response status is not checked.
        :return: GeoserverResponse wrapping the HTTP response.
        :raises GeoserverTransportError: if the HTTP exchange could not complete.
        """
        url = self._generate_api_url()
        parameters = geoserver_request.parameters

        log = LogsLoader.get_log(section='geoserver_connection_manager',
                                 log_name='posting_request',
                                 parameters={
                                     'num_parameters': len(parameters),
                                     'url': url
                                 })
        self.logger.debug(log)

        request_kwargs = {self.parameters_keyword: parameters}

        with requests.Session() as session:
            try:
                response = session.post(url=url,
                                        auth=self.auth,
                                        timeout=self.timeout,
                                        **request_kwargs)
            except requests.exceptions.RequestException as e:
                err_msg = LogsLoader.get_log(section='geoserver_connection_manager',
                                             log_name='transport_failure',
                                             parameters={
                                                 'url': url,
                                                 'details': e
                                             })
                self.logger.error(err_msg)
                raise GeoserverTransportError(err_msg) from e

        log = LogsLoader.get_log(section='geoserver_connection_manager',
                                 log_name='received_response',
                                 parameters={
                                     'status_code': response.status_code,
                                     'url': url
                                 })
        self.logger.debug(log)

        return GeoserverResponse(response=response)
