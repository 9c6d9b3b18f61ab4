import logging

from gds_geoserver.settings import TomlLogsLoader as LogsLoader
from .parameters import SENSITIVE_PARAMETERS


class InvalidParameterNameError(ValueError):
    pass


class InvalidParameterValueError(ValueError):
    pass


class GeoserverRequest:

    def __init__(self, parameters: dict = None):
        """

        :param parameters: Optional starting parameters. Copied, and validated the same way as with_param.
        """
        self._parameters = {}
        if parameters:
            self.with_params(parameters)

    def with_param(self, name: str, value: str):
        """
        Binds name to value, replacing any earlier value for the same name.
        :return: This request, for chaining.
        """
        if not isinstance(name, str) or not name:
            err_msg = LogsLoader.get_log(section='geoserver_request',
                                         log_name='invalid_parameter_name',
                                         parameters={'name': name})
            logging.error(err_msg)
            raise InvalidParameterNameError(err_msg)

        if not isinstance(value, str):
            err_msg = LogsLoader.get_log(section='geoserver_request',
                                         log_name='invalid_parameter_value',
                                         parameters={'name': name, 'value': value})
            logging.error(err_msg)
            raise InvalidParameterValueError(err_msg)

        self._parameters[name] = value
        return self

    def with_params(self, parameters: dict):
        for name, value in parameters.items():
            self.with_param(name, value)
        return self

    @property
    def parameters(self) -> dict:
        return dict(self._parameters)

    def __len__(self):
        return len(self._parameters)

    def __contains__(self, name):
        return name in self._parameters

    def __repr__(self):
        shown = {name: ('****' if name in SENSITIVE_PARAMETERS else value)
                 for name, value in self._parameters.items()}
        return f"GeoserverRequest(parameters={shown})"
