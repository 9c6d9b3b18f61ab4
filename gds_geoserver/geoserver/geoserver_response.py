import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

from gds_geoserver.settings import TomlLogsLoader as LogsLoader
from .parameters import SENSITIVE_PARAMETERS


class UnexpectedStatusError(Exception):
    pass


MASKED_HEADERS = frozenset(['authorization', 'proxy-authorization'])


def _masked_headers(headers) -> dict:
    return {name: ('****' if name.lower() in MASKED_HEADERS else value)
            for name, value in headers.items()}


def _body_text(body) -> str:
    if body is None:
        return ''
    if isinstance(body, bytes):
        return body.decode('utf-8', errors='replace')
    return str(body)


def _masked_form(text: str) -> str:
    pairs = parse_qsl(text, keep_blank_values=True)
    masked = [(name, ('****' if name in SENSITIVE_PARAMETERS else value)) for name, value in pairs]
    return urlencode(masked, safe='*')


def _masked_url(url: str) -> str:
    url_parts = urlsplit(url)
    if not url_parts.query:
        return url
    return urlunsplit(url_parts._replace(query=_masked_form(url_parts.query)))


def _masked_body(prepared_request) -> str:
    body = _body_text(prepared_request.body)
    content_type = prepared_request.headers.get('Content-Type', '')
    if body and content_type.startswith('application/x-www-form-urlencoded'):
        return _masked_form(body)
    return body


class GeoserverResponseLogger:
    """
    Diagnostic logging of a single request/response exchange. Every method returns the GeoserverResponse so that
    calls can continue to be chained.
    """

    def __init__(self, geoserver_response, logger: logging.Logger):
        self.geoserver_response = geoserver_response
        self.logger = logger

    def request(self):
        prepared_request = self.geoserver_response.response.request
        log = LogsLoader.get_log(section='geoserver_response',
                                 log_name='request',
                                 parameters={
                                     'method': prepared_request.method,
                                     'url': _masked_url(prepared_request.url),
                                     'headers': _masked_headers(prepared_request.headers),
                                     'body': _masked_body(prepared_request)
                                 })
        self.logger.info(log)
        return self.geoserver_response

    def status(self):
        response = self.geoserver_response.response
        log = LogsLoader.get_log(section='geoserver_response',
                                 log_name='status',
                                 parameters={
                                     'status_code': response.status_code,
                                     'reason': response.reason or ''
                                 })
        self.logger.info(log)
        return self.geoserver_response

    def headers(self):
        log = LogsLoader.get_log(section='geoserver_response',
                                 log_name='headers',
                                 parameters={'headers': dict(self.geoserver_response.headers)})
        self.logger.info(log)
        return self.geoserver_response

    def body(self):
        log = LogsLoader.get_log(section='geoserver_response',
                                 log_name='body',
                                 parameters={'body': self.geoserver_response.text})
        self.logger.info(log)
        return self.geoserver_response

    def everything(self):
        self.request()
        self.status()
        self.headers()
        self.body()
        return self.geoserver_response

    def if_error(self):
        if self.geoserver_response.status_code >= 400:
            return self.everything()
        return self.geoserver_response


class GeoserverResponse:

    def __init__(self, response: requests.Response):
        self.response = response
        self.logger = logging.getLogger(name='GeoserverResponse')

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self):
        return self.response.headers

    @property
    def text(self) -> str:
        return self.response.text

    def log(self) -> GeoserverResponseLogger:
        return GeoserverResponseLogger(geoserver_response=self, logger=self.logger)

    def expect_status(self, expected: int):
        """
        :raises UnexpectedStatusError: if the response status is not the expected one.
        :return: This response, for chaining.
        """
        if self.status_code != expected:
            err_msg = LogsLoader.get_log(section='geoserver_response',
                                         log_name='unexpected_status',
                                         parameters={
                                             'expected': expected,
                                             'url': self.response.url,
                                             'status_code': self.status_code
                                         })
            self.logger.error(err_msg)
            raise UnexpectedStatusError(err_msg)
        return self

    def __repr__(self):
        return f"GeoserverResponse(status_code={self.status_code}, url={self.response.url!r})"
