from .geoserver_request import GeoserverRequest, InvalidParameterNameError, InvalidParameterValueError
from .geoserver_response import GeoserverResponse, GeoserverResponseLogger, UnexpectedStatusError
from .geoserver_service_connection_manager import (GeoserverServiceConnectionManager, GeoserverTransportError,
                                                   UnsupportedAuthTypeError, UnsupportedParameterLocationError)
from .geoserver_service_fixture import GeoserverServiceFixture
from . import parameters
