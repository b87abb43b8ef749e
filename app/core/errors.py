from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    MISSING_PARAMETER = "MissingParameter"
    INVALID_COORDINATE_FORMAT = "InvalidCoordinateFormat"
    PLACE_NOT_FOUND = "PlaceNotFound"
    GEOCODING_SERVICE_UNAVAILABLE = "GeocodingServiceUnavailable"
    NO_ROUTE_FOUND = "NoRouteFound"
    ROUTING_SERVICE_UNAVAILABLE = "RoutingServiceUnavailable"
    PERSISTENCE_UNAVAILABLE = "PersistenceUnavailable"
    PERSISTENCE_WRITE_FAILED = "PersistenceWriteFailed"
    UNEXPECTED_ERROR = "UnexpectedError"


class Failure(BaseModel):
    """Error variant returned instead of raising; endpoints map it to a status code."""
    kind: ErrorKind
    message: str


STATUS_FOR: dict[ErrorKind, int] = {
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.INVALID_COORDINATE_FORMAT: 400,
    ErrorKind.PLACE_NOT_FOUND: 404,
    ErrorKind.GEOCODING_SERVICE_UNAVAILABLE: 502,
    ErrorKind.NO_ROUTE_FOUND: 404,
    ErrorKind.ROUTING_SERVICE_UNAVAILABLE: 502,
    ErrorKind.PERSISTENCE_UNAVAILABLE: 400,
    ErrorKind.PERSISTENCE_WRITE_FAILED: 500,
    ErrorKind.UNEXPECTED_ERROR: 500,
}
