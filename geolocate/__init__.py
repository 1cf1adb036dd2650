"""Great-circle geometry and a Google Maps geocoding client."""

from .address import Address, details_to_address
from .exceptions import (
    DecodeError,
    GeolocateError,
    MissingAPIKeyError,
    ProviderDomainError,
    TransportError,
    ZeroResultsError,
)
from .fetching.geocoding import GoogleMapsGeocoder
from .fetching.transport import GeocodeProvider, ProviderRequest, RequestsProvider
from .point import (
    EARTH_RADIUS_KM,
    GeoPoint,
    bearing_to,
    great_circle_distance,
    midpoint_to,
    point_at_distance_and_bearing,
)

__all__ = [
    "Address",
    "details_to_address",
    "DecodeError",
    "GeolocateError",
    "MissingAPIKeyError",
    "ProviderDomainError",
    "TransportError",
    "ZeroResultsError",
    "GoogleMapsGeocoder",
    "GeocodeProvider",
    "ProviderRequest",
    "RequestsProvider",
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "bearing_to",
    "great_circle_distance",
    "midpoint_to",
    "point_at_distance_and_bearing",
]
