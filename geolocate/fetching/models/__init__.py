from .google_maps_geocoding_response import AddressComponent, Geometry, GMGeocodingResponse, Location, Result, Viewport
from .google_maps_geolocation_response import GeolocationError, GeolocationErrorDetail, GMGeolocationResponse

__all__ = [
    "AddressComponent",
    "Geometry",
    "GMGeocodingResponse",
    "Location",
    "Result",
    "Viewport",
    "GeolocationError",
    "GeolocationErrorDetail",
    "GMGeolocationResponse",
]
