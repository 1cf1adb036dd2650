import logging
import pandas as pd
from typing import Optional
from urllib.parse import quote_plus
from pydantic import ValidationError
from .models import GMGeocodingResponse, GMGeolocationResponse
from .transport import GeocodeProvider, ProviderRequest, RequestsProvider
from ..config import settings
from ..exceptions import DecodeError, MissingAPIKeyError, ProviderDomainError, ZeroResultsError
from ..point import GeoPoint

logger = logging.getLogger(__name__)


def _decode_geocoding(data: bytes) -> GMGeocodingResponse:
    try:
        return GMGeocodingResponse.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"Could not decode geocoding response: {e}") from e


def parse_geocode_response(data: bytes) -> GeoPoint:
    response = _decode_geocoding(data)
    if not response.results:
        raise ZeroResultsError(response.status, response.error_message)

    result = response.results[0]
    if result.geometry is None:
        raise DecodeError("Geocoding result carries no geometry")
    return GeoPoint(
        latitude=result.geometry.location.lat,
        longitude=result.geometry.location.lng,
        address=result.formatted_address,
        location_type=result.geometry.location_type,
    )


def parse_reverse_geocode_response(data: bytes) -> GMGeocodingResponse:
    response = _decode_geocoding(data)
    if not response.results:
        raise ZeroResultsError(response.status, response.error_message)
    return response


def parse_geolocate_response(data: bytes) -> GeoPoint:
    try:
        response = GMGeolocationResponse.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"Could not decode geolocation response: {e}") from e

    error = response.error
    if error is not None and error.code != 0:
        if error.errors:
            detail = error.errors[0]
            raise ProviderDomainError(detail.domain, detail.reason, detail.message, code=error.code)
        raise ProviderDomainError("", "", error.message, code=error.code)

    if response.location is None:
        raise DecodeError("Geolocation response carries no location")
    return GeoPoint(latitude=response.location.lat, longitude=response.location.lng)


class GoogleMapsGeocoder:
    """Client for the Google Maps Geocoding and Geolocation services.

    `api_key` and `region` are plain attributes. Change them only while no
    call is in flight, the client does no locking of its own.
    """
    GEOCODE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    GEOLOCATE_URL: str = "https://www.googleapis.com/geolocation/v1/geolocate"
    ADDRESS_COLNAME: str = 'address'
    FORMATTED_ADDRESS_COLNAME: str = 'formatted_address'
    LAT_COLNAME: str = 'lat'
    LON_COLNAME: str = 'lng'
    LOCATION_TYPE_COLNAME: str = 'location_type'

    def __init__(self, api_key: Optional[str] = None, region: Optional[str] = None,
                 provider: Optional[GeocodeProvider] = None, timeout: Optional[float] = None):
        self.api_key: str = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
        self.region: str = region if region is not None else settings.GOOGLE_MAPS_REGION
        self.provider: GeocodeProvider = provider if provider is not None else RequestsProvider(timeout)

    def set_api_key(self, api_key: str) -> None:
        self.api_key = api_key

    def geocode_query_str(self, address: str, region: str = "") -> str:
        query = f"address={quote_plus(address)}"
        if region:
            query += f"&region={region}"
        return query + f"&key={self.api_key}"

    def reverse_geocode_query_str(self, point: GeoPoint) -> str:
        return f"latlng={point.latitude:f},{point.longitude:f}&key={self.api_key}"

    def __request_geocoding(self, query: str) -> bytes:
        return self.provider.send(ProviderRequest("GET", f"{self.GEOCODE_URL}?{query}"))

    def geocode(self, address: str, region: Optional[str] = None) -> GeoPoint:
        region = self.region if region is None else region
        data = self.__request_geocoding(self.geocode_query_str(address, region))
        return parse_geocode_response(data)

    def geocode_with_region(self, address: str, region: str) -> GeoPoint:
        return self.geocode(address, region)

    def reverse_geocode(self, point: GeoPoint) -> str:
        return self.reverse_geocode_detailed(point).results[0].formatted_address

    def reverse_geocode_detailed(self, point: GeoPoint) -> GMGeocodingResponse:
        data = self.__request_geocoding(self.reverse_geocode_query_str(point))
        return parse_reverse_geocode_response(data)

    def geolocate(self) -> GeoPoint:
        if not self.api_key:
            raise MissingAPIKeyError()
        data = self.provider.send(ProviderRequest("POST", f"{self.GEOLOCATE_URL}?key={self.api_key}"))
        return parse_geolocate_response(data)

    def batch_geocode(self, addresses: list[str]) -> pd.DataFrame:
        rows = []
        for address in addresses:
            try:
                point: Optional[GeoPoint] = self.geocode(address)
            except ZeroResultsError as e:
                logger.warning("No results found for %s (%s)", address, e)
                point = None
            rows.append({
                self.ADDRESS_COLNAME: address,
                self.FORMATTED_ADDRESS_COLNAME: point.address if point else None,
                self.LAT_COLNAME: point.latitude if point else None,
                self.LON_COLNAME: point.longitude if point else None,
                self.LOCATION_TYPE_COLNAME: point.location_type if point else None,
            })
        return pd.DataFrame(rows, columns=[
            self.ADDRESS_COLNAME, self.FORMATTED_ADDRESS_COLNAME, self.LAT_COLNAME,
            self.LON_COLNAME, self.LOCATION_TYPE_COLNAME,
        ])
