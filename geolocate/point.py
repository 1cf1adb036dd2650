import math
from typing import Optional
from haversine import haversine, Unit
from pydantic import BaseModel, ConfigDict

# Mean Earth radius in kilometres.
EARTH_RADIUS_KM: float = 6371.0


class GeoPoint(BaseModel):
    """A point in geographic notation, degrees on both axes.

    `location_type` is the provider's precision tag for geocoded points,
    e.g. "ROOFTOP" or "APPROXIMATE".
    """
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    address: Optional[str] = None
    location_type: Optional[str] = None

    @classmethod
    def new(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(latitude=latitude, longitude=longitude)

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    def great_circle_distance(self, other: "GeoPoint") -> float:
        return great_circle_distance(self, other)

    def bearing_to(self, other: "GeoPoint") -> float:
        return bearing_to(self, other)

    def point_at_distance_and_bearing(self, distance_km: float, bearing_deg: float) -> "GeoPoint":
        return point_at_distance_and_bearing(self, distance_km, bearing_deg)

    def midpoint_to(self, other: "GeoPoint") -> "GeoPoint":
        return midpoint_to(self, other)


def normalize_longitude(longitude: float) -> float:
    wrapped = (longitude + 540.0) % 360.0 - 180.0
    return 180.0 if wrapped == -180.0 else wrapped


def great_circle_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two points in kilometres.

    Points outside the valid latitude/longitude ranges raise ValueError.
    """
    central_angle = haversine(a.as_tuple(), b.as_tuple(), unit=Unit.RADIANS)
    return EARTH_RADIUS_KM * central_angle


def bearing_to(a: GeoPoint, b: GeoPoint) -> float:
    """Initial bearing (forward azimuth) from `a` towards `b`.

    Returned in compass degrees, clockwise from true north, in [0, 360).
    """
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360.0) % 360.0


def point_at_distance_and_bearing(origin: GeoPoint, distance_km: float, bearing_deg: float) -> GeoPoint:
    """Project `origin` `distance_km` along the great circle leaving at `bearing_deg`.

    The destination longitude is wrapped into (-180, 180], so paths crossing
    the antimeridian come back in range.
    """
    angular_distance = distance_km / EARTH_RADIUS_KM
    bearing = math.radians(bearing_deg)
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular_distance)
        + math.cos(lat1) * math.sin(angular_distance) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(angular_distance) * math.cos(lat1),
        math.cos(angular_distance) - math.sin(lat1) * math.sin(lat2),
    )
    return GeoPoint(latitude=math.degrees(lat2), longitude=normalize_longitude(math.degrees(lon2)))


def midpoint_to(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    lon1 = math.radians(a.longitude)
    d_lon = math.radians(b.longitude - a.longitude)

    bx = math.cos(lat2) * math.cos(d_lon)
    by = math.cos(lat2) * math.sin(d_lon)

    lat3 = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by ** 2),
    )
    lon3 = lon1 + math.atan2(by, math.cos(lat1) + bx)
    return GeoPoint(latitude=math.degrees(lat3), longitude=normalize_longitude(math.degrees(lon3)))
