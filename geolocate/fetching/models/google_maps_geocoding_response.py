from pydantic import BaseModel
from typing import Optional

class AddressComponent(BaseModel):
    long_name: str
    short_name: str = ""
    types: list[str] = []

class Location(BaseModel):
    lat: float
    lng: float

class Viewport(BaseModel):
    northeast: Location
    southwest: Location

class Geometry(BaseModel):
    location: Location
    location_type: Optional[str] = None
    viewport: Optional[Viewport] = None

class Result(BaseModel):
    address_components: list[AddressComponent] = []
    formatted_address: str
    geometry: Optional[Geometry] = None
    place_id: Optional[str] = None
    types: list[str] = []

class GMGeocodingResponse(BaseModel):
    results: list[Result] = []
    status: Optional[str] = None
    error_message: Optional[str] = None
