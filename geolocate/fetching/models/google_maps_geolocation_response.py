from pydantic import BaseModel
from typing import Optional
from .google_maps_geocoding_response import Location

class GeolocationErrorDetail(BaseModel):
    domain: str = ""
    reason: str = ""
    message: str = ""

class GeolocationError(BaseModel):
    code: int = 0
    message: str = ""
    errors: list[GeolocationErrorDetail] = []

class GMGeolocationResponse(BaseModel):
    location: Optional[Location] = None
    accuracy: Optional[float] = None
    error: Optional[GeolocationError] = None
