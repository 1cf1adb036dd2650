import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict
from .fetching.models import Result

logger = logging.getLogger(__name__)


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street_number: Optional[str] = None
    route: Optional[str] = None
    locality: Optional[str] = None
    sublocality: Optional[str] = None
    neighborhood: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    administrative_area_level_1: Optional[str] = None
    administrative_area_level_2: Optional[str] = None


# Provider component types that map onto an Address field of the same name.
ADDRESS_COMPONENT_TYPES: frozenset[str] = frozenset(Address.model_fields.keys())


def details_to_address(result: Result) -> Address:
    """Flatten the typed address components of a reverse geocode result.

    A component tagged with several known types fills each of those fields.
    When two components share a type the later one wins.
    """
    fields: dict[str, str] = {}
    for component in result.address_components:
        for component_type in component.types:
            if component_type in ADDRESS_COMPONENT_TYPES:
                fields[component_type] = component.long_name
            else:
                logger.debug("Ignoring address component type %s", component_type)
    return Address(**fields)
