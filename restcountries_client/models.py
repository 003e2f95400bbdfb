# Pydantic models for REST Countries API (v2) data validation
# Provides lookup vocabularies and typed views of API responses

import logging
import re
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Region(str, Enum):
    # Regions accepted by the region endpoint
    AFRICA = "africa"
    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    OCEANIA = "oceania"


class RegionalBloc(str, Enum):
    # Regional blocs accepted by the regionalbloc endpoint

    EU = "eu"
    EFTA = "efta"
    CARICOM = "caricom"
    PA = "pa"
    AU = "au"
    USAN = "usan"
    EEU = "eeu"
    AL = "al"
    ASEAN = "asean"
    CAIS = "cais"
    CEFTA = "cefta"
    NAFTA = "nafta"
    SAARC = "saarc"

    @property
    def full_name(self) -> str:
        return _BLOC_NAMES[self]


_BLOC_NAMES = {
    RegionalBloc.EU: "European Union",
    RegionalBloc.EFTA: "European Free Trade Association",
    RegionalBloc.CARICOM: "Caribbean Community",
    RegionalBloc.PA: "Pacific Alliance",
    RegionalBloc.AU: "African Union",
    RegionalBloc.USAN: "Union of South American Nations",
    RegionalBloc.EEU: "Eurasian Economic Union",
    RegionalBloc.AL: "Arab League",
    RegionalBloc.ASEAN: "Association of Southeast Asian Nations",
    RegionalBloc.CAIS: "Central American Integration System",
    RegionalBloc.CEFTA: "Central European Free Trade Agreement",
    RegionalBloc.NAFTA: "North American Free Trade Agreement",
    RegionalBloc.SAARC: "South Asian Association for Regional Cooperation",
}


class Currency(BaseModel):
    # Currency information
    code: Optional[str] = Field(None, description="ISO 4217 currency code")
    name: Optional[str] = Field(None, description="Currency name")
    symbol: Optional[str] = Field(None, description="Currency symbol")


class Language(BaseModel):
    # Language information
    iso639_1: Optional[str] = Field(None, description="ISO 639-1 language code")
    iso639_2: Optional[str] = Field(None, description="ISO 639-2 language code")
    name: str = Field(..., description="Language name")
    nativeName: Optional[str] = Field(None, description="Native language name")


class RegionalBlocInfo(BaseModel):
    # Regional bloc membership
    acronym: str = Field(..., description="Bloc acronym")
    name: str = Field(..., description="Bloc name")
    otherAcronyms: List[str] = Field(default_factory=list)
    otherNames: List[str] = Field(default_factory=list)


class Country(BaseModel):
    # Country data as returned by the v2 endpoints
    # Everything but the name is optional so field-filtered payloads validate
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Common country name")
    alpha2Code: Optional[str] = Field(None, description="2-letter country code")
    alpha3Code: Optional[str] = Field(None, description="3-letter country code")
    callingCodes: Optional[List[str]] = Field(None, description="International calling codes")
    capital: Optional[str] = Field(None, description="Capital city")
    region: Optional[str] = Field(None, description="Country region")
    subregion: Optional[str] = Field(None, description="Country subregion")
    population: Optional[int] = Field(None, ge=0, description="Population count")
    area: Optional[float] = Field(None, ge=0, description="Area in km2")
    timezones: Optional[List[str]] = Field(None, description="Timezones")
    borders: Optional[List[str]] = Field(None, description="Bordering countries (alpha-3)")
    nativeName: Optional[str] = Field(None, description="Native country name")
    currencies: Optional[List[Currency]] = Field(None, description="Currencies used")
    languages: Optional[List[Language]] = Field(None, description="Languages spoken")
    regionalBlocs: Optional[List[RegionalBlocInfo]] = Field(None, description="Regional bloc memberships")
    flag: Optional[str] = Field(None, description="Flag image URL")

    @field_validator('alpha2Code')
    @classmethod
    def validate_alpha2_code(cls, v):
        if v is not None and not re.match(r'^[A-Z]{2}$', v):
            raise ValueError('Alpha-2 code must be exactly 2 uppercase letters')
        return v

    @field_validator('alpha3Code')
    @classmethod
    def validate_alpha3_code(cls, v):
        if v is not None and not re.match(r'^[A-Z]{3}$', v):
            raise ValueError('Alpha-3 code must be exactly 3 uppercase letters')
        return v


def validate_country_data(data: Dict[str, Any]) -> Country:
    # Validate raw API response data against the Country model
    try:
        return Country(**data)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Country data validation failed: {str(e)}")


def validate_country_list(data: List[Dict[str, Any]]) -> List[Country]:
    # Validate list of countries from API response, dropping invalid entries
    validated_countries = []
    rejected = []

    for i, country_data in enumerate(data):
        try:
            validated_countries.append(Country(**country_data))
        except (TypeError, ValidationError) as e:
            name = country_data.get('name', 'Unknown') if isinstance(country_data, dict) else 'Unknown'
            rejected.append(f"country[{i}] ({name}): {e}")

    if rejected:
        logger.warning(f"{len(rejected)} country entries failed validation")
        for message in rejected[:5]:
            logger.warning(f"  - {message}")

    return validated_countries
