# Client library for the REST Countries API

from .api_client import RestCountriesClient
from .exceptions import InvalidArgumentError, RestCountriesError, UnsupportedDataTypeError
from .models import Country, Region, RegionalBloc, validate_country_data, validate_country_list
from .params import normalize_codes, normalize_extra

__all__ = [
    "RestCountriesClient",
    "RestCountriesError",
    "UnsupportedDataTypeError",
    "InvalidArgumentError",
    "Country",
    "Region",
    "RegionalBloc",
    "validate_country_data",
    "validate_country_list",
    "normalize_codes",
    "normalize_extra",
]

__version__ = "1.0.0"
