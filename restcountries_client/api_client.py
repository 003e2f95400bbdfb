# REST Countries API Client Wrapper

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Union
import requests

from .models import Region, RegionalBloc
from .exceptions import InvalidArgumentError
from .params import (
    CodesValue,
    calling_code_segment,
    normalize_codes,
    normalize_extra,
    path_segment,
)

logger = logging.getLogger(__name__)

Extra = Optional[Mapping[str, Any]]


class RestCountriesClient:
    # Client wrapper for REST Countries API (v2 endpoints)

    BASE_URL = "https://restcountries.com/v2"
    SUCCESS_STATUS = 200
    DEFAULT_HEADERS = {
        'User-Agent': 'restcountries-client/1.0',
        'Accept': 'application/json'
    }

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30,
                 session: Optional[requests.Session] = None):
        # base_url: Override for the API root, BASE_URL is used when empty
        # timeout: Request timeout in seconds
        # session: Transport to use; a private session is created when None
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.update(self.DEFAULT_HEADERS)
        self.session = session

    def _check_status(self, response: requests.Response) -> None:
        # Only 200 counts as success; 204, 3xx and every error status fail
        if response.status_code != self.SUCCESS_STATUS:
            raise requests.exceptions.HTTPError(
                f"{response.status_code} Error: {response.reason} for url: {response.url}",
                response=response
            )

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        # Make HTTP GET request to REST Countries API
        # endpoint: API endpoint path
        # params: Query parameters
        # Returns: Decoded JSON body
        # Raises: requests.RequestException if request fails
        url = f"{self.base_url}/{endpoint}"
        start_time = time.time()

        try:
            logger.info(f"Making request to: {url}")
            if params:
                logger.info(f"Request parameters: {params}")

            response = self.session.get(
                url,
                params=params or None,
                timeout=self.timeout
            )

            response_time = time.time() - start_time
            logger.info(f"Response received in {response_time:.3f}s - Status: {response.status_code}")

            self._check_status(response)
            return response.json()

        except requests.exceptions.RequestException as e:
            response_time = time.time() - start_time
            logger.error(f"Request failed after {response_time:.3f}s: {str(e)}")
            raise

    def get_all_countries(self, extra: Extra = None) -> List[Dict[str, Any]]:
        # Get all countries
        # extra: {"fields": ["name", "capital", "currencies"]} limits the payload
        return self._make_request("all", normalize_extra(extra))

    def get_country_by_name(self, name: str, full_text: bool = False,
                            extra: Extra = None) -> List[Dict[str, Any]]:
        # Search by country name, native or partial
        # full_text: Match the full country name only, sent only when exactly True
        segment = path_segment(name, "name")
        if not segment:
            raise InvalidArgumentError("name must not be empty")
        params = {"fullText": "true"} if full_text is True else {}
        params.update(normalize_extra(extra))
        return self._make_request(f"name/{segment}", params)

    def get_country_by_code(self, code: str, extra: Extra = None) -> Dict[str, Any]:
        # Get country by ISO 3166-1 alpha code (e.g., 'CO', 'COL')
        return self._make_request(f"alpha/{path_segment(code, 'code')}", normalize_extra(extra))

    def get_countries_by_codes(self, codes: CodesValue, extra: Extra = None) -> List[Dict[str, Any]]:
        # Get several countries at once
        # codes: "co;no;ee" or ["CO", "NO", "EE"]
        params = {"codes": normalize_codes(codes)}
        params.update(normalize_extra(extra))
        return self._make_request("alpha", params)

    def get_countries_by_currency(self, currency: str, extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by ISO 4217 currency code (e.g., 'COP', 'EUR')
        return self._make_request(f"currency/{path_segment(currency, 'currency')}", normalize_extra(extra))

    def get_countries_by_language(self, language: str, extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by ISO 639-1 language code (e.g., 'es', 'et')
        return self._make_request(f"lang/{path_segment(language, 'language')}", normalize_extra(extra))

    def get_countries_by_capital(self, capital: str, extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by capital city
        return self._make_request(f"capital/{path_segment(capital, 'capital')}", normalize_extra(extra))

    def get_countries_by_calling_code(self, calling_code: Union[str, int],
                                      extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by calling code (e.g., 372 or '57')
        return self._make_request(f"callingcode/{calling_code_segment(calling_code)}", normalize_extra(extra))

    def get_countries_by_region(self, region: Union[str, Region], extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by region: africa, americas, asia, europe, oceania
        # The value is sent as-is (lower-cased); the server decides if it exists
        return self._make_request(f"region/{path_segment(region, 'region')}", normalize_extra(extra))

    def get_countries_by_regional_bloc(self, regional_bloc: Union[str, RegionalBloc],
                                       extra: Extra = None) -> List[Dict[str, Any]]:
        # Get countries by regional bloc acronym (e.g., 'EU', RegionalBloc.ASEAN)
        segment = path_segment(regional_bloc, "regional_bloc")
        return self._make_request(f"regionalbloc/{segment}", normalize_extra(extra))

    def close(self):
        # Close the session if this client created it
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        # Context manager entry
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Context manager exit
        self.close()
