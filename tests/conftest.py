# Pytest configuration and fixtures
# Provides an offline recording transport, client setup and CSV request scenarios

import csv
import json
import logging
from http import HTTPStatus
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import pytest
import requests
from pydantic import BaseModel, Field, ValidationError, field_validator
from requests.adapters import BaseAdapter

from restcountries_client import RestCountriesClient


# Configure logging for test fixtures
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class RecordingAdapter(BaseAdapter):
    # Transport adapter that records every prepared request and replies with canned responses

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.send_kwargs: List[Dict[str, Any]] = []
        self.responses: List[tuple] = []
        self.default_response = (200, [])
        self.error: Optional[Exception] = None

    def queue(self, status: int = 200, body: Any = None):
        # Queue a response for the next request
        self.responses.append((status, [] if body is None else body))

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error

        status, body = self.responses.pop(0) if self.responses else self.default_response
        response = requests.Response()
        response.status_code = status
        response.reason = HTTPStatus(status).phrase
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def transport() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def session(transport: RecordingAdapter) -> Iterator[requests.Session]:
    # Session routed entirely through the recording adapter
    http_session = requests.Session()
    http_session.mount("https://", transport)
    http_session.mount("http://", transport)
    yield http_session
    http_session.close()


@pytest.fixture
def api_client(session: requests.Session) -> Iterator[RestCountriesClient]:
    client = RestCountriesClient(session=session)
    yield client
    client.close()


@pytest.fixture(scope="session")
def live_client() -> Iterator[RestCountriesClient]:
    # Session-scoped client against the real service
    client = RestCountriesClient()
    logger.info("Live API client created for test session")
    yield client
    client.close()
    logger.info("Live API client closed after test session")


class RequestScenario(BaseModel):
    # One row of tests/data/request_scenarios.csv
    scenario_id: str = Field(..., description="Unique scenario identifier")
    operation: str = Field(..., description="Client operation to call")
    argument: str = Field("", description="Lookup argument, '|' separates list items")
    full_text: bool = Field(False, description="fullText flag for name lookups")
    field_filter: str = Field("", description="Field filter, '|' separates items")
    expected_path: str = Field(..., description="Request path relative to the base URL")
    expected_query: str = Field("", description="Encoded query string")
    tags: Optional[str] = Field(None, description="Comma-separated tags")

    @field_validator('full_text', mode='before')
    @classmethod
    def parse_flag(cls, v):
        return str(v).strip().lower() == "true"

    @field_validator('operation')
    @classmethod
    def validate_operation(cls, v):
        valid_operations = {
            'all', 'name', 'alpha', 'codes', 'currency', 'lang',
            'capital', 'callingcode', 'region', 'regionalbloc'
        }
        if v not in valid_operations:
            raise ValueError(f'Operation must be one of: {valid_operations}')
        return v

    @property
    def request_extra(self) -> Optional[Dict[str, Any]]:
        return {"fields": self.field_filter.split("|")} if self.field_filter else None


@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def request_scenarios(test_data_dir: Path) -> List[RequestScenario]:
    # Load and validate request scenarios from CSV
    scenarios_file = test_data_dir / "request_scenarios.csv"
    scenarios = []

    with open(scenarios_file, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row_num, row in enumerate(reader, start=2):  # Start at 2 for header
            try:
                scenarios.append(RequestScenario(**row))
            except ValidationError as e:
                pytest.fail(f"Invalid request scenario at row {row_num}: {e}")

    logger.info(f"Loaded {len(scenarios)} request scenarios from CSV")
    return scenarios
