# Query parameter normalization for REST Countries requests
# Converts field filters and code lists into the semicolon-delimited wire format

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union, Sequence

from requests.utils import quote

from .exceptions import InvalidArgumentError, UnsupportedDataTypeError

SEPARATOR = ";"

CodesValue = Union[str, Sequence[str]]


def _join_texts(values, name: str) -> str:
    # Join a list/tuple of text values, rejecting anything else inside it
    for value in values:
        if not isinstance(value, str):
            raise UnsupportedDataTypeError(name, value)
    return SEPARATOR.join(values)


def normalize_extra(extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    # Normalize the optional request modifiers into query parameters
    # Only list/tuple field filters are accepted; a bare string is rejected
    # Returns a new dict, the caller's mapping is left as it was
    if extra is None:
        return {}
    if not isinstance(extra, Mapping):
        raise UnsupportedDataTypeError("extra", extra)

    params = dict(extra)
    if "fields" in params:
        fields = params["fields"]
        if not isinstance(fields, (list, tuple)):
            raise UnsupportedDataTypeError("fields", fields)
        params["fields"] = _join_texts(fields, "fields").lower()
    return params


def normalize_codes(codes: CodesValue) -> str:
    # Normalize a code list ("CO;NO" or ["CO", "NO"]) into "co;no"
    if isinstance(codes, str):
        joined = codes
    elif isinstance(codes, (list, tuple)):
        joined = _join_texts(codes, "codes")
    else:
        raise UnsupportedDataTypeError("codes", codes)

    if not joined:
        raise InvalidArgumentError("codes must not be empty")
    return joined.lower()


def path_segment(value: Union[str, Enum], name: str) -> str:
    # Lower-cased path segment for text lookups (code, currency, region, ...)
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        raise UnsupportedDataTypeError(name, value)
    return quote(value.lower(), safe="")


def calling_code_segment(value: Union[str, int]) -> str:
    # Calling codes are numeric, so they go into the path verbatim (escaped only)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise UnsupportedDataTypeError("calling_code", value)
    return quote(str(value), safe="")
