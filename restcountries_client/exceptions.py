# Exceptions raised by the REST Countries client before any request is sent
# Transport and HTTP status failures are left to requests' own exception types


class RestCountriesError(Exception):
    # Base class for errors raised by this library
    pass


class UnsupportedDataTypeError(RestCountriesError, TypeError):
    # Argument has a shape the API cannot accept (fields, codes, path values)

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"Unsupported data type: {name}={type(value).__name__}")


class InvalidArgumentError(RestCountriesError, ValueError):
    # Required argument is present but empty
    pass
