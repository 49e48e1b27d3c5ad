"""Exception types raised by the OpenSky client."""

from __future__ import annotations

from typing import Any


class OpenSkyError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(OpenSkyError, ValueError):
    """A response value could not be decoded into a typed record."""

    def __init__(self, message: str, *, index: int | None = None):
        super().__init__(message)
        self.index = index


class ShapeError(DecodeError):
    """A positional state record is not an array or is too short."""

    def __init__(self, actual: int | None, expected: int, *, index: int | None = None):
        if actual is None:
            detail = f"expected an array of {expected} values"
        else:
            detail = f"response contains {actual} values, expected {expected}"
        super().__init__(f"invalid state object at position {index}: {detail}", index=index)
        self.actual = actual
        self.expected = expected


class TypeMismatchError(DecodeError):
    """A decoded value does not have the type required for its field."""

    def __init__(
        self,
        value: Any,
        *,
        field: str | None = None,
        index: int | None = None,
        expected: str | None = None,
    ):
        if field is None:
            message = f"couldn't parse {value!r} as {expected or 'expected type'}"
        else:
            message = f"invalid {field} value at position {index}: {value!r}"
        super().__init__(message, index=index)
        self.value = value
        self.field = field
        self.expected = expected


TypeMismatch = TypeMismatchError


class FormatError(DecodeError):
    """A timestamp literal is not an integer number of seconds."""

    def __init__(self, value: Any):
        super().__init__(f"couldn't parse {value!r} as unix timestamp")
        self.value = value


class OpenSkyAPIError(OpenSkyError, RuntimeError):
    """The OpenSky service could not be reached or answered unusably."""


class OpenSkyHTTPError(OpenSkyAPIError):
    """The service answered with a status code other than 200."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"{status_code}: {body}")
        self.status_code = status_code
        self.body = body


class OpenSkyResponseError(OpenSkyAPIError):
    """The response body is not JSON or does not have the expected shape."""


__all__ = [
    "DecodeError",
    "FormatError",
    "OpenSkyAPIError",
    "OpenSkyError",
    "OpenSkyHTTPError",
    "OpenSkyResponseError",
    "ShapeError",
    "TypeMismatch",
    "TypeMismatchError",
]
