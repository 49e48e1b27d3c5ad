"""Client library for the OpenSky Network REST API."""

from .client import OpenSkyClient
from .decoders.coercion import json_number_array_to_int_array, json_number_to_int
from .decoders.states import parse_state, parse_states_response
from .decoders.timestamps import UnixTime, decode_unix_time, new_unix_time
from .errors import (
    DecodeError,
    FormatError,
    OpenSkyAPIError,
    OpenSkyError,
    OpenSkyHTTPError,
    OpenSkyResponseError,
    ShapeError,
    TypeMismatch,
    TypeMismatchError,
)
from .models import BoundingBox, Flight, PositionSource, RawStatesResponse, State, StatesResponse

__all__ = [
    "BoundingBox",
    "DecodeError",
    "Flight",
    "FormatError",
    "OpenSkyAPIError",
    "OpenSkyClient",
    "OpenSkyError",
    "OpenSkyHTTPError",
    "OpenSkyResponseError",
    "PositionSource",
    "RawStatesResponse",
    "ShapeError",
    "State",
    "StatesResponse",
    "TypeMismatch",
    "TypeMismatchError",
    "UnixTime",
    "decode_unix_time",
    "json_number_array_to_int_array",
    "json_number_to_int",
    "new_unix_time",
    "parse_state",
    "parse_states_response",
]
