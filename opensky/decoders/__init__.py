"""Decoders for the loosely typed values found in OpenSky responses."""

from .coercion import json_number_array_to_int_array, json_number_to_int
from .timestamps import UnixTime, decode_unix_time, new_unix_time

__all__ = [
    "UnixTime",
    "decode_unix_time",
    "json_number_array_to_int_array",
    "json_number_to_int",
    "new_unix_time",
]
