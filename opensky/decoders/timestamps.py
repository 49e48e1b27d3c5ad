"""Unix timestamp handling for OpenSky payloads."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from opensky.errors import FormatError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def new_unix_time(seconds: int) -> datetime:
    """Return the UTC point in time ``seconds`` after the epoch."""

    return EPOCH + timedelta(seconds=seconds)


def decode_unix_time(value: Any) -> datetime:
    """Decode a JSON timestamp literal.

    Integers are seconds since the epoch (negative values are allowed). A JSON
    null decodes to the epoch itself, so callers that need to tell "absent"
    apart from "1970-01-01" have to check for ``None`` before calling.
    """

    if value is None:
        return EPOCH
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(value)
    try:
        return new_unix_time(value)
    except OverflowError as exc:
        raise FormatError(value) from exc


def unix_seconds(value: datetime) -> int:
    """Return whole seconds since the epoch for ``value``."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(seconds=1)


UnixTime = Annotated[
    datetime,
    BeforeValidator(decode_unix_time),
    PlainSerializer(unix_seconds, return_type=int, when_used="json"),
]


__all__ = ["EPOCH", "UnixTime", "decode_unix_time", "new_unix_time", "unix_seconds"]
