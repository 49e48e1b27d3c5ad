"""Decoding of positional state vectors from the OpenSky ``/states`` endpoints.

Each aircraft state is delivered as a JSON array rather than an object:

    0 icao24          6 latitude        12 sensors
    1 callsign        7 baro_altitude   13 geo_altitude
    2 origin_country  8 on_ground       14 squawk
    3 time_position   9 velocity        15 spi
    4 last_contact   10 true_track      16 position_source
    5 longitude      11 vertical_rate

Fields are validated with one of three policies. Required fields must have the
right type. Identity-like optional fields (callsign, time_position, sensors,
squawk) may be null but must have the right type when present. Measurement
fields (position, altitudes, velocity, track, vertical rate) are dropped to
``None`` when they are not numbers, since the feed routinely omits them.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Mapping, Optional, Sequence, Union

from opensky.decoders.coercion import json_number_array_to_int_array, json_number_to_int
from opensky.decoders.timestamps import new_unix_time
from opensky.errors import FormatError, ShapeError, TypeMismatchError
from opensky.models.state import (
    PositionSource,
    RawStatesResponse,
    State,
    StatesResponse,
    to_position_source,
)

logger = logging.getLogger("opensky.decoders.states")

STATE_FIELD_COUNT = 17


def _required_str(fields: Sequence[Any], pos: int, name: str, index: int) -> str:
    value = fields[pos]
    if not isinstance(value, str):
        raise TypeMismatchError(value, field=name, index=index)
    return value


def _optional_str(fields: Sequence[Any], pos: int, name: str, index: int) -> Optional[str]:
    value = fields[pos]
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeMismatchError(value, field=name, index=index)
    return value


def _required_bool(fields: Sequence[Any], pos: int, name: str, index: int) -> bool:
    value = fields[pos]
    if not isinstance(value, bool):
        raise TypeMismatchError(value, field=name, index=index)
    return value


def _required_int(fields: Sequence[Any], pos: int, name: str, index: int) -> int:
    value = fields[pos]
    try:
        return json_number_to_int(value)
    except TypeMismatchError as exc:
        raise TypeMismatchError(value, field=name, index=index) from exc


def _required_time(fields: Sequence[Any], pos: int, name: str, index: int) -> datetime:
    seconds = _required_int(fields, pos, name, index)
    try:
        return new_unix_time(seconds)
    except OverflowError as exc:
        raise TypeMismatchError(fields[pos], field=name, index=index) from exc


def _permissive_float(fields: Sequence[Any], pos: int, name: str, index: int) -> Optional[float]:
    value = fields[pos]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        if value is not None:
            logger.debug("Dropping non-numeric %s at position %d: %r", name, index, value)
        return None
    return float(value)


def parse_state(fields: Sequence[Any], index: int) -> State:
    """Parse a single positional state array.

    ``index`` is the position of the array inside the response and is only
    used to attribute errors. Raises :class:`ShapeError` when ``fields`` is
    not an array or holds fewer than 17 values, and :class:`TypeMismatchError`
    when a required or validated optional field has the wrong type or a
    timestamp lies outside the representable date range.
    """

    if not isinstance(fields, (list, tuple)):
        raise ShapeError(None, STATE_FIELD_COUNT, index=index)
    if len(fields) < STATE_FIELD_COUNT:
        raise ShapeError(len(fields), STATE_FIELD_COUNT, index=index)

    icao24 = _required_str(fields, 0, "icao24", index)
    callsign = _optional_str(fields, 1, "callsign", index)
    origin_country = _required_str(fields, 2, "origin_country", index)

    time_position = None
    if fields[3] is not None:
        time_position = _required_time(fields, 3, "time_position", index)
    last_contact = _required_time(fields, 4, "last_contact", index)

    longitude = _permissive_float(fields, 5, "longitude", index)
    latitude = _permissive_float(fields, 6, "latitude", index)
    baro_altitude = _permissive_float(fields, 7, "baro_altitude", index)
    on_ground = _required_bool(fields, 8, "on_ground", index)
    velocity = _permissive_float(fields, 9, "velocity", index)
    heading = _permissive_float(fields, 10, "true_track", index)
    vertical_rate = _permissive_float(fields, 11, "vertical_rate", index)

    sensors = None
    if fields[12] is not None:
        try:
            sensors = json_number_array_to_int_array(fields[12])
        except TypeMismatchError as exc:
            raise TypeMismatchError(fields[12], field="sensors", index=index) from exc

    geo_altitude = _permissive_float(fields, 13, "geo_altitude", index)
    squawk = _optional_str(fields, 14, "squawk", index)
    spi = _required_bool(fields, 15, "spi", index)

    position_source = to_position_source(_required_int(fields, 16, "position_source", index))
    if not isinstance(position_source, PositionSource):
        logger.debug(
            "Unknown position_source %d for %s at position %d", position_source, icao24, index
        )

    return State(
        icao24=icao24,
        callsign=callsign,
        origin_country=origin_country,
        time_position=time_position,
        last_contact=last_contact,
        longitude=longitude,
        latitude=latitude,
        baro_altitude=baro_altitude,
        on_ground=on_ground,
        velocity=velocity,
        heading=heading,
        vertical_rate=vertical_rate,
        sensors=sensors,
        geo_altitude=geo_altitude,
        squawk=squawk,
        spi=spi,
        position_source=position_source,
    )


def parse_states_response(
    raw: Union[RawStatesResponse, Mapping[str, Any]],
) -> StatesResponse:
    """Decode a ``/states`` envelope into a :class:`StatesResponse`.

    Records are decoded in order. The first record that fails aborts the
    whole batch and its error is raised; no partial list is returned.
    """

    if not isinstance(raw, RawStatesResponse):
        raw = RawStatesResponse.model_validate(raw)

    states = [parse_state(fields, i) for i, fields in enumerate(raw.states)]
    try:
        captured = new_unix_time(raw.time)
    except OverflowError as exc:
        raise FormatError(raw.time) from exc

    logger.debug("Decoded %d state vectors captured at %d", len(states), raw.time)
    return StatesResponse(time=captured, states=states)


__all__ = ["STATE_FIELD_COUNT", "parse_state", "parse_states_response"]
