"""Models for aircraft state vectors returned by the OpenSky API."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from opensky.decoders.timestamps import UnixTime


class PositionSource(IntEnum):
    """Origin of a state's position."""

    ADSB = 0
    ASTERIX = 1
    MLAT = 2
    FLARM = 3


def to_position_source(code: int) -> Union[PositionSource, int]:
    """Return the matching :class:`PositionSource`, or ``code`` if unknown."""

    try:
        return PositionSource(code)
    except ValueError:
        return code


class State(BaseModel):
    """State of an aircraft at a particular time.

    Optional fields are ``None`` when the service reported no data for them.
    """

    icao24: str = Field(..., description="ICAO24 transponder address as hex string")
    callsign: Optional[str] = Field(
        default=None, description="Callsign, None if none has been received"
    )
    origin_country: str = Field(..., description="Country inferred from the ICAO24 address")
    time_position: Optional[UnixTime] = Field(
        default=None,
        description="Time of the last position report, None if older than 15s",
    )
    last_contact: UnixTime = Field(
        ..., description="Time of the last message received from the transponder"
    )
    longitude: Optional[float] = Field(default=None, description="WGS-84 longitude in degrees")
    latitude: Optional[float] = Field(default=None, description="WGS-84 latitude in degrees")
    baro_altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in meters"
    )
    on_ground: bool = Field(..., description="True if sending surface position reports")
    velocity: Optional[float] = Field(default=None, description="Velocity over ground in m/s")
    heading: Optional[float] = Field(
        default=None, description="True track in decimal degrees, 0 is north"
    )
    vertical_rate: Optional[float] = Field(
        default=None, description="Vertical rate in m/s, positive when climbing"
    )
    sensors: Optional[list[int]] = Field(
        default=None,
        description="Serial numbers of the receivers that contributed to this state",
    )
    geo_altitude: Optional[float] = Field(default=None, description="Geometric altitude in meters")
    squawk: Optional[str] = Field(default=None, description="Transponder code")
    spi: bool = Field(..., description="Special purpose indicator")
    position_source: int = Field(..., description="Origin of this state's position")

    model_config = ConfigDict(frozen=True)

    @field_validator("position_source")
    @classmethod
    def _known_position_source(cls, value: int) -> Union[PositionSource, int]:
        return to_position_source(value)


class RawStatesResponse(BaseModel):
    """Undecoded ``/states`` envelope: capture time plus positional arrays."""

    time: int = Field(
        ..., strict=True, description="Capture time in seconds since the epoch"
    )
    states: list[Any] = Field(
        default_factory=list, description="One positional array per aircraft"
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("states", mode="before")
    @classmethod
    def _null_states(cls, value: Any) -> Any:
        # the service sends null when no aircraft match the query
        return [] if value is None else value


class StatesResponse(BaseModel):
    """Decoded state vectors together with their capture time."""

    time: datetime
    states: list[State] = Field(default_factory=list)


__all__ = [
    "PositionSource",
    "RawStatesResponse",
    "State",
    "StatesResponse",
    "to_position_source",
]
