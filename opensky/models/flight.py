"""Models for flight records returned by the OpenSky ``/flights`` endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from opensky.decoders.timestamps import UnixTime


class Flight(BaseModel):
    """A single flight of an aircraft."""

    icao24: str = Field(..., description="ICAO24 transponder address as hex string")
    first_seen: UnixTime = Field(
        ..., alias="firstSeen", description="Estimated time of departure"
    )
    est_departure_airport: Optional[str] = Field(
        default=None,
        alias="estDepartureAirport",
        description="ICAO code of the estimated departure airport",
    )
    last_seen: UnixTime = Field(
        ..., alias="lastSeen", description="Estimated time of arrival"
    )
    est_arrival_airport: Optional[str] = Field(
        default=None,
        alias="estArrivalAirport",
        description="ICAO code of the estimated arrival airport",
    )
    callsign: Optional[str] = Field(default=None, description="Callsign of the vehicle")
    est_departure_airport_horiz_distance: int = Field(
        default=0,
        alias="estDepartureAirportHorizDistance",
        description="Horizontal distance in meters from the last airborne position to the departure airport",
    )
    est_departure_airport_vert_distance: int = Field(
        default=0,
        alias="estDepartureAirportVertDistance",
        description="Vertical distance in meters from the last airborne position to the departure airport",
    )
    est_arrival_airport_horiz_distance: int = Field(
        default=0,
        alias="estArrivalAirportHorizDistance",
        description="Horizontal distance in meters from the last airborne position to the arrival airport",
    )
    est_arrival_airport_vert_distance: int = Field(
        default=0,
        alias="estArrivalAirportVertDistance",
        description="Vertical distance in meters from the last airborne position to the arrival airport",
    )
    departure_airport_candidates_count: int = Field(
        default=0,
        alias="departureAirportCandidatesCount",
        description="Number of other airports close to the estimated departure airport",
    )
    arrival_airport_candidates_count: int = Field(
        default=0,
        alias="arrivalAirportCandidatesCount",
        description="Number of other airports close to the estimated arrival airport",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator(
        "est_departure_airport_horiz_distance",
        "est_departure_airport_vert_distance",
        "est_arrival_airport_horiz_distance",
        "est_arrival_airport_vert_distance",
        "departure_airport_candidates_count",
        "arrival_airport_candidates_count",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


__all__ = ["Flight"]
