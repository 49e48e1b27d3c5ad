"""Pydantic models for OpenSky API responses."""

from .flight import Flight
from .query import BoundingBox
from .state import PositionSource, RawStatesResponse, State, StatesResponse

__all__ = [
    "BoundingBox",
    "Flight",
    "PositionSource",
    "RawStatesResponse",
    "State",
    "StatesResponse",
]
