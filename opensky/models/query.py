"""Query filters for the OpenSky API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoundingBox:
    """Bounding box of WGS-84 coordinates in decimal degrees."""

    lat_min: float
    lon_min: float
    lat_max: float
    lon_max: float

    def to_params(self) -> dict[str, float]:
        return {
            "lamin": self.lat_min,
            "lomin": self.lon_min,
            "lamax": self.lat_max,
            "lomax": self.lon_max,
        }


__all__ = ["BoundingBox"]
