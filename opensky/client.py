"""Async client for the OpenSky Network REST API."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Iterable, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from opensky.config import settings
from opensky.decoders.states import parse_states_response
from opensky.decoders.timestamps import unix_seconds
from opensky.errors import OpenSkyAPIError, OpenSkyHTTPError, OpenSkyResponseError
from opensky.models.flight import Flight
from opensky.models.query import BoundingBox
from opensky.models.state import RawStatesResponse, StatesResponse

logger = logging.getLogger("opensky.client")

TimeArg = Union[datetime, int, None]

_flights_adapter = TypeAdapter(list[Flight])


def _time_param(value: TimeArg) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return unix_seconds(value)
    return int(value)


def _join(values: Optional[Iterable[Any]]) -> Optional[str]:
    if values is None:
        return None
    return ",".join(str(v) for v in values) or None


class OpenSkyClient:
    """Fetch state vectors and flights from OpenSky.

    Username and password are optional; anonymous requests are subject to the
    service's stricter limits. Unset options fall back to
    :data:`opensky.config.settings`.
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.username = username if username is not None else settings.username
        self.password = password if password is not None else settings.password
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.transport = transport

    def _auth(self) -> httpx.BasicAuth | None:
        if self.username and self.password:
            return httpx.BasicAuth(self.username, self.password)
        return None

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        """GET ``path`` and return the parsed JSON body.

        Parameters whose value is ``None`` are left out of the query string.
        Any status other than 200 raises :class:`OpenSkyHTTPError`.
        """

        query = {key: value for key, value in params.items() if value is not None}
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, auth=self._auth()
            ) as client:
                response = await client.get(url, params=query)
        except httpx.TimeoutException as exc:
            logger.error("OpenSky request timed out: %s", exc)
            raise OpenSkyAPIError("OpenSky request timed out") from exc
        except httpx.RequestError as exc:
            logger.error("OpenSky request failed: %s", exc)
            raise OpenSkyAPIError("OpenSky request failed") from exc

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
        if response.status_code != 200:
            logger.error(
                "OpenSky returned error: path=%s status=%s body=%s",
                path,
                response.status_code,
                response.text,
            )
            raise OpenSkyHTTPError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Failed to parse OpenSky JSON response: %s", exc)
            raise OpenSkyResponseError("OpenSky response is not valid JSON") from exc

    async def _get_states(self, path: str, params: dict[str, Any]) -> StatesResponse:
        payload = await self._get_json(path, params)
        try:
            raw = RawStatesResponse.model_validate(payload)
        except ValidationError as exc:
            raise OpenSkyResponseError(f"Malformed states response: {exc}") from exc

        response = parse_states_response(raw)
        logger.debug("Fetched %s state vectors from %s", len(response.states), path)
        return response

    async def _get_flights(self, path: str, params: dict[str, Any]) -> list[Flight]:
        payload = await self._get_json(path, params)
        try:
            flights = _flights_adapter.validate_python(payload)
        except ValidationError as exc:
            raise OpenSkyResponseError(f"Malformed flights response: {exc}") from exc

        logger.debug("Fetched %s flights from %s", len(flights), path)
        return flights

    async def get_states(
        self,
        time: TimeArg = None,
        icao24: Optional[Iterable[str]] = None,
        bbox: Optional[BoundingBox] = None,
    ) -> StatesResponse:
        """Retrieve state vectors for all aircraft, or a filtered subset.

        ``time`` defaults to the current time on the server side. ``icao24``
        restricts the result to the given transponder addresses and ``bbox``
        to a geographic area.
        """

        params: dict[str, Any] = {"time": _time_param(time), "icao24": _join(icao24)}
        if bbox is not None:
            params.update(bbox.to_params())
        return await self._get_states("/states/all", params)

    async def get_own_states(
        self,
        time: TimeArg = None,
        icao24: Optional[Iterable[str]] = None,
        serials: Optional[Iterable[int]] = None,
    ) -> StatesResponse:
        """Retrieve state vectors seen by your own receivers.

        Requires credentials. ``serials`` limits the result to aircraft seen
        by at least one of the given receivers.
        """

        params = {
            "time": _time_param(time),
            "icao24": _join(icao24),
            "serials": _join(serials),
        }
        return await self._get_states("/states/own", params)

    async def get_flights(self, begin: TimeArg, end: TimeArg) -> list[Flight]:
        """Retrieve flights that departed and arrived within ``[begin, end]``.

        The service answers 404 when no flight matches, which surfaces as
        :class:`OpenSkyHTTPError`.
        """

        params = {"begin": _time_param(begin), "end": _time_param(end)}
        return await self._get_flights("/flights/all", params)

    async def get_flights_by_aircraft(
        self, icao24: str, begin: TimeArg, end: TimeArg
    ) -> list[Flight]:
        """Retrieve flights of one aircraft within ``[begin, end]``."""

        params = {
            "icao24": icao24 or None,
            "begin": _time_param(begin),
            "end": _time_param(end),
        }
        return await self._get_flights("/flights/aircraft", params)


__all__ = ["OpenSkyClient"]
