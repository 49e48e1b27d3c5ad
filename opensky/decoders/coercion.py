"""Coercions from generic JSON values into integers."""

from __future__ import annotations

from typing import Any

from opensky.errors import TypeMismatchError


def _is_json_number(value: Any) -> bool:
    # bool subclasses int but is a JSON literal of its own
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_number_to_int(value: Any) -> int:
    """Convert a number received in a JSON document to an ``int``.

    Fractional values are truncated toward zero. Anything that is not a JSON
    number raises :class:`TypeMismatchError`.
    """

    if not _is_json_number(value):
        raise TypeMismatchError(value, expected="number")
    try:
        return int(value)
    except (ValueError, OverflowError) as exc:
        # NaN and infinity parse as floats but have no integer value
        raise TypeMismatchError(value, expected="number") from exc


def json_number_array_to_int_array(value: Any) -> list[int]:
    """Convert a JSON array of numbers to a list of ``int``.

    Each element is truncated toward zero. The value must be a list whose
    elements are all numbers; ``None`` is not accepted.
    """

    if not isinstance(value, list):
        raise TypeMismatchError(value, expected="number array")
    try:
        return [json_number_to_int(v) for v in value]
    except TypeMismatchError as exc:
        raise TypeMismatchError(value, expected="number array") from exc


__all__ = ["json_number_to_int", "json_number_array_to_int_array"]
