# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides helpers to read vendor JSON payloads."""
import json
import logging
from collections.abc import Sequence
from typing import TypeVar

from disco.errors import InvalidPayloadError, PayloadEntryError

JsonType = int | float | str | None | bool | list["JsonType"] | dict[str, "JsonType"]
T = TypeVar("T", bound=JsonType)

logger: logging.Logger = logging.getLogger(__name__)


def json_extract(entry: JsonType, keys: Sequence[str | int], type_: type[T]) -> T | None:
    """Return the value found by following the list of depth-sequential keys inside a JSON value.

    The value must be of the passed type. Vendor payloads are untrusted, so a missing key,
    an out of range index or a value of the wrong type results in ``None`` instead of an exception.

    Parameters
    ----------
    entry: JsonType
        An entry point into a JSON structure.
    keys: Sequence[str | int]
        The sequence of depth-sequential keys within the JSON. Can be dict keys or list indices.
    type_: type[T]
        The type to check the value against and return it as.

    Returns
    -------
    T | None:
        The found value as the type of the type parameter.
    """
    for key in keys:
        if isinstance(entry, dict) and isinstance(key, str):
            if key not in entry:
                logger.debug("JSON key '%s' not found in dict entry.", key)
                return None
            entry = entry[key]
        elif isinstance(entry, list) and isinstance(key, int):
            if key < 0 or key >= len(entry):
                logger.debug("JSON list index '%s' is outside of list bounds %s.", key, len(entry))
                return None
            entry = entry[key]
        else:
            logger.debug("Cannot index '%s' (type: %s) in entry (type: %s).", key, type(key), type(entry))
            return None

    # bool is a subclass of int, so an integer lookup must not accept JSON booleans.
    if type_ is int and isinstance(entry, bool):
        logger.debug("Found a boolean where an integer was expected.")
        return None

    if isinstance(entry, type_):
        return entry

    logger.debug("Found value of incorrect type: %s instead of %s.", type(entry), type_)
    return None


def json_require(entry: JsonType, keys: Sequence[str | int], type_: type[T]) -> T:
    """Return the value at ``keys`` or raise if it is missing.

    Raises
    ------
    PayloadEntryError
        If the value is missing or of the wrong type.
    """
    value = json_extract(entry, keys, type_)
    if value is None:
        raise PayloadEntryError(f"Missing or invalid field {'/'.join(str(key) for key in keys)}.")
    return value


def json_objects(payload: JsonType, keys: Sequence[str | int] = ()) -> list[dict]:
    """Return the JSON objects of the array found at ``keys``.

    A payload which is itself an array is accepted when ``keys`` is empty. Elements which are not
    objects are dropped.
    """
    array = json_extract(payload, keys, list) if keys else payload
    if not isinstance(array, list):
        return []
    return [element for element in array if isinstance(element, dict)]


def load_json_text(text: str) -> JsonType:
    """Decode a JSON document.

    Raises
    ------
    InvalidPayloadError
        If the text is not valid JSON.
    """
    try:
        return json.loads(text)  # type: ignore[no-any-return]
    except json.JSONDecodeError as error:
        raise InvalidPayloadError(f"The payload is not valid JSON: {error}") from error
