"""Line-by-line decoding of newline-delimited Person export files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from errors import InputFileError, RecordDecodeError
from models import Identifier, Person

LOGGER = logging.getLogger(__name__)


def read_persons(path: str) -> Iterator[tuple[int, Person]]:
    """Yield (line_number, Person) for every non-blank line of ``path``.

    Decoding is strict: the first malformed line raises RecordDecodeError and
    nothing after it is read.
    """
    try:
        handle = open(path, encoding="utf-8-sig")
    except OSError as exc:
        raise InputFileError(path, exc) from exc

    with handle:
        line_number = 0
        while True:
            try:
                line = handle.readline()
            except (OSError, UnicodeDecodeError) as exc:
                raise InputFileError(path, exc) from exc
            if not line:
                return

            line_number += 1
            if not line.strip():
                continue

            LOGGER.debug("%s: line %s", path, line_number)
            try:
                person = parse_person(line)
            except ValueError as exc:
                raise RecordDecodeError(path, line_number, exc) from exc
            yield line_number, person


def parse_person(line: str) -> Person:
    """Decode one JSON line into a Person; unknown fields are ignored."""
    payload = json.loads(line)
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

    raw_identifiers = payload.get("identifier") or []
    if not isinstance(raw_identifiers, list):
        raise ValueError("'identifier' must be a list")

    return Person(
        family_name=_as_str(payload, "family_name"),
        given_name=_as_str(payload, "given_name"),
        person_id=_as_str(payload, "__id__"),
        identifiers=tuple(_parse_identifier(item) for item in raw_identifiers),
    )


def _parse_identifier(item: Any) -> Identifier:
    if not isinstance(item, dict):
        raise ValueError(f"identifier entry must be an object, got {type(item).__name__}")
    return Identifier(scheme=_as_str(item, "scheme"), value=_as_str(item, "value"))


def _as_str(block: dict[str, Any], key: str) -> str:
    value = block.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value
