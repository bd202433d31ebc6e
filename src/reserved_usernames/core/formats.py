from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable

from .errors import InvalidArgumentError, UnsupportedFormatError


CSV_HEADER = "name"


class NameFormat(str, Enum):
    """Textual encodings accepted by import/export.

    `array` is the native encoding: a plain Python list of strings.
    """

    JSON = "json"
    CSV = "csv"
    TXT = "txt"
    ARRAY = "array"

    @classmethod
    def from_any(cls, value: Any) -> "NameFormat":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedFormatError(value)
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnsupportedFormatError(value) from None


def encode_names(names: list[str], fmt: str | NameFormat = NameFormat.JSON) -> str | list[str]:
    f = NameFormat.from_any(fmt)
    if f is NameFormat.JSON:
        return json.dumps(names, indent=2)
    if f is NameFormat.CSV:
        return "\n".join([CSV_HEADER, *names])
    if f is NameFormat.TXT:
        return "\n".join(names)
    return list(names)


def _split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines()]


def _require_str_items(items: Iterable[Any], *, source: str) -> list[str]:
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise InvalidArgumentError(f"{source} entries must be strings, got {type(item).__name__}")
        out.append(item)
    return out


def decode_names(data: Any, fmt: str | NameFormat = NameFormat.ARRAY) -> list[str]:
    """Parse `data` in the given encoding into a list of names.

    - json: a JSON array of strings
    - csv: a header line followed by one bare value per line
    - txt: one bare value per line
    - array: any list/tuple of strings

    Blank csv/txt lines are dropped. Names are returned as-is (no case normalization).
    """

    f = NameFormat.from_any(fmt)

    if f is NameFormat.ARRAY:
        if not isinstance(data, (list, tuple)):
            raise InvalidArgumentError(f"array import expects a list of names, got {type(data).__name__}")
        return _require_str_items(data, source="array")

    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if not isinstance(data, str):
        raise InvalidArgumentError(f"{f.value} import expects text, got {type(data).__name__}")

    if f is NameFormat.JSON:
        try:
            parsed = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Invalid JSON payload: {e}") from e
        if not isinstance(parsed, list):
            raise InvalidArgumentError("JSON payload must be an array of names")
        return _require_str_items(parsed, source="JSON")

    lines = _split_lines(data)
    if f is NameFormat.CSV:
        lines = lines[1:]
    return [line for line in lines if line]
