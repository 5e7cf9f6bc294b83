## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Literal, NamedTuple
from collections.abc import Mapping
from dataclasses import dataclass


def _text(value: Any) -> str:
    # Absent, None and empty string all contribute nothing.
    if value is None: return ''
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Name:
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None

    @property
    def first(self) -> str: return _text(self.first_name)

    @property
    def middle(self) -> str: return _text(self.middle_name)

    @property
    def last(self) -> str: return _text(self.last_name)


@dataclass(frozen=True)
class FormatOptions(Name):
    format: str | None = None

    @property
    def name(self) -> Name:
        return Name(self.first_name, self.middle_name, self.last_name)


# Accept both the camelCase record shape and Python keyword spelling.
_FIELD_KEYS = {
    'first_name': ('first_name', 'firstName'),
    'middle_name': ('middle_name', 'middleName'),
    'last_name': ('last_name', 'lastName'),
}

def _lookup(data: Mapping, keys: tuple[str, ...]):
    for key in keys:
        if key in data: return data[key]
    return None

def to_options(value: Any) -> FormatOptions | None:
    """Coerce `FormatOptions`, `Name`, a mapping or `None` into format options."""
    if value is None or isinstance(value, FormatOptions):
        return value
    if isinstance(value, Name):
        return FormatOptions(value.first_name, value.middle_name, value.last_name)
    if isinstance(value, Mapping):
        fields = {f: _lookup(value, keys) for f, keys in _FIELD_KEYS.items()}
        return FormatOptions(**fields, format=value.get('format'))
    raise TypeError(f"Expected a name record or mapping, got `{type(value).__name__}`.")


class Match(NamedTuple):
    """One step of a format scan, from `start` covering `text`."""
    start: int
    text: str
    token: str | None
    kind: Literal['token', 'literal', 'dropped']

    @property
    def end(self) -> int:
        return self.start + len(self.text)
