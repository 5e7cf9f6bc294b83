## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfname — Format personal names with a tiny token language, e.g. "L, F M" or "I.J.K.".
#

import sys
from typing import Iterator

from .types import FormatOptions, Match, Name, to_options
from .errors import UnknownTokenError
from .tokens import TOKENS, get_token_meta
from .defaults import DefaultFormat
from .scanner import scan as _scan, render, substitute
from .formatting import show_scan


class Formatter:
    """Name formatting facade over a token scanner and an injected default-format store."""

    def __init__(self, defaults: DefaultFormat | None = None):
        self.defaults = defaults or DefaultFormat()

    # Configuration ───────────────────────────────────────────────────────────────────────────
    def set_default_format(self, value: str) -> None:
        self.defaults.set(value)

    def get_default_format(self) -> str:
        return self.defaults.get()

    # Formatting ──────────────────────────────────────────────────────────────────────────────
    def resolve_format(self, options: FormatOptions, format: str | None = None) -> str:
        # An explicit argument wins even when empty, an empty options format falls back.
        if format is not None: return format
        # Snapshot the default once so a concurrent change can't affect this call half-way.
        return options.format or self.defaults.get()

    def format_name(self, options: FormatOptions | Name | dict | None = None, format: str | None = None,
                    verbosity: int = 0) -> str:
        if (opts := to_options(options)) is None:
            return ''
        if not (fmt := self.resolve_format(opts, format)):
            return ''

        name = opts.name
        if verbosity > 0:
            steps = [(m, render(m, name)) for m in _scan(fmt)]
            show_scan(fmt, steps, file=sys.stderr)
            return ''.join(out for _, out in steps)
        return substitute(name, fmt)

    # Validation ──────────────────────────────────────────────────────────────────────────────
    def unknown_characters(self, format: str) -> list[Match]:
        return [m for m in _scan(format) if m.kind == 'dropped']

    def check_format(self, format: str) -> None:
        if dropped := self.unknown_characters(format):
            m = dropped[0]
            raise UnknownTokenError(f"Character `{m.text}` at position {m.start} is not a token or separator.",
                                    format=format, position=m.start, char=m.text)

    # Introspection ───────────────────────────────────────────────────────────────────────────
    def scan(self, format: str) -> Iterator[Match]:
        return _scan(format)

    def list_tokens(self) -> dict[str, dict]:
        return {s: dict(get_token_meta(s)) for s in TOKENS}
