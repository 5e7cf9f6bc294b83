## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfname — Left-to-right, longest-first scan of a name format string.
#

from typing import Iterator

from .types import Match, Name
from .tokens import TOKENS, TOKENS_BY_LENGTH, SEPARATORS


def _match_word(fmt: str, pos: int) -> tuple[str, str] | None:
    """Mixed-case spellings of the multi-letter tokens LAST and MIDDLE."""
    if len(word := fmt[pos:pos+4]) == 4 and word.lower() == 'last':
        return word, 'LAST'
    if len(word := fmt[pos:pos+6]) == 6 and word.lower() == 'middle':
        # Only the all-caps spelling uppercases, other casings keep the name as-is.
        return word, 'MIDDLE' if word == 'MIDDLE' else 'M'
    return None


def scan(fmt: str) -> Iterator[Match]:
    pos = 0
    while pos < len(fmt):
        if (found := _match_word(fmt, pos)) is not None:
            text, token = found
            yield Match(pos, text, token, 'token')
            pos += len(text)
            continue

        spelling = next((s for s in TOKENS_BY_LENGTH if fmt.startswith(s, pos)), None)
        if spelling is not None:
            yield Match(pos, spelling, spelling, 'token')
            pos += len(spelling)
            continue

        char = fmt[pos]
        yield Match(pos, char, None, 'literal' if char in SEPARATORS else 'dropped')
        pos += 1


def render(match: Match, name: Name) -> str:
    if match.kind == 'token': return TOKENS[match.token](name)
    if match.kind == 'literal': return match.text
    return ''


def substitute(name: Name, fmt: str) -> str:
    return ''.join(render(m, name) for m in scan(fmt))
