## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfname — Token table for the name format language, e.g. "L, F M" or "I.J.K."
#

from typing import Callable

from .types import Name


Derivation = Callable[[Name], str]

SEPARATORS = frozenset(' ,.')

_CASES: dict[str, Callable[[str], str]] = {
    'asis': lambda s: s,
    'lower': str.lower,
    'upper': str.upper,
}


def _part(field: str, case: str) -> Derivation:
    convert = _CASES[case]
    def derive(name: Name) -> str:
        return convert(getattr(name, field))
    derive.__token_meta__ = {'field': field, 'part': 'name', 'case': case}
    return derive

def _initial(field: str, case: str) -> Derivation:
    convert = _CASES[case]
    def derive(name: Name) -> str:
        value = getattr(name, field)
        return convert(value[0]) if value else ''
    derive.__token_meta__ = {'field': field, 'part': 'initial', 'case': case}
    return derive


TOKENS: dict[str, Derivation] = {
    # First name
    'F': _part('first', 'asis'),
    'f': _part('first', 'lower'),
    'FIRST': _part('first', 'upper'),
    # Last name
    'L': _part('last', 'asis'),
    'l': _part('last', 'lower'),
    'LAST': _part('last', 'upper'),
    # Middle name
    'M': _part('middle', 'asis'),
    'm': _part('middle', 'lower'),
    'MIDDLE': _part('middle', 'upper'),
    # Initials
    'I': _initial('first', 'upper'),
    'i': _initial('first', 'lower'),
    'J': _initial('middle', 'upper'),
    'j': _initial('middle', 'lower'),
    'K': _initial('last', 'upper'),
    'k': _initial('last', 'lower'),
}

# Longest spellings first; sorting is stable so table order breaks ties.
TOKENS_BY_LENGTH: tuple[str, ...] = tuple(sorted(TOKENS, key=len, reverse=True))


def get_token_meta(spelling: str) -> dict:
    return TOKENS[spelling].__token_meta__
