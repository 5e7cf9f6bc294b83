## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Name, FormatOptions, Match
from .errors import *
from .defaults import DefaultFormat
from .formatter import Formatter

_FORMATTER = Formatter()

def __getattr__(name):
    return getattr(_FORMATTER, name)
