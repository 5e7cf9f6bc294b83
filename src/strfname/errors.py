## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class StrfnameError(Exception):
    def __init__(self, message: str = "", *, format=None, position=None):
        """Base class for all errors raised around the name formatter."""
        super().__init__(message)
        self.format: str = format
        self.position: int = position

class UnknownTokenError(StrfnameError, ValueError):
    """Strict-mode problem: a character the formatter would silently drop."""
    def __init__(self, message: str = "", *, format=None, position=None, char=None):
        super().__init__(message, format=format, position=position)
        self.char = char
