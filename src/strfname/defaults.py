## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import threading


INITIAL_FORMAT = "F L"


class DefaultFormat:
    """Shared fallback format for calls that don't pass one, safe to read and write across threads."""

    def __init__(self, value: str = INITIAL_FORMAT):
        self._lock = threading.Lock()
        self._value = value

    def get(self) -> str:
        with self._lock:
            return self._value

    def set(self, value: str) -> None:
        # Empty string is legal, and makes default-using calls return "".
        with self._lock:
            self._value = value

    def reset(self) -> None:
        self.set(INITIAL_FORMAT)

    def __repr__(self):
        return f"DefaultFormat({self.get()!r})"
