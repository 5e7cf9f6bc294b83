## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import threading

from strfname.defaults import DefaultFormat, INITIAL_FORMAT
from strfname.formatter import Formatter
from strfname.types import Name


def test_store_starts_with_first_last():
    store = DefaultFormat()
    assert store.get() == INITIAL_FORMAT == "F L"


def test_store_set_and_reset():
    store = DefaultFormat()
    store.set("L, F")
    assert store.get() == "L, F"
    store.set("")
    assert store.get() == ""
    store.reset()
    assert store.get() == "F L"


def test_formatters_with_separate_stores_are_isolated():
    name = Name('John', 'Robert', 'Doe')
    a, b = Formatter(), Formatter()
    a.set_default_format("L")
    assert a.format_name(name) == "Doe"
    assert b.format_name(name) == "John Doe"


def test_formatters_can_share_an_injected_store():
    name = Name('John', 'Robert', 'Doe')
    store = DefaultFormat("M")
    a, b = Formatter(store), Formatter(store)
    a.set_default_format("K")
    assert b.get_default_format() == "K"
    assert b.format_name(name) == "D"


def test_concurrent_writers_and_readers_see_whole_values():
    name = Name('John', 'Robert', 'Doe')
    fmt = Formatter(DefaultFormat("FIRST"))
    results, errors = [], []

    def writer():
        for i in range(500):
            fmt.set_default_format("FIRST" if i % 2 else "LAST")

    def reader():
        try:
            for _ in range(500):
                results.append(fmt.format_name(name))
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer) for _ in range(2)] + [threading.Thread(target=reader) for _ in range(4)]
    for t in threads: t.start()
    for t in threads: t.join()

    assert not errors
    assert len(results) == 2000
    assert set(results) <= {"JOHN", "DOE"}
