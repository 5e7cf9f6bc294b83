## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from strfname.formatter import Formatter
from strfname.defaults import DefaultFormat
from strfname.errors import StrfnameError, UnknownTokenError
from strfname.types import FormatOptions, Name


JOHN = Name('John', 'Robert', 'Doe')


def test_resolve_format_precedence():
    fmt = Formatter(DefaultFormat("D"))
    opts = FormatOptions('John', format='O')
    assert fmt.resolve_format(opts, 'A') == 'A'
    assert fmt.resolve_format(opts) == 'O'
    assert fmt.resolve_format(FormatOptions('John')) == 'D'
    assert fmt.resolve_format(opts, '') == ''
    assert fmt.resolve_format(FormatOptions('John', format='')) == 'D'


def test_explicit_argument_overrides_options_format():
    fmt = Formatter()
    assert fmt.format_name(FormatOptions('John', 'Robert', 'Doe', format='L'), 'F') == "John"


def test_unknown_characters():
    fmt = Formatter()
    assert [m.start for m in fmt.unknown_characters("a.b")] == [0, 2]
    assert fmt.unknown_characters("L, F M") == []


def test_check_format_accepts_clean_formats():
    fmt = Formatter()
    assert fmt.check_format("L, F M") is None
    assert fmt.check_format("lAST MIddle") is None
    assert fmt.check_format("") is None


def test_check_format_reports_first_unknown_character():
    fmt = Formatter()
    with pytest.raises(UnknownTokenError) as info:
        fmt.check_format("F X L Y")
    exc = info.value
    assert isinstance(exc, StrfnameError) and isinstance(exc, ValueError)
    assert (exc.format, exc.position, exc.char) == ("F X L Y", 2, 'X')
    assert "position 2" in str(exc)


def test_format_name_never_raises_on_odd_formats():
    fmt = Formatter()
    for text in ("\x00\n\t", "%s {0} $1", "🙂F🙂", "LASTLASTLAST", "M" * 50):
        assert isinstance(fmt.format_name(JOHN, text), str)


def test_verbose_format_prints_trace_to_stderr(capsys):
    fmt = Formatter()
    result = fmt.format_name(JOHN, "L, F?", verbosity=1)
    captured = capsys.readouterr()
    assert result == "Doe, John"
    assert captured.out == ''
    assert "'Doe, John'" in captured.err
    assert "dropped" in captured.err
    assert "format" in captured.err and "result" in captured.err


def test_quiet_format_prints_nothing(capsys):
    Formatter().format_name(JOHN, "F L")
    assert capsys.readouterr() == ('', '')
