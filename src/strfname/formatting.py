## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import Match


_KIND_COLORS = {'token': '\033[97m', 'literal': '\033[90m', 'dropped': '\033[33m'}


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_match(match: Match, output: str) -> str:
    label = match.token if match.kind == 'token' else match.kind
    color = _KIND_COLORS[match.kind]
    return f"{color}{match.text!r:<10}\033[0m {label:<8} \033[36m=>\033[0m {output!r}"

def show_scan(fmt: str, steps: list[tuple[Match, str]], file=None):
    print(f"\033[90mformat\033[0m {fmt!r}", file=file)
    for match, output in steps:
        print(f"\033[90m{match.start:>4} :\033[0m  {format_match(match, output)}", file=file)
    result = ''.join(out for _, out in steps)
    print(f"\033[90mresult\033[0m {result!r}", file=file)


def format_error_context(fmt: str, position: int, width: int = 1) -> str:
    """Show the format string with a caret marker under the offending characters."""
    marker = ' ' * position + '^' * max(1, width)
    return f"    \033[97m{fmt}\033[0m\n    \033[31m{marker}\033[0m"
