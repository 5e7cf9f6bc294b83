## strfname — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfname — Format personal names with a tiny token language, e.g. "L, F M" or "I.J.K.".
#

import os
import sys
from dataclasses import dataclass

import click

from .types import FormatOptions
from .errors import UnknownTokenError
from .formatting import write_without_ansi, format_error_context

from . import api


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    strict: bool
    plain: bool
    default_format: str | None


class NameRunner:
    def __init__(self, config: CliConfig):
        self.verbose = config.verbose
        self.strict = config.strict
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.formatter = api._FORMATTER
        if config.default_format is not None:
            self.formatter.set_default_format(config.default_format)
        self.failure = False
        self.formatted_items = 0

        if os.environ.get('STRFNAME_DEBUG'):
            print(f"\033[90mdefault format {self.formatter.get_default_format()!r}, "
                  f"verbose={self.verbose}, strict={self.strict}\033[0m", file=sys.stderr)

    def _fatal_error(self, message: str, detail: str, context: str = '') -> None:
        print(f'\033[30;43m {message} \033[0m {detail}\n{context}', file=sys.stderr)
        self.failure = True

    def _check(self, fmt: str) -> bool:
        if not self.strict: return True
        try:
            self.formatter.check_format(fmt)
            return True
        except UnknownTokenError as exc:
            context = format_error_context(exc.format, exc.position, len(exc.char))
            self._fatal_error("FORMAT ERROR.", f"Character `\033[1;97m{exc.char}\033[0m` is not a name token or separator!", context)
            return False

    def format_one(self, options: FormatOptions) -> str | None:
        fmt = self.formatter.resolve_format(options)
        if not self._check(fmt):
            return None
        # Resolved format passed explicitly, so a default changed meanwhile can't apply.
        result = self.formatter.format_name(options, fmt, verbosity=self.verbose)
        self.formatted_items += 1
        return result

    def finalize(self) -> int:
        if self.verbose and self.formatted_items > 0:
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m", file=sys.stderr)
            print(f"names\t\033[97m{self.formatted_items:,}\033[0m", file=sys.stderr)
        return 1 if self.failure else 0


def _parse_record(line: str, lineno: int, fmt: str | None) -> FormatOptions:
    fields = line.rstrip('\r\n').split('\t')
    if len(fields) > 3:
        raise click.BadParameter(f"Line {lineno} has {len(fields)} tab-separated fields, expected at most 3.")
    first, middle, last = (fields + [None] * 3)[:3]
    return FormatOptions(first or None, middle or None, last or None, format=fmt)


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Print each step of the format scan to stderr.')
@click.option('--strict', is_flag=True, help='Reject format strings containing characters that are not tokens or separators.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--default-format', '-d', default=None,
              help='Default format used when none is given (env: STRFNAME_DEFAULT_FORMAT, may be empty).')
@click.pass_context
def cli(ctx: click.Context, verbose: int, strict: bool, plain: bool, default_format: str | None) -> None:
    ctx.ensure_object(dict)
    # An empty env value is a legal default, so it isn't left to click's `envvar`.
    if default_format is None:
        default_format = os.environ.get('STRFNAME_DEFAULT_FORMAT')
    ctx.obj['config'] = CliConfig(verbose=verbose, strict=strict, plain=plain, default_format=default_format)


@cli.command('format')
@click.argument('fmt', metavar='FORMAT', required=False)
@click.option('--first', 'first_name', default=None, help='First name.')
@click.option('--middle', 'middle_name', default=None, help='Middle name.')
@click.option('--last', 'last_name', default=None, help='Last name.')
@click.pass_context
def format_command(ctx: click.Context, fmt: str | None, first_name, middle_name, last_name) -> None:
    """Format a single name given as options."""
    runner = NameRunner(ctx.obj['config'])
    options = FormatOptions(first_name, middle_name, last_name, format=fmt)
    if (result := runner.format_one(options)) is not None:
        click.echo(result)
    ctx.exit(runner.finalize())


@cli.command('batch')
@click.argument('fmt', metavar='FORMAT', required=False)
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_context
def batch_command(ctx: click.Context, fmt: str | None, source) -> None:
    """Format tab-separated `first, middle, last` lines, one name per line."""
    runner = NameRunner(ctx.obj['config'])
    for lineno, line in enumerate(source, start=1):
        if not line.rstrip('\r\n'):
            click.echo('')
            continue
        options = _parse_record(line, lineno, fmt)
        if (result := runner.format_one(options)) is None:
            break
        click.echo(result)
    ctx.exit(runner.finalize())


@cli.command('tokens')
@click.pass_context
def tokens_command(ctx: click.Context) -> None:
    """List the tokens understood in format strings."""
    runner = NameRunner(ctx.obj['config'])
    for spelling, meta in runner.formatter.list_tokens().items():
        click.echo(f"\033[1;97m{spelling:<8}\033[0m {meta['field']:<8} {meta['part']:<8} {meta['case']}")
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='strfname')


if __name__ == "__main__":
    main()
