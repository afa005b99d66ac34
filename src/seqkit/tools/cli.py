import sys
from pathlib import Path
import logging as lg
import reprlib
from typing import Any, Callable

import click

from seqkit.arrays.flatten import flatten
from seqkit.arrays.dedupe import unique
from seqkit.arrays.search import second_max
from seqkit.common.errors import ConfigError, LiteralError, TypeMismatch
from seqkit.common.types import Element
from seqkit.literal.reader import STYLES, format_literal, parse_literal, read_literal
from seqkit.tools.settings import Settings, load_settings


EXIT_OK = 0
EXIT_LITERAL_ERROR = 2
EXIT_TYPE_MISMATCH = 3
EXIT_CONFIG_ERROR = 4

FLATTEN_EXAMPLE = '[1, [2, 3], [4, [5, 6]], 7]'
UNIQUE_EXAMPLE = '[1, 2, 2, 3, 4, 4, 5, 6, 6, 6]'
SECOND_MAX_EXAMPLE = '[1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5]'


def eprint(*args: Any, **kwargs: Any):
    print(*args, file=sys.stderr, **kwargs)


def trace_pop(item: Element, depth: int):
    eprint(f'pop {reprlib.repr(item)} (stack {depth})')


def configure_logging(verbose: bool):
    level = lg.DEBUG if verbose else lg.INFO
    lg.basicConfig(level=level)
    lg.getLogger().setLevel(level)


def load_input(literal: str | None, input: str | None, example: str) -> Element:
    if literal is not None and input is not None:
        raise click.UsageError('Pass either LITERAL or --input, not both')

    if input is not None:
        return read_literal(input)

    if literal is None:
        lg.info(f'No input given, using example {example}')
        literal = example

    return parse_literal(literal)


def run(
    settings: Settings, operation: Callable[[Element], Any],
    literal: str | None, input: str | None, example: str
):
    try:
        value = load_input(literal, input, example)
        result = operation(value)

    except LiteralError as e:
        eprint(f'seqkit: {e}')
        sys.exit(EXIT_LITERAL_ERROR)

    except TypeMismatch as e:
        eprint(f'seqkit: {e}')
        sys.exit(EXIT_TYPE_MISMATCH)

    click.echo(format_literal(result, settings.style, settings.indent))
    sys.exit(EXIT_OK)


def literal_command(func):
    func = click.option(
        '-i', '--input', type=str, help='Read the literal from a file, - for stdin'
    )(func)
    func = click.argument('literal', required=False)(func)
    return click.pass_obj(func)


@click.group()
@click.pass_context
@click.option('-c', '--config', type=Path, help='TOML file with a [seqkit] table')
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Print every stack pop while flattening')
@click.option('--style', type=click.Choice(STYLES), help='Output style')
@click.option('--indent', type=click.IntRange(min=0), help='JSON indentation')
def cli(
    ctx: click.Context, config: Path | None, verbose: bool, trace: bool,
    style: str | None, indent: int | None
):
    configure_logging(verbose)
    settings = ctx.ensure_object(Settings)

    try:
        if config is not None:
            load_settings(config, settings)

        settings.update(
            verbose=verbose or None,
            trace=trace or None,
            style=style,
            indent=indent
        )

    except ConfigError as e:
        eprint(f'seqkit: {e}')
        sys.exit(EXIT_CONFIG_ERROR)

    if settings.verbose and not verbose:
        configure_logging(True)


@cli.command('flatten')
@literal_command
def flatten_cmd(settings: Settings, literal: str | None, input: str | None):
    ''' Flatten a nested array literal '''
    trace = trace_pop if settings.trace else None
    run(settings, lambda value: flatten(value, trace), literal, input, FLATTEN_EXAMPLE)


@cli.command('unique')
@literal_command
def unique_cmd(settings: Settings, literal: str | None, input: str | None):
    ''' Remove repeated items, keeping first occurrences '''
    run(settings, unique, literal, input, UNIQUE_EXAMPLE)


@cli.command('second-max')
@literal_command
def second_max_cmd(settings: Settings, literal: str | None, input: str | None):
    ''' Find the largest value below the maximum '''
    run(settings, second_max, literal, input, SECOND_MAX_EXAMPLE)


if __name__ == '__main__':
    cli()
