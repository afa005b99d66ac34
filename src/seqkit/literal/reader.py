import json
import logging as lg
from pathlib import Path
from typing import Any, TypeAlias, List, Tuple
import sys

import pyparsing as pp

import seqkit.literal.grammar as g
from seqkit.common.errors import LiteralError
from seqkit.common.types import Element


STYLES = ('json', 'python')

Token: TypeAlias = Tuple[str, Element, int]


def malformed(text: str, loc: int, msg: str) -> LiteralError:
    return LiteralError(
        f'Malformed literal at line {pp.lineno(loc, text)}, column {pp.col(loc, text)}: {msg}'
    )


def build(text: str, tokens: List[Token]) -> Element:
    ''' Assemble tokens into nested lists using an explicit stack '''
    # Bottom entry collects the top-level value
    stack: List[List[Element]] = [[]]
    want_value = True

    for (kind, value, loc) in tokens:
        top_level = len(stack) == 1

        if kind in (g.OPEN, g.SCALAR) and not want_value:
            msg = 'Expected end of literal' if top_level else "Expected ',' or ']'"
            raise malformed(text, loc, msg)

        match kind:
            case g.OPEN:
                array: List[Element] = []
                stack[-1].append(array)
                stack.append(array)
                want_value = True

            case g.SCALAR:
                stack[-1].append(value)
                want_value = False

            case g.CLOSE:
                if top_level:
                    raise malformed(text, loc, "Unmatched ']'")

                stack.pop()
                want_value = False

            case g.COMMA:
                if top_level:
                    raise malformed(text, loc, "Unexpected ','")

                if want_value:
                    raise malformed(text, loc, 'Expected a value')

                want_value = True

    if len(stack) > 1:
        raise malformed(text, len(text), f"Missing {len(stack) - 1} closing ']'")

    if not stack[0]:
        raise malformed(text, len(text), 'Expected a value')

    return stack[0][0]


def parse_literal(text: str) -> Element:
    '''
    Parse one array literal such as "[1, [2, 'a'], null]".

    Every bracketed group becomes a list. Nesting depth is limited only by
    memory. The top level is returned as is, so callers decide whether a
    bare scalar is acceptable.
    '''
    try:
        tokens = g.literal.parse_string(text)

    except pp.ParseBaseException as e:
        raise LiteralError(
            f'Malformed literal at line {e.lineno}, column {e.col}: {e.msg}'
        ) from e

    value = build(text, list(tokens))
    lg.debug(f'Parsed literal of {len(text)} characters')
    return value


def read_literal(source: str | Path) -> Element:
    try:
        if str(source) == '-':
            lg.debug('Reading literal from stdin')
            text = sys.stdin.read()
        else:
            lg.debug(f'Reading literal from {source}')
            text = Path(source).read_text()

    except OSError as e:
        raise LiteralError(f'Cannot read {source}: {e.strerror}') from e

    except UnicodeDecodeError as e:
        raise LiteralError(f'Cannot decode {source}: {e.reason} at byte {e.start}') from e

    return parse_literal(text)


def format_literal(value: Any, style: str = 'json', indent: int | None = None) -> str:
    match style:
        case 'json':
            return json.dumps(value, indent=indent, default=repr)
        case 'python':
            return repr(value)

    raise ValueError(f'Unknown output style {style}')
