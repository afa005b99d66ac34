''' Stack-based flattening of nested sequences '''

import logging as lg
from collections import deque
from typing import Deque, List

from seqkit.common.errors import TypeMismatch
from seqkit.common.types import Element, Leaf, Sequence, TraceHook, is_sequence


def flatten(sequence: Sequence, trace: TraceHook | None = None) -> List[Leaf]:
    '''
    Flatten arbitrarily nested lists and tuples into one list of leaves,
    in depth-first left-to-right order, without recursion.

    Items are popped from the tail of a working stack and leaves are
    prepended to the result; the two reversals cancel out. The input is
    never mutated. Cyclic input does not terminate.
    '''
    if not is_sequence(sequence):
        raise TypeMismatch(
            f'Expected a list or tuple, got {type(sequence).__name__}'
        )

    lg.debug(f'Flattening sequence of {len(sequence)} top-level items')

    stack: List[Element] = list(sequence)
    result: Deque[Leaf] = deque()

    while stack:
        item = stack.pop()

        if trace is not None:
            trace(item, len(stack))

        if is_sequence(item):
            stack.extend(item)
        else:
            result.appendleft(item)

    lg.debug(f'Flattened into {len(result)} leaves')
    return list(result)
