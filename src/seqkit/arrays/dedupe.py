import logging as lg
from numbers import Real
from typing import Any, List, Set, Tuple

from seqkit.common.errors import TypeMismatch
from seqkit.common.types import Element, Sequence, is_sequence


def _kind(item: Element) -> type:
    # All numbers are one kind, so 1 == 1.0; True stays apart from 1
    if isinstance(item, Real) and not isinstance(item, bool):
        return Real

    return type(item)


def unique(sequence: Sequence) -> List[Element]:
    '''
    Drop repeated items, keeping the first occurrence of each in order.

    Items repeat when they are equal and of the same kind: 1 and 1.0 are the
    same number, but True is not 1 and '1' is not 1.
    '''
    if not is_sequence(sequence):
        raise TypeMismatch(
            f'Expected a list or tuple, got {type(sequence).__name__}'
        )

    kept: List[Element] = []
    seen: Set[Tuple[type, Any]] = set()
    unhashable: List[Element] = []

    for item in sequence:
        key = (_kind(item), item)

        try:
            if key in seen:
                continue

            seen.add(key)

        except TypeError:
            if any(_kind(other) is key[0] and other == item for other in unhashable):
                continue

            unhashable.append(item)

        kept.append(item)

    lg.debug(f'Kept {len(kept)} of {len(sequence)} items')
    return kept
