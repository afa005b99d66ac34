import logging as lg
from numbers import Real

from seqkit.common.errors import TypeMismatch
from seqkit.common.types import Sequence, is_sequence


def check_number(item: object) -> Real:
    if isinstance(item, bool) or not isinstance(item, Real):
        raise TypeMismatch(f'Expected a number, got {type(item).__name__}')

    return item


def second_max(sequence: Sequence) -> Real | None:
    '''
    Return the largest value strictly below the maximum in a single pass,
    or None if the sequence holds fewer than two distinct values.
    '''
    if not is_sequence(sequence):
        raise TypeMismatch(
            f'Expected a list or tuple, got {type(sequence).__name__}'
        )

    # Every item is checked before the search starts
    numbers = [check_number(item) for item in sequence]

    top: Real | None = None
    runner_up: Real | None = None

    for num in numbers:
        if top is None or num > top:
            runner_up = top
            top = num
        elif num != top and (runner_up is None or num > runner_up):
            runner_up = num

    lg.debug(f'Second max of {len(numbers)} items: {runner_up}')
    return runner_up
