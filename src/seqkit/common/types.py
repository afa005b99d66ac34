from typing import Any, TypeAlias, Callable, List, Tuple

Element: TypeAlias = Any
Leaf: TypeAlias = Any
Sequence: TypeAlias = List[Element] | Tuple[Element, ...]

# Called with the popped item and the stack depth left after the pop
TraceHook: TypeAlias = Callable[[Element, int], None]

SEQUENCE_TYPES = (list, tuple)


def is_sequence(value: Element) -> bool:
    return isinstance(value, SEQUENCE_TYPES)
