from pathlib import Path

from seqkit.literal.reader import parse_literal


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def load_literal(filename: str):
    return parse_literal(load_file(f'testdata/{filename}'))


def deep_nest(depth: int, leaf=0):
    value = [leaf]

    for _ in range(depth - 1):
        value = [value]

    return value
