import re
import sys

import pytest

from seqkit.common.errors import LiteralError
from seqkit.literal.reader import format_literal, parse_literal, read_literal

from unit_utils import find_file


@pytest.mark.parametrize('text, expected', [
    ('[1, [2, 3], [4, [5, 6]], 7]', [1, [2, 3], [4, [5, 6]], 7]),
    ('[]', []),
    ('[[[[1]]]]', [[[[1]]]]),
    ('[1, [], 2]', [1, [], 2]),
    ('[1, 2,]', [1, 2]),
    ('  [ -1 , +2 ]  ', [-1, 2]),
])
def test_arrays(text, expected):
    assert parse_literal(text) == expected


def test_scalars():
    assert parse_literal('[1.5, .5, 2e3, -1E-2]') == [1.5, 0.5, 2000.0, -0.01]
    assert parse_literal('[true, false, null, True, False, None]') == [True, False, None, True, False, None]


def test_integers_stay_integers():
    value = parse_literal('[0, 10]')
    assert all(type(item) is int for item in value)


def test_strings():
    assert parse_literal('["a b", \'c\', "say \\"hi\\""]') == ['a b', 'c', 'say "hi"']


def test_brackets_inside_strings():
    assert parse_literal('["[1, 2]"]') == ['[1, 2]']


def test_comments():
    assert parse_literal('[1, /* two */ 2] // done') == [1, 2]


def test_bare_scalar_top_level():
    assert parse_literal('42') == 42
    assert parse_literal('null') is None


@pytest.mark.parametrize('text', [
    '',
    '[1, 2',
    '[1 2]',
    '[1,, 2]',
    '[nope]',
    '[truth]',
    '[1] [2]',
])
def test_malformed(text):
    with pytest.raises(LiteralError):
        parse_literal(text)


def test_error_location():
    with pytest.raises(LiteralError, match='line 2'):
        parse_literal('[1,\n  ?]')


def test_read_file():
    assert read_literal(find_file('testdata/nested.txt'))[0] == 1


def test_read_missing_file(tmp_path):
    with pytest.raises(LiteralError, match='Cannot read'):
        read_literal(tmp_path / 'missing.txt')


def test_read_malformed_file():
    with pytest.raises(LiteralError):
        read_literal(find_file('testdata/malformed.txt'))


def test_format_json():
    assert format_literal([1, 'a', None, True]) == '[1, "a", null, true]'
    assert format_literal([1], indent=2) == '[\n  1\n]'


def test_format_python():
    assert format_literal([1, 'a', None, True], 'python') == "[1, 'a', None, True]"


def test_format_unknown_style():
    with pytest.raises(ValueError):
        format_literal([], 'yaml')


def test_nesting_deeper_than_recursion_limit():
    depth = sys.getrecursionlimit() * 2
    value = parse_literal('[' * depth + '"core"' + ']' * depth)

    for _ in range(depth):
        assert len(value) == 1
        value = value[0]

    assert value == 'core'


@pytest.mark.parametrize('text, message', [
    (']', "Unmatched ']'"),
    ('[1]]', "Unmatched ']'"),
    (',', "Unexpected ','"),
    ('[,1]', 'Expected a value'),
    ('[1 [2]]', "Expected ',' or ']'"),
    ('[[1]', "Missing 1 closing ']'"),
    ('1 2', 'Expected end of literal'),
])
def test_structure_errors(text, message):
    with pytest.raises(LiteralError, match=re.escape(message)):
        parse_literal(text)


def test_read_undecodable_file(tmp_path):
    path = tmp_path / 'latin.txt'
    path.write_bytes(b'[1, "\xff"]')

    with pytest.raises(LiteralError, match='Cannot decode'):
        read_literal(path)
