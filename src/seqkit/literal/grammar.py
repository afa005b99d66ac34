''' Nested array literal tokens '''

import pyparsing as pp


# Token kinds
OPEN = 'open'
CLOSE = 'close'
COMMA = 'comma'
SCALAR = 'scalar'


def g_punct(literal, kind):
    return pp.Literal(literal).set_parse_action(lambda _s, loc, _r: (kind, None, loc))


def g_const(keywords, value):
    return pp.MatchFirst([pp.Keyword(k) for k in keywords]).set_parse_action(pp.replace_with(value))


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
real = pp.Regex(
    r'[+-]?([0-9]+\.[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?[0-9]+[eE][+-]?[0-9]+'
).set_parse_action(lambda r: float(r[0]))

# Reals first, otherwise '1.5' stops at '1'
number = real | integer

string = pp.QuotedString('"', esc_char='\\') | pp.QuotedString("'", esc_char='\\')

true = g_const(['true', 'True'], True)
false = g_const(['false', 'False'], False)
null = g_const(['null', 'None'], None)

scalar = (number | string | true | false | null).add_parse_action(
    lambda _s, loc, r: (SCALAR, r[0], loc)
)

open_bracket = g_punct('[', OPEN)
close_bracket = g_punct(']', CLOSE)
comma = g_punct(',', COMMA)

# Flat token stream; nesting is built by the reader without recursion
token = open_bracket | close_bracket | comma | scalar

literal = pp.ZeroOrMore(token) + pp.StringEnd()
literal.ignore(pp.c_style_comment)
literal.ignore(pp.dbl_slash_comment)
