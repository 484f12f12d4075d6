"""
Path notation grammar.

    *            all keys
    !(k1,k2)     all keys except k1, k2
    name?        optional key
    name         key

Segments are joined with dots: '*.b', '!(d).b', '*.b?.c'. Whitespace is only
allowed inside quotes and around the names of a skip list: '!( a, b )'.
"""
import re

import pyparsing as pp

from . import access as el

S = pp.Suppress
ZM = pp.ZeroOrMore
dot = pp.Suppress('.')
comma = pp.Suppress(pp.Regex(r'\s*,\s*'))
lp = pp.Suppress(pp.Regex(r'\(\s*'))
rp = pp.Suppress(pp.Regex(r'\s*\)'))

reserved = '.*!?(),\'"'
breserved = ''.join('\\' + i for i in reserved)
_integer = re.compile(r"-?[0-9]+$")


def _coerce(tokens):
    word = tokens[0]
    return int(word) if _integer.match(word) else word


quoted = pp.QuotedString('"', esc_char='\\') | pp.QuotedString("'", esc_char='\\')
word = pp.Regex(f'[^{breserved}\\s]+').set_parse_action(_coerce)
name = quoted | word

allkeys = S('*').set_parse_action(el.AllKeys)
skipkeys = (S('!') + lp + pp.Optional(name + ZM(comma + name)) + rp).set_parse_action(el.SkipKeys)
optional = (name + S('?')).set_parse_action(el.OptionalKey)
keycmd = (name + ~pp.Literal('?')).set_parse_action(el.Key)

segment = skipkeys | allkeys | optional | keycmd
template = (pp.Optional(segment + ZM(dot + segment)) + pp.StringEnd()).leave_whitespace()
