'''
Calculator lexer tests
'''

import regex

from fincalc.items import Number
from fincalc.lexer import Lexer
from fincalc.operations import basic, scientific, financial
from fincalc.registry import Registry
from fincalc.util import FinCalcError

from pytest import raises


def test_numbers():
    l = Lexer()
    matches = l.lex('1_200.5 -5 1e3 .5 2. 2.5E-3')
    assert [m.group('number') for m in matches if l.isfeedable(m)] == \
        ['1_200.5', '-5', '1e3', '.5', '2.', '2.5E-3']
    assert list(l.items('1_200.5 -5 1e3 .5')) == \
        [Number('1200.5'), Number(-5), Number(1000), Number('0.5')]


def test_operators():
    l = Lexer()
    assert list(l.items('3 4 + 2 ×')) == \
        [Number(3), Number(4), basic.add, Number(2), basic.multiply]
    assert list(l.items('200000 0.005 360 PMT')) == \
        [Number(200000), Number('0.005'), Number(360), financial.payment]


def test_no_space_needed():
    l = Lexer()
    assert list(l.items('3 4+')) == [Number(3), Number(4), basic.add]
    assert list(l.items('2√')) == [Number(2), scientific.square_root]


def test_longest_match():
    l = Lexer()
    # Not 1 then /
    assert list(l.items('4 1/x')) == [Number(4), scientific.reciprocal]
    # Not 10 then ^
    assert list(l.items('3 10^x')) == [Number(3), scientific.exp10]
    # Not SQ then RT
    assert list(l.items('9 SQRT')) == [Number(9), scientific.square_root]


def test_minus():
    l = Lexer()
    assert list(l.items('3 -4')) == [Number(3), Number(-4)]
    assert list(l.items('3 4 -')) == [Number(3), Number(4), basic.subtract]
    assert list(l.items('3 4-')) == [Number(3), Number(4), basic.subtract]


def test_bad_input():
    l = Lexer()
    with raises(FinCalcError, match=regex.escape("Couldn't lex sqrtx")):
        list(l.lex('2 sqrtx'))
    with raises(FinCalcError, match=regex.escape("Couldn't lex ?")):
        list(l.items('1 2 ?'))


def test_lexes_up_to_first_bad():
    l = Lexer()
    matches = l.lex('1 2 $3')
    assert l.matchedgroups(next(matches)) == {'number': '1'}
    assert l.matchedgroups(next(matches)) == {'space': ' '}
    assert l.matchedgroups(next(matches)) == {'number': '2'}
    assert l.matchedgroups(next(matches)) == {'space': ' '}
    with raises(FinCalcError):
        next(matches)


def test_whitespace():
    l = Lexer()
    assert list(l.items('  1\t2\n')) == [Number(1), Number(2)]
    assert list(l.items('')) == []


def test_own_registry():
    registry = Registry()
    registry.register(basic.add, 'plus')
    l = Lexer(registry)
    assert list(l.items('1 2 plus')) == [Number(1), Number(2), basic.add]
    with raises(FinCalcError, match=regex.escape("Couldn't lex ×")):
        list(l.items('1 2 ×'))


def test_empty_registry():
    l = Lexer(Registry())
    assert list(l.items('1 2')) == [Number(1), Number(2)]
    with raises(FinCalcError):
        list(l.items('1 2 +'))


def test_symbols_escaped():
    registry = Registry()
    registry.register(basic.multiply, '(*)')
    l = Lexer(registry)
    assert list(l.items('2 3 (*)')) == [Number(2), Number(3), basic.multiply]
