'''
Decimal value tests
'''

from decimal import Decimal

import regex

from fincalc.precision import Precision
from fincalc.util import FinCalcError, DivisionByZero, ModuloByZero, \
    DomainError
from fincalc.value import Value

from pytest import raises


def test_construction():
    assert Value('1.10') == Value('1.1')
    assert Value(' 42 ') == Value(42)
    assert Value('1_000') == 1000
    assert Value(Decimal('2.5')) == Value('2.5')
    assert Value(Value(3)) == 3
    # Shortest repr, not the binary expansion.
    assert Value(0.1) == Value('0.1')
    assert Value.from_float(2.0) == 2


def test_bad_construction():
    with raises(FinCalcError, match=regex.escape("Cannot convert 'abc'")):
        Value('abc')
    with raises(FinCalcError):
        Value(True)
    with raises(FinCalcError):
        Value([1])
    for text in 'NaN', 'Infinity', '-inf':
        with raises(FinCalcError, match='Not a finite number'):
            Value(text)
    with raises(FinCalcError, match='Not a finite number'):
        Value(float('inf'))


def test_no_negative_zero():
    zero = Value('-0')
    assert zero.sign() == 0
    assert not zero.decimal.is_signed()
    assert str(zero) == '0'
    assert str(-Value(0)) == '0'


def test_immutable():
    value = Value(1)
    with raises(AttributeError):
        value._decimal = Decimal(2)
    with raises(AttributeError):
        del value._decimal
    assert value == 1


def test_exact_arithmetic():
    assert Value('0.1') + Value('0.2') == Value('0.3')
    assert Value('0.3') - Value('0.1') == Value('0.2')
    assert Value('1.5') * Value('1.5') == Value('2.25')
    assert 1 + Value(2) == 3
    assert 5 - Value(2) == 3
    assert 2 * Value('0.5') == 1
    big = Value('123456789012345678901234567890.123456789')
    assert big * big - big * big == 0
    assert str(big + Value('0.000000001')) == \
        '123456789012345678901234567890.123456790'


def test_float_operands_refused():
    with raises(TypeError):
        Value(1) + 1.5


def test_divide_rounds_to_places():
    assert str(Value(1).divide(3)) == '0.3333333333'
    assert str(Value(2).divide(3)) == '0.6666666667'
    assert str(Value(-2).divide(3)) == '-0.6666666667'
    assert Value(1) / 4 == Value('0.25')
    assert 1 / Value(8) == Value('0.125')


def test_divide_rounding_modes():
    assert str(Value(2).divide(3, Precision(rounding='DOWN'))) == \
        '0.6666666666'
    assert str(Value(-2).divide(3, Precision(rounding='CEILING'))) == \
        '-0.6666666666'
    assert str(Value(-2).divide(3, Precision(rounding='FLOOR'))) == \
        '-0.6666666667'
    # Exact ties
    assert str(Value(1).divide(8, Precision(2))) == '0.13'
    assert str(Value(1).divide(8, Precision(2, 'HALF_EVEN'))) == '0.12'
    assert str(Value(-1).divide(8, Precision(2, 'HALF_DOWN'))) == '-0.12'
    # Just past a tie must not round as one.
    assert str(Value('0.1250000001').divide(1, Precision(2, 'HALF_EVEN'))) \
        == '0.13'
    assert str(Value('0.1249999999').divide(1, Precision(2, 'HALF_UP'))) \
        == '0.12'


def test_divide_extreme_exponents():
    tiny = Value('1e-50000000')
    huge = Value('1e50000000')
    assert tiny.divide(3) == 0
    assert Value(1).divide(huge) == 0
    assert str(tiny.divide(3, Precision(2, 'UP'))) == '0.01'
    assert str(Value(-1).divide(huge, Precision(2, 'FLOOR'))) == '-0.01'
    assert str(Value(-1).divide(huge, Precision(2, 'CEILING'))) == '0.00'
    assert tiny.divide(tiny) == 1
    assert Value(2).divide('1e-5') == 200000
    assert Value(1).divide('1e-100000') == Value('1e100000')


def test_divide_by_zero():
    with raises(DivisionByZero, match='Division by zero'):
        Value(10).divide(0)
    with raises(DivisionByZero):
        Value(1) / Value('0.000')
    with raises(DivisionByZero):
        Value(0).reciprocal()


def test_reciprocal():
    assert Value(4).reciprocal() == Value('0.25')
    assert str(Value(3).reciprocal(Precision(3))) == '0.333'


def test_remainder():
    assert Value(7).remainder(3) == 1
    assert Value(-7) % 3 == -1
    assert Value(7) % Value(-3) == 1
    assert Value('5.5') % 2 == Value('1.5')
    with raises(ModuloByZero, match='Modulo by zero'):
        Value(7) % 0


def test_power():
    assert Value('1.5') ** 2 == Value('2.25')
    assert Value(-2) ** 3 == -8
    assert Value(-2) ** 2 == 4
    assert Value(0) ** 0 == 1
    assert Value(10) ** 30 == Value('1' + '0' * 30)
    assert Value(2).power(Value(10)) == 1024
    assert Value(2).power(-2) == Value('0.25')
    with raises(DivisionByZero):
        Value(0).power(-1)
    with raises(FinCalcError, match='Exponent must be integral'):
        Value(2).power(Value('0.5'))
    with raises(FinCalcError, match='Exponent must be integral'):
        Value(2).power(0.5)


def test_sqrt():
    assert str(Value(2).sqrt()) == '1.4142135624'
    assert Value(16).sqrt() == 4
    assert Value('0.25').sqrt() == Value('0.5')
    assert Value(0).sqrt() == 0
    assert str(Value(2).sqrt(Precision(3, 'DOWN'))) == '1.414'
    assert str(Value(10).sqrt(Precision(2))) == '3.16'
    assert str(Value('1e-20').sqrt()) == '0.0000000001'
    assert Value('1e-50000000').sqrt() == 0
    assert str(Value('1e-50000000').sqrt(Precision(3, 'CEILING'))) == '0.001'
    assert Value('4e100000').sqrt() == Value('2e50000')
    with raises(DomainError) as info:
        Value(-4).sqrt()
    assert info.value.reason == 'cannot take square root of negative number'


def test_quantize():
    assert str(Value('2.345').quantize(Precision(2))) == '2.35'
    assert str(Value(7).quantize(Precision(2))) == '7.00'


def test_comparison():
    assert Value(1) < Value(2)
    assert Value(2) >= 2
    assert Value('-0.5') < 0
    assert sorted([Value(3), Value(-1), Value('0.5')]) == \
        [Value(-1), Value('0.5'), Value(3)]
    assert hash(Value('1.0')) == hash(Value(1))
    assert Value(1) != 'one'


def test_sign_and_predicates():
    assert Value(-3).sign() == -1
    assert Value(3).sign() == 1
    assert Value(0).is_zero()
    assert not Value(0)
    assert Value('3.0').is_integral()
    assert not Value('3.5').is_integral()
    assert abs(Value(-3)) == 3
    assert -Value(3) == -3
    assert float(Value('0.5')) == 0.5


def test_repr():
    assert repr(Value('7')) == "Value('7')"
    assert str(Value('1E+3')) == '1000'
