'''
Power, root, logarithm and trigonometry tests
'''

import math

from fincalc.items import Number, Error
from fincalc.precision import Precision

from pytest import approx


def test_square_root(calc):
    assert calc(2, '√') == [Number('1.4142135624')]
    assert calc(144, 'SQRT') == [Number(12)]
    assert calc(2, '√', precision=Precision(3)) == [Number('1.414')]
    assert calc(-1, '√') == \
        [Error('SQRT: cannot take square root of negative number')]


def test_square(calc):
    assert calc(12, 'x²') == [Number(144)]
    assert calc('-0.5', 'SQ') == [Number('0.25')]


def test_power(calc, result):
    assert calc(2, 10, 'xⁿ') == [Number(1024)]
    assert calc('1.1', 2, 'POW') == [Number('1.21')]
    assert calc(2, -2, 'xⁿ') == [Number('0.25')]
    assert calc(0, 0, 'xⁿ') == [Number(1)]
    assert calc(0, -1, 'xⁿ') == [Error('POW: result is undefined or infinite')]
    assert result(4, '0.5', 'xⁿ') == approx(2)
    assert result(2, 2000, 'xⁿ', 2, 1990, 'xⁿ', '÷') == approx(1024)
    assert calc(-8, '0.5', 'xⁿ') == \
        [Error('POW: result is undefined or infinite')]
    # Exact integral powers don't overflow.
    assert calc(10, 400, 'xⁿ') == [Number('1' + '0' * 400)]


def test_float_power_overflow(calc):
    assert calc(10, '400.5', 'xⁿ') == \
        [Error('POW: result is undefined or infinite')]


def test_reciprocal(calc):
    assert calc(4, '1/x') == [Number('0.25')]
    assert calc(3, '1/x') == [Number('0.3333333333')]
    assert calc(0, '1/x') == [Error('Division by zero')]


def test_nth_root(calc, result):
    assert result(27, 3, 'ⁿ√x') == approx(3)
    assert result(16, 4, 'NTHROOT') == approx(2)
    assert calc(8, 0, 'ⁿ√x') == [Error('NTHROOT: root index cannot be zero')]
    assert calc(-16, 4, 'ⁿ√x') == \
        [Error('NTHROOT: cannot take even root of negative number')]
    # Odd roots of negatives are not real in floating point either.
    assert calc(-27, 3, 'ⁿ√x') == \
        [Error('NTHROOT: result is undefined or infinite')]


def test_logarithms(calc, result):
    assert result(1000, 'LOG') == approx(3)
    assert result(1, 'ln') == approx(0)
    assert result(math.e, 'LN') == approx(1)
    for symbol, name in ('LOG', 'LOG10'), ('ln', 'LN'):
        for operand in 0, -1:
            assert calc(operand, symbol) == \
                [Error(name + ': cannot take logarithm of non-positive number')]


def test_exponentials(calc, result):
    assert result(1, 'e^x') == approx(math.e)
    assert result(0, 'EXP') == approx(1)
    assert result(3, '10^x') == approx(1000)
    assert result(-2, '10^x') == approx(0.01)
    assert calc(1000, 'e^x') == [Error('EXP: result is undefined or infinite')]
    assert calc(400, '10^x') == \
        [Error('EXP10: result is undefined or infinite')]


def test_trigonometry(result):
    assert result(0, 'sin') == approx(0)
    assert result(0, 'COS') == approx(1)
    assert result(math.pi / 4, 'tan') == approx(1)
    assert result(1, 'ASIN') == approx(math.pi / 2)
    assert result(1, 'acos') == approx(0)
    assert result(1, 'ATAN') == approx(math.pi / 4)


def test_inverse_trigonometry_domain(calc):
    assert calc(2, 'ASIN') == \
        [Error('ASIN: input must be in range [-1, 1]')]
    assert calc('-1.5', 'ACOS') == \
        [Error('ACOS: input must be in range [-1, 1]')]
