'''
Arbitrary-precision decimal values.
'''

from decimal import Decimal, Context, Inexact, InvalidOperation, MAX_PREC, \
    MAX_EMAX, MIN_EMIN, ROUND_DOWN
from functools import total_ordering
import math

from .util import FinCalcError, DivisionByZero, ModuloByZero, DomainError
from .precision import resolve


# Wide enough that add, subtract, multiply and remainder never round.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _round(truncated, inexact, precision):
    '''
    Round a result truncated toward zero to precision's places.

    truncated must carry at least one digit past places. When the truncation
    dropped something, a trailing sticky digit keeps the value strictly
    between the neighbouring ties, so every rounding mode decides as it
    would on the exact value.
    '''
    if inexact:
        sign, _, exponent = truncated.as_tuple()
        truncated = _EXACT.add(truncated, Decimal((sign, (1,), exponent - 1)))
    return precision.quantize(truncated, _EXACT)


def _truncating(digits):
    return Context(prec=max(digits, 1), rounding=ROUND_DOWN,
                   Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[])


def _coerce(other):
    if isinstance(other, Value):
        return other
    if isinstance(other, (int, Decimal)) and not isinstance(other, bool):
        return Value(other)
    return None


@total_ordering
class Value:
    '''
    Immutable, finite, arbitrary-precision decimal number.

    Addition, subtraction, multiplication and remainder are exact. Division,
    reciprocal, negative powers and square root round to the decimal places
    of a Precision, with its rounding mode; the process-wide Precision
    unless one is passed in.

    Comparison and equality are exact. There is no negative zero.
    '''

    __slots__ = ('_decimal',)

    def __init__(self, value=0):
        if isinstance(value, Value):
            decimal = value._decimal
        elif isinstance(value, Decimal):
            decimal = value
        elif isinstance(value, bool):
            raise FinCalcError('Cannot convert {!r}'.format(value))
        elif isinstance(value, int):
            decimal = Decimal(value)
        elif isinstance(value, float):
            # Shortest repr, so 0.1 stays 0.1 rather than its binary expansion
            decimal = Decimal(repr(value))
        elif isinstance(value, str):
            try:
                decimal = Decimal(value.strip())
            except InvalidOperation:
                raise FinCalcError('Cannot convert {!r}'.format(value)) \
                    from None
        else:
            raise FinCalcError('Cannot convert {!r}'.format(value))
        if not decimal.is_finite():
            raise FinCalcError('Not a finite number: {!r}'.format(value))
        if not decimal:
            decimal = decimal.copy_abs()
        object.__setattr__(self, '_decimal', decimal)

    def __setattr__(self, name, value):
        raise AttributeError('Value is immutable')

    def __delattr__(self, name):
        raise AttributeError('Value is immutable')

    @classmethod
    def from_float(cls, number):
        return cls(float(number))

    @property
    def decimal(self):
        return self._decimal

    def to_float(self):
        return float(self._decimal)

    def sign(self):
        '''
        Return -1, 0 or 1.
        '''
        if not self._decimal:
            return 0
        return -1 if self._decimal.is_signed() else 1

    def is_zero(self):
        return not self._decimal

    def is_integral(self):
        return self._decimal == self._decimal.to_integral_value()

    def add(self, other):
        return Value(_EXACT.add(self._decimal, Value(other)._decimal))

    def subtract(self, other):
        return Value(_EXACT.subtract(self._decimal, Value(other)._decimal))

    def multiply(self, other):
        return Value(_EXACT.multiply(self._decimal, Value(other)._decimal))

    def divide(self, other, precision=None):
        '''
        Divide, rounding to the precision's places.

        Raises DivisionByZero for a zero divisor.
        '''
        other = Value(other)
        if other.is_zero():
            raise DivisionByZero('Division by zero')
        precision = resolve(precision)
        # The quotient's leading digit is at most this many places up.
        adjusted = self._decimal.adjusted() - other._decimal.adjusted()
        # Two digits past places: one to tell ties, one spare.
        context = _truncating(adjusted + precision.places + 3)
        quotient = context.divide(self._decimal, other._decimal)
        return Value(_round(quotient, context.flags[Inexact], precision))

    def reciprocal(self, precision=None):
        return ONE.divide(self, precision)

    def remainder(self, other):
        '''
        Truncated remainder; takes the sign of the dividend.

        Raises ModuloByZero for a zero divisor.
        '''
        other = Value(other)
        if other.is_zero():
            raise ModuloByZero('Modulo by zero')
        return Value(_EXACT.remainder(self._decimal, other._decimal))

    def power(self, exponent, precision=None):
        '''
        Raise to an integral exponent.

        Exact for non-negative exponents. Negative exponents go through
        reciprocal, so they round and raise DivisionByZero on zero.
        '''
        if isinstance(exponent, Value):
            if not exponent.is_integral():
                raise FinCalcError(
                    'Exponent must be integral, got: {}'.format(exponent))
            exponent = int(exponent._decimal)
        elif isinstance(exponent, bool) or not isinstance(exponent, int):
            raise FinCalcError(
                'Exponent must be integral, got: {!r}'.format(exponent))
        if exponent < 0:
            return self.power(-exponent).reciprocal(precision)
        sign, digits, shift = self._decimal.as_tuple()
        coefficient = int(''.join(map(str, digits)))
        decimal = Decimal(coefficient ** exponent).scaleb(shift * exponent,
                                                          context=_EXACT)
        if sign and exponent % 2:
            decimal = decimal.copy_negate()
        return Value(decimal)

    def sqrt(self, precision=None):
        '''
        Square root, rounded to the precision's places.

        Raises DomainError for negative numbers.
        '''
        if self._decimal < 0:
            raise DomainError('cannot take square root of negative number')
        precision = resolve(precision)
        _, digits, exponent = self._decimal.as_tuple()
        coefficient = int(''.join(map(str, digits)))
        # Exponent of the root's last digit: past places, and no lower than
        # keeps the radicand integral.
        last = min(-(precision.places + 1), exponent // 2)
        radicand = coefficient * 10 ** (exponent - 2 * last)
        root = math.isqrt(radicand)
        truncated = Decimal(root).scaleb(last, context=_EXACT)
        return Value(_round(truncated, root * root != radicand, precision))

    def quantize(self, precision=None):
        '''
        Round to the precision's places.
        '''
        return Value(resolve(precision).quantize(self._decimal, _EXACT))

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __mod__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.remainder(other)

    def __pow__(self, exponent):
        return self.power(exponent)

    def __neg__(self):
        return Value(self._decimal.copy_negate())

    def __pos__(self):
        return self

    def __abs__(self):
        return Value(self._decimal.copy_abs())

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._decimal == other._decimal

    def __lt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._decimal < other._decimal

    def __hash__(self):
        return hash(self._decimal)

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        return self.to_float()

    def __str__(self):
        return format(self._decimal, 'f')

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, str(self))


ONE = Value(1)
