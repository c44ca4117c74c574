'''
Powers, roots, logarithms and trigonometry.

Square, square root, reciprocal and integral powers are decimal; the rest is
computed in floats. Angles are in radians.
'''

import math

from ..items import OperandDescriptor
from ..operation import operation, formula, float_call, UNDEFINED
from ..util import DomainError


# Beyond this exact powers get too large to be worth it.
MAX_EXACT_EXPONENT = 1000

X = OperandDescriptor.X


def _unary(f):
    '''
    Work around 1-arg builtins failing inspect.signature.
    '''
    def wrapped(x):
        return f(x)
    wrapped.__name__ = f.__name__
    wrapped.__doc__ = f.__doc__
    return wrapped


@operation('SQRT', '√', description='Square root',
           example='2 √  ->  1.4142135624')
def square_root(x, *, precision):
    return x.sqrt(precision)


@operation('SQUARE', 'x²', description='Square', example='12 x²  ->  144')
def square(x):
    return x * x


@operation('POW', 'xⁿ', (OperandDescriptor.BASE, OperandDescriptor.EXPONENT),
           description='Power', example='2 10 xⁿ  ->  1024')
def power(base, exponent, *, precision):
    if exponent.is_integral() and abs(exponent) <= MAX_EXACT_EXPONENT:
        if base.is_zero() and exponent.sign() < 0:
            raise DomainError(UNDEFINED)
        return base.power(exponent, precision)
    return float_call(math.pow, base, exponent)


@operation('RECIPROCAL', '1/x', description='Reciprocal',
           example='4 1/x  ->  0.25')
def reciprocal(x, *, precision):
    return x.reciprocal(precision)


@formula('NTHROOT', 'ⁿ√x', (X, OperandDescriptor.ROOT_INDEX),
         description='Nth root', example='27 3 ⁿ√x  ->  3')
def nth_root(x, n):
    if n == 0:
        raise DomainError('root index cannot be zero')
    if x < 0 and abs(math.fmod(n, 2)) < 0.0001:
        raise DomainError('cannot take even root of negative number')
    return math.pow(x, 1 / n)


def _logarithm(function):
    def logarithm(x):
        if x <= 0:
            raise DomainError('cannot take logarithm of non-positive number')
        return function(x)
    return logarithm


log10 = formula('LOG10', 'LOG', description='Common logarithm',
                example='1000 LOG  ->  3')(_logarithm(math.log10))

ln = formula('LN', 'ln', description='Natural logarithm',
             example='1 ln  ->  0')(_logarithm(math.log))

exp = formula('EXP', 'e^x', description='Natural exponential',
              example='1 e^x  ->  2.718281828459045')(_unary(math.exp))


@formula('EXP10', '10^x', description='Power of ten',
         example='3 10^x  ->  1000')
def exp10(x):
    return math.pow(10, x)


sin = formula('SIN', 'sin', description='Sine',
              example='0 sin  ->  0')(_unary(math.sin))

cos = formula('COS', 'cos', description='Cosine',
              example='0 cos  ->  1')(_unary(math.cos))

tan = formula('TAN', 'tan', description='Tangent',
              example='0 tan  ->  0')(_unary(math.tan))


def _inverse(function):
    def inverse(x):
        if not -1 <= x <= 1:
            raise DomainError('input must be in range [-1, 1]')
        return function(x)
    return inverse


asin = formula('ASIN', 'ASIN', description='Arcsine',
               example='1 ASIN  ->  1.5707963267948966')(_inverse(math.asin))

acos = formula('ACOS', 'ACOS', description='Arccosine',
               example='1 ACOS  ->  0')(_inverse(math.acos))

atan = formula('ATAN', 'ATAN', description='Arctangent',
               example='1 ATAN  ->  0.7853981633974483')(_unary(math.atan))


OPERATIONS = (square_root, square, power, reciprocal, nth_root,
              log10, ln, exp, exp10, sin, cos, tan, asin, acos, atan)

ALIASES = {
    square_root: ('SQRT',),
    square: ('SQ',),
    power: ('POW',),
    nth_root: ('NTHROOT',),
    ln: ('LN',),
    exp: ('EXP',),
    sin: ('SIN',),
    cos: ('COS',),
    tan: ('TAN',),
    asin: ('asin',),
    acos: ('acos',),
    atan: ('atan',),
}
