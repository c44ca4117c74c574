'''
Arithmetic on exact decimals.

Division rounds to the precision's places; everything else is exact.
'''

from ..items import OperandDescriptor
from ..operation import operation


@operation('ADD', '+', description='Addition', example='3 4 +  ->  7')
def add(x, y):
    return x + y


@operation('SUBTRACT', '−', description='Subtraction',
           example='10 4 −  ->  6')
def subtract(x, y):
    return x - y


@operation('MULTIPLY', '×', description='Multiplication',
           example='6 7 ×  ->  42')
def multiply(x, y):
    return x * y


@operation('DIVIDE', '÷', description='Division',
           example='1 3 ÷  ->  0.3333333333')
def divide(x, y, *, precision):
    return x.divide(y, precision)


@operation('MOD', 'MOD',
           (OperandDescriptor('dividend', 'number to divide'),
            OperandDescriptor('divisor', 'number to divide by')),
           description='Remainder, with the sign of the dividend',
           example='-7 3 MOD  ->  -1')
def modulo(dividend, divisor):
    return dividend % divisor


@operation('ABS', '|x|', description='Absolute value',
           example='-5 |x|  ->  5')
def absolute(x):
    return abs(x)


OPERATIONS = add, subtract, multiply, divide, modulo, absolute

ALIASES = {
    subtract: ('-',),
    multiply: ('*',),
    divide: ('/',),
    modulo: ('%',),
    absolute: ('ABS',),
}
