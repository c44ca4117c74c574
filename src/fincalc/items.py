'''
Things that live on a calculator stack.

A working stack only ever holds Numbers and Errors. Operations (see
fincalc.operation) are StackItems too, but only in evaluator input.
'''

from collections import namedtuple

from .util import DivisionByZero, ModuloByZero, DomainError
from .value import Value


class StackItem:
    '''
    Base of everything the evaluator accepts: Number, Error, Operation.
    '''
    __slots__ = ()


class Number(StackItem):
    '''
    An operand.
    '''
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value if isinstance(value, Value) else Value(value)

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'Number({!r})'.format(str(self.value))


class Error(StackItem):
    '''
    Terminal failure marker.

    Errors compare by message only; kind is informational.
    '''
    __slots__ = ('message', 'kind')

    INSUFFICIENT_OPERANDS = 'insufficient-operands'
    TYPE_MISMATCH = 'type-mismatch'
    DIVISION_BY_ZERO = 'division-by-zero'
    MODULO_BY_ZERO = 'modulo-by-zero'
    DOMAIN = 'domain'
    MALFORMED_INPUT = 'malformed-input'

    def __init__(self, message, kind=None):
        self.message = message
        self.kind = kind

    @classmethod
    def insufficient_operands(cls, operation, required, actual):
        return cls('{} requires {} operand(s), but stack has {}'.format(
                       operation, required, actual),
                   cls.INSUFFICIENT_OPERANDS)

    @classmethod
    def type_mismatch(cls, operation, required=2):
        return cls('{} requires numeric operand{}'.format(
                       operation, '' if required == 1 else 's'),
                   cls.TYPE_MISMATCH)

    @classmethod
    def division_by_zero(cls):
        return cls('Division by zero', cls.DIVISION_BY_ZERO)

    @classmethod
    def modulo_by_zero(cls):
        return cls('Modulo by zero', cls.MODULO_BY_ZERO)

    @classmethod
    def domain(cls, operation, reason):
        return cls('{}: {}'.format(operation, reason), cls.DOMAIN)

    @classmethod
    def from_exception(cls, operation, exception):
        '''
        Convert a CalculationError raised while computing operation.
        '''
        if isinstance(exception, DivisionByZero):
            return cls.division_by_zero()
        elif isinstance(exception, ModuloByZero):
            return cls.modulo_by_zero()
        elif isinstance(exception, DomainError):
            return cls.domain(operation, exception.reason)
        else:
            return cls.domain(operation, str(exception))

    def __eq__(self, other):
        if not isinstance(other, Error):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash(self.message)

    def __repr__(self):
        return 'Error({!r})'.format(self.message)


class OperandDescriptor(namedtuple('OperandDescriptor', 'name description')):
    '''
    Display-only description of one operand.
    '''
    __slots__ = ()


OperandDescriptor.X = OperandDescriptor('x', 'operand')
OperandDescriptor.Y = OperandDescriptor('y', 'operand')
OperandDescriptor.BASE = OperandDescriptor('base', 'base value')
OperandDescriptor.EXPONENT = OperandDescriptor('exponent', 'exponent value')
OperandDescriptor.ROOT_INDEX = OperandDescriptor('n', 'root index')
