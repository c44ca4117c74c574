'''
The contract every calculator operation satisfies.

Operations are stateless, immutable singletons. Most are built from a plain
function with the operation() or formula() decorators:

    @operation('ADD', '+', description='Addition')
    def add(x, y):
        return x + y

The function receives the operand Values bottom to top and returns the
result; it raises a CalculationError (DomainError, DivisionByZero,
ModuloByZero) when the result is undefined. Functions that need the
Precision take it as a keyword-only precision argument. formula() functions
get and return floats instead.
'''

from inspect import signature as getsignature, Parameter
import math

from .items import StackItem, Number, Error, OperandDescriptor
from .precision import resolve
from .util import CalculationError, DomainError
from .value import Value


UNDEFINED = 'result is undefined or infinite'


def _arity(function):
    '''
    Return number of non-default positional arguments.
    '''
    parameters = getsignature(function).parameters.values()
    positionals = [parameter
                   for parameter
                   in parameters
                   if parameter.kind in (Parameter.POSITIONAL_ONLY,
                                         Parameter.POSITIONAL_OR_KEYWORD) and
                      parameter.default is Parameter.empty]
    return len(positionals)


def _generic_descriptors(count):
    if count <= 2:
        return (OperandDescriptor.X, OperandDescriptor.Y)[:count]
    return tuple(OperandDescriptor('x{}'.format(i), 'operand')
                 for i in range(1, count + 1))


class Operation(StackItem):
    '''
    Calculation applied in place to a working stack.

    Subclasses implement compute(); execute() handles arity, operand types
    and error reporting for all of them.
    '''

    __slots__ = ('_name', '_symbol', '_operands', '_descriptors',
                 '_description', '_example')

    def __init__(self, name='', symbol='', operands=2, descriptors=None,
                 description='', example=''):
        if descriptors is not None:
            descriptors = tuple(OperandDescriptor(*descriptor)
                                for descriptor in descriptors)
            if len(descriptors) != operands:
                raise ValueError('{} takes {} operand(s) but describes {}'
                                 .format(name or symbol, operands,
                                         len(descriptors)))
        if operands < 1:
            raise ValueError('{} must take at least one operand'
                             .format(name or symbol))
        set_ = object.__setattr__
        set_(self, '_name', name)
        set_(self, '_symbol', symbol)
        set_(self, '_operands', operands)
        set_(self, '_descriptors', descriptors)
        set_(self, '_description', description)
        set_(self, '_example', example)

    def __setattr__(self, name, value):
        raise AttributeError('Operations are immutable')

    def operand_count(self):
        return self._operands

    def operand_descriptors(self):
        '''
        Describe operands, bottom of stack first.
        '''
        if self._descriptors is None:
            return list(_generic_descriptors(self._operands))
        return list(self._descriptors)

    def symbol(self):
        return self._symbol

    def name(self):
        '''
        Identifier used in error messages, e.g. ADD for +.
        '''
        return self._name or self._symbol

    def description(self):
        return self._description

    def example(self):
        return self._example

    def execute(self, stack, precision=None):
        '''
        Pop operands, push the result or an Error, and return the stack.

        When the stack is too shallow the Error is pushed without popping
        anything. Non-numeric operands are consumed.
        '''
        required = self.operand_count()
        if len(stack) < required:
            stack.append(Error.insufficient_operands(self.name(), required,
                                                     len(stack)))
            return stack
        # If you don't reverse, 9 2 POW does 2 ** 9.
        operands = [stack.pop() for _ in range(required)][::-1]
        if not all(isinstance(operand, Number) for operand in operands):
            stack.append(Error.type_mismatch(self.name(), required))
            return stack
        try:
            result = self.compute(*[operand.value for operand in operands],
                                  precision=resolve(precision))
        except CalculationError as e:
            stack.append(Error.from_exception(self.name(), e))
        else:
            stack.append(Number(result))
        return stack

    def compute(self, *values, precision):
        '''
        Return the result Value for operand Values, bottom of stack first.
        '''
        raise NotImplementedError

    def __repr__(self):
        return '<{} {} {!r}>'.format(type(self).__name__, self.name(),
                                     self.symbol())


class Formula(Operation):
    '''
    Operation computed by a function of Values.

    Arity comes from the function's signature.
    '''

    __slots__ = ('_function', '_wants_precision')

    def __init__(self, function, name='', symbol='', descriptors=None,
                 description='', example=''):
        super().__init__(name, symbol, _arity(function), descriptors,
                         description, example)
        object.__setattr__(self, '_function', function)
        object.__setattr__(self, '_wants_precision',
                           'precision' in getsignature(function).parameters)

    def compute(self, *values, precision=None):
        if self._wants_precision:
            return self._function(*values, precision=resolve(precision))
        return self._function(*values)


class FloatFormula(Formula):
    '''
    Operation computed in double precision floats.

    For transcendental and financial formulas, where decimal precision buys
    nothing. Exceptions from the float primitives and non-finite results
    become DomainErrors.
    '''

    __slots__ = ()

    def compute(self, *values, precision=None):
        return float_call(self._function, *values)


def float_call(function, *values):
    '''
    Apply a float function to Values and return the result as a Value.

    Raises DomainError when the function fails or the result isn't finite.
    '''
    try:
        result = function(*[value.to_float() for value in values])
    except (ArithmeticError, ValueError):
        raise DomainError(UNDEFINED) from None
    if not math.isfinite(result):
        raise DomainError(UNDEFINED)
    return Value.from_float(result)


def operation(name, symbol='', operands=None, description='', example=''):
    '''
    Decorator turning a function of Values into a Formula.

    :param operands: (name, description) pairs, bottom of stack first.
    '''
    def decorator(function):
        return Formula(function, name, symbol, operands, description, example)
    return decorator


def formula(name, symbol='', operands=None, description='', example=''):
    '''
    Decorator turning a function of floats into a FloatFormula.
    '''
    def decorator(function):
        return FloatFormula(function, name, symbol, operands, description,
                            example)
    return decorator
