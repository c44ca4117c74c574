'''
RPN financial calculator.

Evaluates reverse Polish sequences of numbers and operations over exact
decimals: arithmetic, powers and roots, logarithms, trigonometry, and
financial formulas (loan payments, rates of return, real estate, bonds,
options, tax).

    >>> from fincalc import evaluate, Number, REGISTRY
    >>> evaluate([Number(3), Number(4), REGISTRY.lookup('+')])
    [Number('7')]

Calculation errors are values, not exceptions: a failing operation leaves an
Error on the stack. With a single operation the rest of the stack is kept,
to show what the operation failed on; with several only the Error is
returned.

Division and roots round to a number of decimal places (10 by default),
set process-wide with fincalc.precision, or per StackEvaluator or Session.
'''

from .value import Value
from .items import StackItem, Number, Error, OperandDescriptor
from .operation import Operation, Formula, FloatFormula
from .registry import Registry
from .evaluator import (StackEvaluator, evaluate, evaluate_to_number,
                        evaluate_to_error)
from .operations import REGISTRY, register_all
from .precision import Precision
from .session import Session
from .util import FinCalcError


__all__ = ('Value', 'StackItem', 'Number', 'Error', 'OperandDescriptor',
           'Operation', 'Formula', 'FloatFormula',
           'Registry', 'StackEvaluator', 'evaluate', 'evaluate_to_number',
           'evaluate_to_error', 'REGISTRY', 'register_all', 'Precision',
           'Session', 'FinCalcError')
