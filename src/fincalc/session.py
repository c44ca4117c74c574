'''
Line at a time calculator state, for the console front end.
'''

import logging

from .evaluator import StackEvaluator
from .items import Number, Error
from .lexer import Lexer
from .operations import REGISTRY
from .precision import Precision
from .util import FinCalcError


logger = logging.getLogger(__name__)


class Session:
    '''
    A stack of Numbers carried from one line of input to the next.

    Each line is evaluated on top of the carried stack. Only successful
    results replace it, so a mistake never costs the numbers already entered.
    '''

    def __init__(self, registry=None, precision=None):
        self.registry = REGISTRY if registry is None else registry
        self.precision = Precision() if precision is None else precision
        self.lexer = Lexer(self.registry)
        self.evaluator = StackEvaluator(self.precision)
        self.stack = []

    def feed(self, line):
        '''
        Evaluate line against the carried stack and return the new stack.

        Raises FinCalcError when the line doesn't lex or evaluates to an
        Error; the carried stack is left as it was.
        '''
        items = self.stack + list(self.lexer.items(line))
        result = self.evaluator.evaluate(items)
        if result and isinstance(result[-1], Error):
            logger.debug('Keeping %r after %r', self.stack, result[-1])
            raise FinCalcError(self.format_item(result[-1]))
        self.stack = result
        return self.stack

    def clear(self):
        self.stack = []

    def format_item(self, item):
        '''
        Numbers to the precision's places, Errors as ERROR: message.
        '''
        if isinstance(item, Number):
            return str(item.value.quantize(self.precision))
        elif isinstance(item, Error):
            return 'ERROR: {}'.format(item.message)
        else:
            raise TypeError('Not a stack item: {!r}'.format(item))

    def format_stack(self):
        '''
        Return the carried stack, bottom first, one item per line.
        '''
        return '\n'.join(map(self.format_item, self.stack))

    def describe(self, symbol):
        '''
        Return help text for the operation named by symbol.
        '''
        operation = self.registry.lookup(symbol)
        if operation is None:
            raise FinCalcError('No such operation {}'.format(symbol))
        lines = ['{} ({}): {}'.format(operation.name(),
                                      ' '.join(self.registry.aliases(operation)),
                                      operation.description())]
        lines.extend('  {}: {}'.format(descriptor.name, descriptor.description)
                     for descriptor
                     in operation.operand_descriptors())
        if operation.example():
            lines.append(operation.example())
        return '\n'.join(lines)
