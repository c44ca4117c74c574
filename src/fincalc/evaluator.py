'''
Run a sequence of stack items against an empty working stack.

Numbers are pushed, Operations execute against the working stack. How an
Error ends an evaluation depends on how many Operations the input holds:

- one Operation: the working stack is returned as is, Error on top, so the
  caller still sees the operands that were not consumed;
- several: everything but the Error is discarded and [error] is returned,
  since the intermediate state of a chain means nothing to the caller.

An Error already present in the input always comes back alone.
'''

import logging

from .items import Number, Error
from .operation import Operation
from .precision import resolve


logger = logging.getLogger(__name__)


class StackEvaluator:
    def __init__(self, precision=None):
        '''
        :param precision: Precision to compute with; the process-wide one
                          when None.
        '''
        self.precision = precision

    def evaluate(self, items):
        '''
        Return the final working stack for items.

        Raises TypeError for anything that is not a Number, Error or
        Operation.
        '''
        items = list(items)
        multiop = sum(isinstance(item, Operation) for item in items) > 1
        # Settings can't change halfway through.
        precision = resolve(self.precision).copy()
        stack = []
        for item in items:
            if isinstance(item, Number):
                stack.append(item)
            elif isinstance(item, Operation):
                item.execute(stack, precision)
                if stack and isinstance(stack[-1], Error):
                    if multiop:
                        logger.debug('%r failed, discarding %d item(s): %s',
                                     item, len(stack) - 1, stack[-1].message)
                        return [stack[-1]]
                    logger.debug('%r failed: %s', item, stack[-1].message)
                    return stack
            elif isinstance(item, Error):
                logger.debug('Error in input: %s', item.message)
                return [item]
            else:
                raise TypeError('Not a stack item: {!r}'.format(item))
        logger.debug('Evaluated %d item(s) to %r', len(items), stack)
        return stack

    def evaluate_to_number(self, items):
        '''
        Return the Number items evaluate to, or None.

        None unless the result is exactly one Number.
        '''
        stack = self.evaluate(items)
        if len(stack) == 1 and isinstance(stack[0], Number):
            return stack[0]
        return None

    def evaluate_to_error(self, items):
        stack = self.evaluate(items)
        if stack and isinstance(stack[-1], Error):
            return stack[-1]
        return None


_DEFAULT = StackEvaluator()


def evaluate(items):
    return _DEFAULT.evaluate(items)


def evaluate_to_number(items):
    return _DEFAULT.evaluate_to_number(items)


def evaluate_to_error(items):
    return _DEFAULT.evaluate_to_error(items)
