'''
Symbol to Operation lookup.
'''

import logging


logger = logging.getLogger(__name__)


class Registry:
    '''
    Maps symbols and aliases to Operations.

    Several symbols may name the same Operation. Registering a symbol twice
    replaces the earlier Operation.
    '''

    def __init__(self):
        self._operations = {}

    def register(self, operation, *aliases):
        symbols = [symbol
                   for symbol
                   in (operation.symbol(),) + aliases
                   if symbol]
        for symbol in symbols:
            previous = self._operations.get(symbol)
            if previous is not None and previous is not operation:
                logger.debug('%r replaces %r as %r',
                             operation, previous, symbol)
            self._operations[symbol] = operation
        return operation

    def lookup(self, symbol):
        '''
        Return the Operation for symbol, or None.
        '''
        return self._operations.get(symbol)

    def all(self):
        '''
        Return a copy of the symbol to Operation mapping.
        '''
        return dict(self._operations)

    def aliases(self, operation):
        '''
        Return every symbol operation is registered under.
        '''
        return [symbol
                for symbol, registered
                in self._operations.items()
                if registered is operation]

    def operations(self):
        '''
        Return the distinct Operations, in registration order.
        '''
        seen = []
        for operation in self._operations.values():
            if not any(operation is known for known in seen):
                seen.append(operation)
        return seen

    def __contains__(self, symbol):
        return symbol in self._operations

    def __len__(self):
        return len(self._operations)

    def __iter__(self):
        return iter(list(self._operations))

    def __repr__(self):
        return '<{} of {} symbols>'.format(type(self).__name__, len(self))
