'''
Decimal places and rounding used by division, roots and display.

There is one process-wide Precision, returned by current(). It is plain
mutable state: change it between evaluations, not during one. Sessions that
need their own settings carry their own Precision instance and pass it to
the evaluator.
'''

from decimal import (Decimal, ROUND_UP, ROUND_DOWN, ROUND_CEILING,
                     ROUND_FLOOR, ROUND_HALF_UP, ROUND_HALF_DOWN,
                     ROUND_HALF_EVEN, ROUND_05UP)

from .util import FinCalcError


ROUNDING_MODES = {
    'UP': ROUND_UP,
    'DOWN': ROUND_DOWN,
    'CEILING': ROUND_CEILING,
    'FLOOR': ROUND_FLOOR,
    'HALF_UP': ROUND_HALF_UP,
    'HALF_DOWN': ROUND_HALF_DOWN,
    'HALF_EVEN': ROUND_HALF_EVEN,
    '05UP': ROUND_05UP,
}


class Precision:
    '''
    Number of decimal places plus a decimal rounding mode.
    '''

    DEFAULT_PLACES = 10
    MIN_PLACES = 1
    MAX_PLACES = 50
    DEFAULT_ROUNDING = ROUND_HALF_UP

    def __init__(self, places=None, rounding=None):
        cls = type(self)
        self.places = cls.DEFAULT_PLACES if places is None else places
        self.rounding = cls.DEFAULT_ROUNDING if rounding is None else rounding

    @property
    def places(self):
        return self._places

    @places.setter
    def places(self, places):
        cls = type(self)
        if isinstance(places, bool) or not isinstance(places, int) or \
           not cls.MIN_PLACES <= places <= cls.MAX_PLACES:
            raise FinCalcError(
                'Precision must be between {} and {}, got: {!r}'.format(
                    cls.MIN_PLACES, cls.MAX_PLACES, places))
        self._places = places

    @property
    def rounding(self):
        return self._rounding

    @rounding.setter
    def rounding(self, rounding):
        # Accept both the decimal constant and its short name.
        rounding = ROUNDING_MODES.get(rounding, rounding)
        if rounding not in ROUNDING_MODES.values():
            raise FinCalcError('No such rounding mode {!r}'.format(rounding))
        self._rounding = rounding

    @property
    def quantum(self):
        '''
        Smallest representable step, e.g. Decimal('0.01') for two places.
        '''
        return Decimal((0, (1,), -self.places))

    def quantize(self, decimal, context=None):
        return decimal.quantize(self.quantum, rounding=self.rounding,
                                context=context)

    def copy(self):
        return type(self)(self.places, self.rounding)

    def __eq__(self, other):
        if not isinstance(other, Precision):
            return NotImplemented
        return (self.places, self.rounding) == (other.places, other.rounding)

    def __repr__(self):
        return '{}(places={!r}, rounding={!r})'.format(
            type(self).__name__, self.places, self.rounding)


_PROCESS = Precision()


def current():
    '''
    Return the process-wide Precision.
    '''
    return _PROCESS


def resolve(precision=None):
    '''
    Return precision, or the process-wide one when None.
    '''
    return _PROCESS if precision is None else precision


def set_places(places):
    _PROCESS.places = places


def set_rounding(rounding):
    _PROCESS.rounding = rounding


def reset():
    '''
    Restore process-wide defaults.
    '''
    _PROCESS.places = Precision.DEFAULT_PLACES
    _PROCESS.rounding = Precision.DEFAULT_ROUNDING
