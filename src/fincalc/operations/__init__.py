'''
The calculator's operation library.

REGISTRY holds every operation under its symbol and aliases. Build another
Registry with register_all() to extend or override it.
'''

from collections import OrderedDict

from ..registry import Registry
from . import basic, scientific, financial


MODULES = basic, scientific, financial

CATEGORIES = OrderedDict([
    ('Basic', basic.OPERATIONS),
    ('Scientific', scientific.OPERATIONS),
    ('Time value of money', financial.TIME_VALUE),
    ('Investment', financial.INVESTMENT),
    ('Real estate', financial.REAL_ESTATE),
    ('Loans', financial.LOANS),
    ('Bonds', financial.BONDS),
    ('Options', financial.OPTIONS),
    ('Tax and retirement', financial.TAX),
])


def register_all(registry):
    '''
    Register every operation, with its aliases, and return registry.
    '''
    for module in MODULES:
        for operation in module.OPERATIONS:
            registry.register(operation, *module.ALIASES.get(operation, ()))
    return registry


REGISTRY = register_all(Registry())
