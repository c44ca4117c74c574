from functools import wraps


class FinCalcError(Exception):
    pass


class CalculationError(FinCalcError):
    '''
    Raised by a formula when its result is undefined.

    Never escapes Operation.execute, which turns it into an Error item.
    '''


class DivisionByZero(CalculationError):
    pass


class ModuloByZero(CalculationError):
    pass


class DomainError(CalculationError):
    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to FinCalcErrors.

    Passes through FinCalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except FinCalcError:
                raise
            except Exception as e:
                raise FinCalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
