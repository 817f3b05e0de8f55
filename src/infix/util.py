from functools import wraps


class CalculatorError(Exception):
    pass


class NotBalancedError(CalculatorError):
    '''
    Unbalanced parentheses, or an equation that could not be evaluated.
    '''
    def __init__(self, message='Equation is not valid (not balanced).'):
        super().__init__(message)


class InvalidPositionError(CalculatorError):
    pass


class EmptyHistoryError(CalculatorError):
    pass


class NoUndoneEquationError(CalculatorError):
    pass


def wrap_user_errors(fmt, error=CalculatorError):
    '''
    Decorator that converts stray exceptions to calculator errors.

    Passes through CalculatorErrors. Anything else is re-raised as ``error``
    with ``fmt`` formatted against the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
