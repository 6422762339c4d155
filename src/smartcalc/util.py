from enum import Enum
from functools import wraps
import sys


class ErrorKind(Enum):
    '''
    Outcome of one evaluation attempt. At most one is ever reported.
    '''
    NONE = None
    UNKNOWN_COMMAND = 'Unknown Command'
    INVALID_EXPRESSION = 'Invalid Expression'
    INVALID_IDENTIFIER = 'Invalid identifier'
    INVALID_ASSIGNMENT = 'Invalid assignment'
    UNDEFINED_VARIABLE = 'Unknown variable'

    @property
    def message(self):
        return self.value


class CalcError(Exception):
    '''
    Base of every user-facing calculator error.

    The first argument, when given, is a detail for logs; what gets shown to
    the user is always the kind's message.
    '''
    kind = ErrorKind.NONE

    @property
    def message(self):
        return self.kind.message


class UnknownCommand(CalcError):
    kind = ErrorKind.UNKNOWN_COMMAND


class InvalidExpression(CalcError):
    kind = ErrorKind.INVALID_EXPRESSION


class InvalidIdentifier(CalcError):
    kind = ErrorKind.INVALID_IDENTIFIER


class InvalidAssignment(CalcError):
    kind = ErrorKind.INVALID_ASSIGNMENT


class UndefinedVariable(CalcError):
    kind = ErrorKind.UNDEFINED_VARIABLE


class Exit(Exception):
    '''
    Raised by the line dispatcher when the session should end.
    '''


def wrap_user_errors(fmt):
    '''
    Decorator that converts arithmetic faults into InvalidExpression.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise InvalidExpression(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def lift_int_digit_limit():
    '''
    Let int and str convert integers of any length.

    Python 3.11+ caps these conversions at 4300 digits by default, which
    would make large literals and results unprintable. Process-wide.
    '''
    set_limit = getattr(sys, 'set_int_max_str_digits', None)
    if set_limit is not None:
        set_limit(0)
