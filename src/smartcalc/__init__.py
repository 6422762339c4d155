'''
Smart calculator.

Evaluates integer infix expressions of any size with + - * / ^ and
parentheses, and keeps letter-only variables across lines:

    > a = 4
    > b = 5
    > a*2 + (b - 1)^2
    24

Leading and repeated signs fold into one operator (8---1 is 8-1), division
rounds toward zero, and ^ is left-associative (2^3^2 is 64). Each line
either prints a value or exactly one error message.
'''

from .calculator import Calculator
from .cli import CLI
from .converter import Converter
from .lexer import Lexer, normalize
from .machine import Machine
from .store import VariableStore
from .util import (CalcError, ErrorKind, InvalidAssignment, InvalidExpression,
                   InvalidIdentifier, UndefinedVariable, UnknownCommand)


__all__ = ('Calculator', 'CLI', 'Converter', 'Lexer', 'Machine',
           'VariableStore', 'normalize', 'CalcError', 'ErrorKind',
           'InvalidAssignment', 'InvalidExpression', 'InvalidIdentifier',
           'UndefinedVariable', 'UnknownCommand')
