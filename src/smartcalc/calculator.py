import logging

from .converter import Converter
from .lexer import Lexer, normalize
from .machine import Machine
from .store import VariableStore
from .util import (CalcError, Exit, InvalidAssignment, InvalidExpression,
                   InvalidIdentifier, UnknownCommand, lift_int_digit_limit)


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Infix integer calculator with variables.

    Every attempt either returns a value or raises exactly one CalcError;
    the first failure ends the attempt.
    '''

    HELP = '''\
The program evaluates integer expressions with + - * / ^ and parentheses.
Assign variables with name = expression; names are letters only.
Division rounds toward zero, and ^ is evaluated left to right.
Type /exit to quit.'''

    def __init__(self, variables=None):
        '''
        :param variables: VariableStore to share, fresh one if None.
        '''
        lift_int_digit_limit()
        self.variables = VariableStore() if variables is None else variables
        self.lexer = Lexer(self.variables)
        self.converter = Converter()
        self.machine = Machine()

    def postfix(self, text):
        '''
        Return the postfix sequence of an infix expression.
        '''
        normalized = normalize(text)
        logger.debug('normalized %r to %r', text, normalized)
        if not normalized:
            raise InvalidExpression('Empty expression')
        return self.converter.convert(self.lexer.tokens(normalized))

    def evaluate_expression(self, text):
        '''
        Evaluate a bare infix expression and return its integer value.
        '''
        return self.machine.run(self.postfix(text))

    def evaluate_assignment(self, text):
        '''
        Evaluate name = expression, bind name, and return the value.

        Variables are left untouched unless the whole statement succeeds.
        '''
        parts = text.split('=')
        # Like a split that drops a trailing empty part, so 'x =' is rejected
        # here but 'x = ' goes on to be an empty expression.
        if len(parts) != 2 or not parts[1]:
            raise InvalidAssignment('Expected exactly one = in {!r}'
                                    .format(text))
        name, expression = (part.strip() for part in parts)
        if not self.variables.isidentifier(name):
            raise InvalidIdentifier('Name {!r} is not letters only'
                                    .format(name))
        value = self.evaluate_expression(expression)
        self.variables.bind(name, value)
        return value

    def command(self, line):
        '''
        Run a /command.
        '''
        if line == '/exit':
            raise Exit
        elif line == '/help':
            return type(self).HELP
        raise UnknownCommand('No such command {!r}'.format(line))

    def process(self, line):
        '''
        Process one line of input and return what to print, if anything.

        Errors are rendered as their message. Raises Exit on /exit.
        '''
        line = line.rstrip('\r\n')
        if not line.strip():
            return None
        try:
            if line.strip().startswith('/'):
                logger.debug('command %r', line)
                return self.command(line.strip())
            elif '=' in line:
                logger.debug('assignment %r', line)
                self.evaluate_assignment(line)
                return None
            else:
                logger.debug('expression %r', line)
                return str(self.evaluate_expression(line))
        except CalcError as e:
            logger.debug('%s: %s', type(e).__name__, e)
            return e.message
