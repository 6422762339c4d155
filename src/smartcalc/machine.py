from collections import deque
import logging
import operator

from .util import InvalidExpression, wrap_user_errors


logger = logging.getLogger(__name__)


def truncdiv(left, right):
    '''
    Integer division rounding toward zero, so -7 / 2 is -3, not -4.
    '''
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def power(left, right):
    '''
    left raised to right, right being a signed 32-bit exponent.
    '''
    if right < 0:
        raise ValueError('Negative exponent {}'.format(right))
    if right > Machine.MAX_EXPONENT:
        raise OverflowError('Exponent {} too large'.format(right))
    return left ** right


class Machine:
    '''
    Integer stack machine running postfix sequences.

    Operands are pushed; operators pop their right then left operand and
    push the result.
    '''

    # Largest exponent ^ accepts, as for a 32-bit signed int.
    MAX_EXPONENT = 2 ** 31 - 1

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': truncdiv,
        '^': power,
    }

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def run(self, postfix):
        '''
        Run a whole postfix sequence and return its single result.

        The stack is cleared first, so a machine can be reused.
        '''
        self.stack.clear()
        for item in postfix:
            self.feed(item)
        if len(self.stack) != 1:
            raise InvalidExpression('{} value(s) left on stack'
                                    .format(len(self.stack)))
        return self._popstack()[0]

    def feed(self, item):
        '''
        Push an integer operand, or apply an operator to the stack.
        '''
        if isinstance(item, int):
            self._pshstack(item)
        else:
            right, left = self._popstack(2)
            self._pshstack(self.apply(item, left, right))

    @wrap_user_errors('Cannot apply {1} to {2} and {3}')
    def apply(self, op, left, right):
        '''
        Apply a binary operator by its symbol.
        '''
        try:
            f = type(self).BUILTINS[op]
        except KeyError:
            raise InvalidExpression('No such operator {!r}'.format(op)) \
                from None
        return f(left, right)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InvalidExpression('Less than {} element(s) on stack'
                                    .format(n))
        return [self.stack.pop() for _ in range(n)]
