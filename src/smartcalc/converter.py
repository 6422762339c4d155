from collections import deque
import logging

from .lexer import NUMBER, IDENTIFIER, OPERATOR, LPAREN, RPAREN
from .util import InvalidExpression


logger = logging.getLogger(__name__)


class Converter:
    '''
    Infix to postfix (RPN) conversion, by shunting-yard.

    Operators of equal priority pop each other, so every operator, ^
    included, is left-associative: 2^3^2 is (2^3)^2.
    '''
    LPAREN = '('

    # Higher binds tighter. ( only ever blocks popping.
    PRIORITIES = {
        '(': 3,
        '^': 2,
        '*': 1,
        '/': 1,
        '+': 0,
        '-': 0,
    }
    DEFAULT_PRIORITY = 0

    def priority(self, op):
        return type(self).PRIORITIES.get(op, type(self).DEFAULT_PRIORITY)

    def convert(self, tokens):
        '''
        Take resolved tokens and return the postfix sequence.

        Operands come out as their integer values, operators as their text.
        '''
        output = []
        stack = deque()
        for token in tokens:
            if token.kind in {NUMBER, IDENTIFIER}:
                output.append(token.value)
            elif token.kind == LPAREN:
                stack.append(type(self).LPAREN)
            elif token.kind == RPAREN:
                self._close(stack, output)
            elif token.kind == OPERATOR:
                self._operator(token.text, stack, output)
            else:
                raise InvalidExpression('Unexpected token {!r}'
                                        .format(token.text))
        while stack:
            top = stack.pop()
            if top == type(self).LPAREN:
                raise InvalidExpression('Unmatched (')
            output.append(top)
        logger.debug('postfix: %s', output)
        return output

    def _close(self, stack, output):
        '''
        Pop operators to output up to and including the matching (.
        '''
        while stack and stack[-1] != type(self).LPAREN:
            output.append(stack.pop())
        if not stack:
            raise InvalidExpression('Unmatched )')
        stack.pop()

    def _operator(self, op, stack, output):
        if not stack or stack[-1] == type(self).LPAREN:
            stack.append(op)
        elif self.priority(stack[-1]) < self.priority(op):
            stack.append(op)
        else:
            while (stack and stack[-1] != type(self).LPAREN and
                   self.priority(stack[-1]) >= self.priority(op)):
                output.append(stack.pop())
            stack.append(op)
