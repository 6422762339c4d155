from collections import namedtuple
from functools import reduce
import operator

import regex

from .store import VariableStore
from .util import InvalidExpression


NUMBER = 'number'
IDENTIFIER = 'identifier'
OPERATOR = 'operator'
LPAREN = 'lparen'
RPAREN = 'rparen'
SPACE = 'space'

# Lexemes after which an operand is expected
OPERAND_FOLLOWS = {OPERATOR, LPAREN}


Token = namedtuple('Token', 'kind text value')
Token.__doc__ = '''
Lexeme of an infix expression.

value is the resolved integer for numbers and identifiers, else None.
'''


# Order matters: each pass works on the output of the previous one.
SIGN_FOLDS = (
    # 8--1 is 8+1; a run of three leaves +- for the next pass.
    (regex.compile(r'-{2}'), '+'),
    (regex.compile(r'\++-'), '-'),
    (regex.compile(r'\++'), '+'),
)


def normalize(text):
    '''
    Fold chains of leading and consecutive signs into one binary operator.

    A leading + is dropped and a leading - becomes 0-, so the result never
    starts with a sign. Signs separated by whitespace are left alone.
    '''
    text = text.strip()
    if text.startswith('+'):
        text = text[1:]
    if text.startswith('-'):
        text = '0' + text
    for pattern, replacement in SIGN_FOLDS:
        text = pattern.sub(replacement, text)
    return text


class Lexer:
    '''
    Lexer for the infix *regular* grammar.

    Resolves identifiers through the variables mapping it's given, so one
    lexer belongs to one calculator.
    '''
    IDENTIFIER = r'[A-Za-z]+'
    # A sign only belongs to the number where an operand is expected, e.g.
    # 3*-2, otherwise 1-2 would lex as two numbers.
    SIGNED_NUMBER = r'[-+]?[0-9]+'
    UNSIGNED_NUMBER = r'[0-9]+'
    OPERATOR = r'[-+*/^]'
    LPAREN = r'\('
    RPAREN = r'\)'
    SPACE = r'\s+'

    LEXEME = r'''
              (?<identifier>{IDENTIFIER})
              |(?<number>{NUMBER})
              |(?<operator>{OPERATOR})
              |(?<lparen>{LPAREN})
              |(?<rparen>{RPAREN})
              |(?<space>{SPACE})
              '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, variables=None):
        '''
        :param variables: mapping with a lookup(name) method, usually a
                          VariableStore.
        '''
        self.variables = VariableStore() if variables is None else variables
        # Keyed on whether an operand is expected next.
        self.patterns = {operand: regex.compile(self._lexeme(number),
                                                flags=type(self).FLAGS)
                         for operand, number
                         in [(True, type(self).SIGNED_NUMBER),
                             (False, type(self).UNSIGNED_NUMBER)]}

    @classmethod
    def _lexeme(cls, number):
        return cls.LEXEME.format(IDENTIFIER=cls.IDENTIFIER,
                                 NUMBER=number,
                                 OPERATOR=cls.OPERATOR,
                                 LPAREN=cls.LPAREN,
                                 RPAREN=cls.RPAREN,
                                 SPACE=cls.SPACE)

    def lex(self, line):
        '''
        Take a line and yield all lexeme matches, spaces included.

        Raises InvalidExpression on the first character that can't be lexed.
        '''
        position = 0
        operand = True
        while position < len(line):
            match = self.patterns[operand].match(line, position)
            if match is None:
                raise InvalidExpression("Couldn't lex {0}"
                                        .format(line[position:].strip()))
            yield match
            position = match.end()
            kind = match.lastgroup
            if kind != SPACE:
                operand = kind in OPERAND_FOLLOWS

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched named groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def tokens(self, line):
        '''
        Yield resolved tokens of a normalized line, skipping spaces.
        '''
        for match in self.lex(line):
            kind = match.lastgroup
            text = match.group(kind)
            if kind == SPACE:
                continue
            elif kind == NUMBER:
                yield Token(kind, text, int(text))
            elif kind == IDENTIFIER:
                yield Token(kind, text, self._resolve(text))
            else:
                yield Token(kind, text, None)

    def _resolve(self, name):
        return self.variables.lookup(name)
