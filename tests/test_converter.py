'''
Shunting-yard conversion tests
'''

from smartcalc.converter import Converter
from smartcalc.lexer import Lexer, normalize
from smartcalc.util import InvalidExpression

from pytest import mark, raises


def postfix(line):
    return Converter().convert(Lexer().tokens(normalize(line)))


@mark.parametrize('infix, expected', [
    ('1+2', [1, 2, '+']),
    ('1+2*3', [1, 2, 3, '*', '+']),
    ('1*2+3', [1, 2, '*', 3, '+']),
    ('(1+2)*3', [1, 2, '+', 3, '*']),
    ('1-2-3', [1, 2, '-', 3, '-']),
    ('8/4/2', [8, 4, '/', 2, '/']),
    ('2*3^2', [2, 3, 2, '^', '*']),
    ('-3', [0, 3, '-']),
    ('8---1', [8, 1, '-']),
])
def test_convert(infix, expected):
    assert postfix(infix) == expected


def test_power_is_left_associative():
    assert postfix('2^3^2') == [2, 3, '^', 2, '^']


def test_parenthesis_overrides_left_associativity():
    assert postfix('2^(3^2)') == [2, 3, 2, '^', '^']


@mark.parametrize('infix', ['(1+2', '1+2)', ')(', '((1)', '1+(2*3))'])
def test_unbalanced_parentheses(infix):
    with raises(InvalidExpression):
        postfix(infix)


def test_priorities():
    c = Converter()
    assert c.priority('(') > c.priority('^') > c.priority('*')
    assert c.priority('*') == c.priority('/') > c.priority('+')
    assert c.priority('+') == c.priority('-') == c.priority('?') == 0


def test_empty():
    assert postfix('') == []
    assert postfix('()') == []
