'''
Variable store tests
'''

from smartcalc.store import VariableStore
from smartcalc.util import InvalidIdentifier, UndefinedVariable

from pytest import raises


def test_bind_and_lookup():
    s = VariableStore()
    s.bind('b', 2)
    s.bind('a', 10 ** 50)
    assert s.lookup('a') == 10 ** 50
    assert list(s) == ['a', 'b']
    assert len(s) == 2


def test_overwrite():
    s = VariableStore()
    s.bind('a', 1)
    s.bind('a', -1)
    assert s['a'] == -1


def test_lookup_never_defaults():
    s = VariableStore()
    with raises(UndefinedVariable):
        s.lookup('a')
    assert 'a' not in s


def test_identifiers_are_letters_only():
    assert VariableStore.isidentifier('Abc')
    assert not VariableStore.isidentifier('a1')
    assert not VariableStore.isidentifier('a_b')
    assert not VariableStore.isidentifier('')
    with raises(InvalidIdentifier):
        VariableStore().bind('x1', 1)


def test_read_only_mapping():
    s = VariableStore()
    with raises(TypeError):
        s['a'] = 1
