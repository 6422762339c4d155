from collections.abc import Mapping
import logging

import regex

from .util import UndefinedVariable, InvalidIdentifier


logger = logging.getLogger(__name__)


class VariableStore(Mapping):
    '''
    Variables bound by assignment, for the lifetime of a calculator.

    Read-only as a mapping; only bind() writes. Nothing is ever deleted.
    Iterates in name order.
    '''
    IDENTIFIER = regex.compile(r'[A-Za-z]+')

    def __init__(self):
        self.registers = dict()

    @classmethod
    def isidentifier(cls, name):
        '''
        Return True if name is letters only.
        '''
        return cls.IDENTIFIER.fullmatch(name) is not None

    def bind(self, name, value):
        '''
        Bind name to an integer value, overwriting any previous binding.
        '''
        if not self.isidentifier(name):
            raise InvalidIdentifier('Name {!r} is not letters only'
                                    .format(name))
        logger.debug('bind %s = %d', name, value)
        self.registers[name] = int(value)

    def lookup(self, name):
        '''
        Return the value bound to name.

        Unbound names are an error, never zero.
        '''
        try:
            return self.registers[name]
        except KeyError:
            raise UndefinedVariable('No such variable {!r}'.format(name)) \
                from None

    def __getitem__(self, name):
        return self.registers[name]

    def __iter__(self):
        return iter(sorted(self.registers))

    def __len__(self):
        return len(self.registers)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, dict(self.items()))
