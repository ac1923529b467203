'''
Tokens: either a Number or an Operator, tagged with which.
'''

from collections import namedtuple
from enum import Enum

from .number import Number
from .operators import Operator


class TokenKind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'


class Token(namedtuple('Token', ['kind', 'payload'])):
    '''
    Tagged union over Number and Operator.

    Build with Token.number() or Token.operator(); dispatch on kind.
    '''
    __slots__ = ()

    @classmethod
    def number(cls, number):
        if not isinstance(number, Number):
            raise TypeError('Not a Number: {}'.format(repr(number)))
        return cls(TokenKind.NUMBER, number)

    @classmethod
    def operator(cls, op):
        if not isinstance(op, Operator):
            raise TypeError('Not an Operator: {}'.format(repr(op)))
        return cls(TokenKind.OPERATOR, op)

    @property
    def is_number(self):
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self):
        return self.kind is TokenKind.OPERATOR

    def __str__(self):
        return str(self.payload)
