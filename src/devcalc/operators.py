'''
Infix operators and parentheses.
'''

from enum import Enum
import operator

from .util import wrap_user_errors


class Operator(Enum):
    '''
    Binary operator or parenthesis, valued by its lexeme.
    '''
    SUM = '+'
    SUB = '-'
    AND = '&'
    XOR = '^'
    OR = '|'
    SHIFTL = '<<'
    SHIFTR = '>>'
    LPARENTHESIS = '('
    RPARENTHESIS = ')'

    @property
    def lexeme(self):
        return self.value

    @property
    def precedence(self):
        '''
        Higher binds tighter. Parentheses are 0, never compared.
        '''
        return _PRECEDENCE[self]

    @property
    def is_parenthesis(self):
        return self in (Operator.LPARENTHESIS, Operator.RPARENTHESIS)

    @property
    def is_left_associative(self):
        return not self.is_parenthesis

    @classmethod
    def from_bytes(cls, data):
        '''
        Operator at the start of data, or None.

        Two byte operators need both bytes.
        '''
        for op in _BY_LENGTH:
            if data.startswith(op.lexeme.encode('ascii')):
                return op
        return None

    @wrap_user_errors('Cannot evaluate {1} {0} {2}')
    def apply(self, a, b):
        '''
        Apply to two Numbers, a being the left operand.

        Returns None for parentheses, which never apply.
        '''
        function = _FUNCTIONS.get(self)
        if function is None:
            return None
        return function(a, b)

    def __str__(self):
        return self.lexeme


_PRECEDENCE = {
    Operator.SUM: 9,
    Operator.SUB: 9,
    Operator.SHIFTL: 8,
    Operator.SHIFTR: 8,
    Operator.AND: 7,
    Operator.XOR: 6,
    Operator.OR: 5,
    Operator.LPARENTHESIS: 0,
    Operator.RPARENTHESIS: 0,
}

_FUNCTIONS = {
    Operator.SUM: operator.__add__,
    Operator.SUB: operator.__sub__,
    Operator.AND: operator.__and__,
    Operator.XOR: operator.__xor__,
    Operator.OR: operator.__or__,
    Operator.SHIFTL: operator.__lshift__,
    Operator.SHIFTR: operator.__rshift__,
}

# Longest lexemes first, so << is not taken for an unknown <.
_BY_LENGTH = sorted(Operator, key=lambda op: -len(op.lexeme))
