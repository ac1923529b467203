'''
Shunting-yard: infix lexemes to a postfix token sequence.
'''

from collections import deque
import logging

from .lexer import Lexer
from .operators import Operator
from .tokens import Token, TokenKind
from .util import StructuralError


logger = logging.getLogger(__name__)


def _pops_before(top, op):
    '''
    True if top of the operator stack is output before pushing op.
    '''
    if top is Operator.LPARENTHESIS:
        return False
    return (top.precedence > op.precedence or
            top.precedence == op.precedence and op.is_left_associative)


def shunting_yard(expression, lexer=None):
    '''
    Parse an infix expression into postfix (RPN) order.

    :param expression: str or bytes.
    :returns: deque of Tokens, postfix.
    :raises LexicalError: on a bad literal or unknown operator.
    :raises StructuralError: on mismatched parentheses.
    '''
    lexer = lexer or Lexer()
    output = deque()
    operators = []
    for token, start, end in lexer.lex(expression):
        if token.kind is TokenKind.NUMBER:
            output.append(token)
            continue
        op = token.payload
        if op is Operator.LPARENTHESIS:
            operators.append(op)
        elif op is Operator.RPARENTHESIS:
            while operators and operators[-1] is not Operator.LPARENTHESIS:
                output.append(Token.operator(operators.pop()))
            if not operators:
                raise StructuralError('Error mismatched parenthesis',
                                      column=end, source=_source(expression))
            operators.pop()
        else:
            while operators and _pops_before(operators[-1], op):
                output.append(Token.operator(operators.pop()))
            operators.append(op)

    while operators:
        op = operators.pop()
        if op.is_parenthesis:
            raise StructuralError('Error mismatched parenthesis')
        output.append(Token.operator(op))

    logger.debug('postfix: %s', ' '.join(map(str, output)))
    return output


def _source(expression):
    if isinstance(expression, (bytes, bytearray)):
        return bytes(expression).decode(errors='replace')
    return expression
