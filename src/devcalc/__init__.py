'''
Developer's calculator.

Evaluates infix arithmetic and bitwise expressions over arbitrary-precision
integers written in binary, octal, decimal, or hexadecimal, showing every
step of the reduction in binary and in the output base.

Operators, loosest binding last:

- ``+ -``
- ``<< >>``
- ``&``
- ``^``
- ``|``

Literals are decimal unless prefixed with ``0b``, ``0o``, or ``0x``.
'''

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('devcalc')
except PackageNotFoundError:
    # Running from a source tree that was never installed
    __version__ = 'unknown'

from .util import DevCalcError, LexicalError, StructuralError, EvaluationError
from .number import Number, NumberBase, render
from .operators import Operator
from .tokens import Token, TokenKind
from .lexer import Lexer
from .parser import shunting_yard
from .evaluator import postfix_eval, calculate
from .cli import CLI


__all__ = ('Number', 'NumberBase', 'render', 'Operator', 'Token', 'TokenKind',
           'Lexer', 'shunting_yard', 'postfix_eval', 'calculate', 'CLI',
           'DevCalcError', 'LexicalError', 'StructuralError',
           'EvaluationError')
