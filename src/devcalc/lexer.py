from collections import namedtuple
from functools import reduce
import logging
import operator

import regex

from .number import DIGITS, Number, NumberBase
from .operators import Operator
from .tokens import Token
from .util import LexicalError


logger = logging.getLogger(__name__)


# A token and the byte span [start, end) it was read from.
Lexeme = namedtuple('Lexeme', ['token', 'start', 'end'])


def _digit_class(digits):
    return ('[' + digits + ']').encode('ascii')


class Lexer:
    '''
    Lexer for the calculator's infix grammar.

    Works on the UTF-8 bytes of the expression; columns reported in errors
    are 1-based byte columns. Holds no state between calls.
    '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # One ASCII space, or a UTF-8 non breaking space
    SPACE = rb'(?: \x20 | \xc2\xa0 )'
    # Literals always start with a decimal digit
    LITERAL_START = _digit_class(DIGITS[NumberBase.DEC])
    # 0b, 0o, 0x, either case
    PREFIX = rb'0 (?<prefix> [bBoOxX] )'
    # Payload of a literal, greedy, possibly empty
    PAYLOAD = {base: _digit_class(digits) + rb'*'
               for base, digits in DIGITS.items()}
    # Anything that looks like a digit; flags a digit too big for its base
    ANY_DIGIT = _digit_class(DIGITS[NumberBase.HEX])

    def __init__(self):
        cls = type(self)
        self._space = regex.compile(cls.SPACE, cls.FLAGS)
        self._literal_start = regex.compile(cls.LITERAL_START, cls.FLAGS)
        self._prefix = regex.compile(cls.PREFIX, cls.FLAGS)
        self._payload = {base: regex.compile(pattern, cls.FLAGS)
                         for base, pattern in cls.PAYLOAD.items()}
        self._any_digit = regex.compile(cls.ANY_DIGIT, cls.FLAGS)

    @classmethod
    def grammar(cls):
        '''
        Human readable listing of the patterns and operators lexed.
        '''
        lines = ['space\t' + cls.SPACE.decode('ascii'),
                 'prefix\t' + cls.PREFIX.decode('ascii')]
        for base, pattern in cls.PAYLOAD.items():
            lines.append(base.label.lower() + '\t' + pattern.decode('ascii'))
        lines.append('operator\t' + ' '.join(op.lexeme for op in Operator))
        return '\n'.join(lines)

    def lex(self, expression):
        '''
        Take an expression and yield its lexemes, left to right.

        Stops at the first bad lexeme by raising LexicalError; lexemes before
        it have already been yielded.
        '''
        if isinstance(expression, (bytes, bytearray)):
            data = bytes(expression)
            source = data.decode(errors='replace')
        else:
            data = expression.encode()
            source = expression
        end = 0
        while end < len(data):
            start = end
            space = self._space.match(data, start)
            if space is not None:
                end = space.end()
                continue
            if self._literal_start.match(data, start) is not None:
                lexeme = self._lex_number(data, start, source)
            else:
                lexeme = self._lex_operator(data, start, source)
            logger.debug('lexed %s at [%d, %d)',
                         lexeme.token, lexeme.start, lexeme.end)
            end = lexeme.end
            yield lexeme

    def _lex_number(self, data, start, source):
        base = NumberBase.DEC
        payload_start = start
        prefix = self._prefix.match(data, start)
        if prefix is not None:
            base = NumberBase.from_prefix(prefix.group('prefix').decode())
            payload_start = prefix.end()
        end = self._payload[base].match(data, payload_start).end()
        if self._any_digit.match(data, end) is not None:
            # Column of the offending digit
            raise LexicalError('Invalid {} number'.format(base.label),
                               column=end + 1, source=source)
        if end == payload_start:
            raise LexicalError('Invalid {} number'.format(base.label),
                               column=end + 1, source=source)
        # Payload is validated; a failure here is a bug, not user error.
        number = Number.from_digits(data[payload_start:end], base)
        return Lexeme(Token.number(number), start, end)

    def _lex_operator(self, data, start, source):
        op = Operator.from_bytes(data[start:])
        if op is None:
            raise LexicalError('Invalid operator',
                               column=start + 1, source=source)
        return Lexeme(Token.operator(op), start, start + len(op.lexeme))
