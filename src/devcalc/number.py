'''
Arbitrary-precision integers tagged with the radix they are displayed in.
'''

from enum import Enum


class NumberBase(Enum):
    '''
    Radix used to write or display a number.
    '''
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def label(self):
        return self.name

    @property
    def prefix(self):
        return _PREFIXES[self]

    @classmethod
    def from_name(cls, name):
        '''
        Parse a command line base name: bin, 2, oct, 8, dec, 10, hex, or 16.
        '''
        try:
            return _NAMES[str(name).strip().lower()]
        except KeyError:
            raise ValueError('Unknown base {}'.format(repr(name))) from None

    @classmethod
    def from_prefix(cls, letter):
        '''
        Base selected by the letter after a leading 0, or None.
        '''
        return _PREFIX_LETTERS.get(letter.lower())

    def __str__(self):
        return self.label


_PREFIXES = {
    NumberBase.BIN: '0b',
    NumberBase.OCT: '0o',
    NumberBase.DEC: '',
    NumberBase.HEX: '0x',
}

_PREFIX_LETTERS = {
    'b': NumberBase.BIN,
    'o': NumberBase.OCT,
    'x': NumberBase.HEX,
}

# Digits valid in each base, both cases for hex.
DIGITS = {
    NumberBase.BIN: '01',
    NumberBase.OCT: '01234567',
    NumberBase.DEC: '0123456789',
    NumberBase.HEX: '0123456789ABCDEFabcdef',
}

_NAMES = {
    'bin': NumberBase.BIN, '2': NumberBase.BIN,
    'oct': NumberBase.OCT, '8': NumberBase.OCT,
    'dec': NumberBase.DEC, '10': NumberBase.DEC,
    'hex': NumberBase.HEX, '16': NumberBase.HEX,
}

BASE_NAMES = tuple(_NAMES)


def render(value, base, prefix=True):
    '''
    Render an integer in base, with its prefix unless told otherwise.

    Negative values get the sign before the prefix: -0x2A.
    '''
    magnitude = abs(value)
    if base is NumberBase.BIN:
        digits = format(magnitude, 'b')
    elif base is NumberBase.OCT:
        digits = format(magnitude, 'o')
    elif base is NumberBase.DEC:
        digits = format(magnitude, 'd')
    elif base is NumberBase.HEX:
        digits = format(magnitude, 'X')
    else:
        raise TypeError('Not a NumberBase: {}'.format(repr(base)))
    sign = '-' if value < 0 else ''
    return sign + (base.prefix if prefix else '') + digits


class Number:
    '''
    Integer value plus the base it is displayed in.

    Immutable. Arithmetic returns a new Number in the left operand's base.
    '''

    __slots__ = ('_value', '_base')

    def __init__(self, value, base=NumberBase.DEC):
        self._value = int(value)
        self._base = base

    @classmethod
    def from_digits(cls, digits, base):
        '''
        Parse a run of digits, without prefix, written in base.

        :param digits: str or bytes, already validated for base.
        :raises ValueError: if the digits are not valid in base.
        '''
        if isinstance(digits, (bytes, bytearray)):
            digits = digits.decode('ascii')
        if not digits or digits.strip(DIGITS[base]):
            raise ValueError('Invalid {} digits {}'.format(base, repr(digits)))
        return cls(int(digits, base.value), base)

    @property
    def value(self):
        return self._value

    @property
    def base(self):
        return self._base

    def with_base(self, base):
        '''
        Same value, displayed in another base.
        '''
        return type(self)(self._value, base)

    def render(self, base=None, prefix=True):
        return render(self._value, base or self._base, prefix=prefix)

    def _derive(self, value):
        return type(self)(value, self._base)

    def __add__(self, other):
        return self._derive(self._value + other.value)

    def __sub__(self, other):
        return self._derive(self._value - other.value)

    def __and__(self, other):
        return self._derive(self._value & other.value)

    def __xor__(self, other):
        return self._derive(self._value ^ other.value)

    def __or__(self, other):
        return self._derive(self._value | other.value)

    def __lshift__(self, other):
        return self._derive(self._value << other.value)

    def __rshift__(self, other):
        return self._derive(self._value >> other.value)

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return (self._value, self._base) == (other.value, other.base)

    def __hash__(self):
        return hash((self._value, self._base))

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __str__(self):
        return self.render()

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__,
                                   self.render(), self._base.label)
