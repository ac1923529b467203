'''
Shunting-yard tests
'''

import regex

from devcalc.util import LexicalError, StructuralError
from devcalc.parser import shunting_yard

from pytest import mark, raises


def postfix(expression):
    return ' '.join(map(str, shunting_yard(expression)))


@mark.parametrize('expression, expected', [
    ('1', '1'),
    ('1 + 2', '1 2 +'),
    ('2 + 3 << 1', '2 3 + 1 <<'),
    ('2 + (3 << 1)', '2 3 1 << +'),
    ('10 - 3 - 2', '10 3 - 2 -'),
    ('1 | 2 ^ 3 & 4', '1 2 3 4 & ^ |'),
    ('1 & 2 | 3', '1 2 & 3 |'),
    ('((1))', '1'),
    ('(1 + 2) & (3 + 4)', '1 2 + 3 4 + &'),
    ('0xff >> 4 << 1', '0xFF 4 >> 1 <<'),
])
def test_postfix_order(expression, expected):
    assert postfix(expression) == expected


def test_empty_expression():
    assert postfix('') == ''
    assert postfix('   ') == ''


def test_unclosed_parenthesis():
    with raises(StructuralError, match='mismatched parenthesis') as e:
        shunting_yard('(1 + 2')
    assert e.value.column is None


def test_unopened_parenthesis():
    with raises(StructuralError, match='mismatched parenthesis') as e:
        shunting_yard('1 + 2)')
    assert e.value.column == 6
    assert e.value.diagnostic().startswith(
        'Error parsing in column 6: Error mismatched parenthesis')


def test_first_error_wins():
    # The stray parenthesis comes before the bad digit
    with raises(StructuralError):
        shunting_yard('1) + 0b2')


def test_lexical_error_propagates():
    with raises(LexicalError, match=regex.escape('Invalid BIN number')):
        shunting_yard('1 + 0b102')
