from pytest import Item, fixture

from devcalc.lexer import Lexer
from devcalc.cli import CLI


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def cli() -> CLI:
    return CLI()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, to audit which expressions were checked.

    Use with pytest -rP and enable_assertion_pass_hook = true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
