from sys import exit
from argparse import ArgumentParser, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from . import __version__
from .util import DevCalcError
from .number import BASE_NAMES, NumberBase
from .lexer import Lexer
from .parser import shunting_yard
from .evaluator import calculate


logger = logging.getLogger(__name__)


def format_step(step, base):
    '''
    One reduction step, in binary then in the output base.
    '''
    a, op, b, result = step
    return '{} {} {} = {} ({} {} {} = {})'.format(
        a.render(NumberBase.BIN), op, b.render(NumberBase.BIN),
        result.render(NumberBase.BIN),
        a.render(base), op, b.render(base), result.render(base))


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the developer calculator.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_BASE = 'dec'

    def dumper(self):
        '''
        Dump the postfix token sequence of each expression.
        '''
        status = 0
        for expression in self._expressions():
            try:
                tokens = shunting_yard(expression)
            except DevCalcError as e:
                self._report(e)
                status = 1
                continue
            print(*tokens)
        return status

    def executor(self):
        '''
        Evaluate each expression, showing every step.
        '''
        status = 0
        for expression in self._expressions():
            if not self.evaluate(expression):
                status = 1
        return status

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.grammar())
        return 0

    def evaluate(self, expression):
        '''
        Evaluate and print one expression. Return True on success.

        Nothing is printed to stdout unless evaluation succeeds.
        '''
        try:
            calculation = calculate(expression, self.base)
        except DevCalcError as e:
            self._report(e)
            return False
        if not calculation.steps:
            print('\nResult: {}'.format(calculation.result))
            return True
        print('Executing: {}\n'.format(expression))
        for step in calculation.steps:
            print(format_step(step, self.base))
        print('\nResult: {}'.format(calculation.result))
        return True

    def _report(self, error):
        logger.debug('evaluation failed', exc_info=error)
        print(error.diagnostic(), file=sys.stderr)

    def _expressions(self):
        '''
        The expression given as argument, else lines read from input.
        '''
        if self.args.expression is not None:
            return [self.args.expression]
        return (line.rstrip('\r\n')
                for line in self._prompting_input()
                if line.strip())

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            prog='devcalc',
            description='Developer step by step calculator')
        self.argument_parser.add_argument('expression', nargs=OPTIONAL,
                                          metavar='EXPRESSION',
                                          help='The expression to evaluate')
        self.argument_parser.add_argument('-b', '--base',
                                          choices=BASE_NAMES,
                                          default=self.DEFAULT_BASE,
                                          help='Set the base for the output')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-p', '--prompt',
                                          nargs=OPTIONAL,
                                          const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('--version', action='version',
                                          version='%(prog)s ' + __version__)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's arguments.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.base = NumberBase.from_name(self.args.base)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(levelname)s: %(message)s',
            stream=sys.stderr)
        try:
            return self.args.action()
        except KeyboardInterrupt:
            exit(1)
