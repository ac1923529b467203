'''
Postfix evaluation, recording every reduction step.
'''

from collections import namedtuple
import logging

from .number import NumberBase
from .parser import shunting_yard
from .tokens import TokenKind
from .util import EvaluationError


logger = logging.getLogger(__name__)


# One operator application: a op b = result
Step = namedtuple('Step', ['a', 'operator', 'b', 'result'])

# Outcome of a whole expression: the final Number and the steps to it.
Calculation = namedtuple('Calculation', ['tokens', 'steps', 'result'])


def postfix_eval(tokens):
    '''
    Evaluate postfix tokens.

    :returns: list of Steps, in evaluation order.
    :raises EvaluationError: if an operator lacks operands, an operator
        yields no result, or values are left over.
    '''
    stack = []
    steps = []
    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.payload)
            continue
        op = token.payload
        if len(stack) < 2:
            raise EvaluationError('Error malformed expression')
        b = stack.pop()
        a = stack.pop()
        result = op.apply(a, b)
        if result is None:
            raise EvaluationError(
                'Error evaluating expression: {} ({}) {} {} ({})'.format(
                    a.render(NumberBase.BIN), a, op,
                    b.render(NumberBase.BIN), b))
        step = Step(a, op, b, result)
        logger.debug('step: %s %s %s = %s', a, op, b, result)
        steps.append(step)
        stack.append(result)
    if len(stack) != 1:
        raise EvaluationError('Error malformed expression')
    return steps


def calculate(expression, base=NumberBase.DEC):
    '''
    Parse and evaluate expression, displaying results in base.

    A lone literal is not evaluated; it is simply rebased.
    '''
    tokens = shunting_yard(expression)
    if len(tokens) == 1 and tokens[0].kind is TokenKind.NUMBER:
        return Calculation(tokens, [], tokens[0].payload.with_base(base))
    steps = postfix_eval(tokens)
    return Calculation(tokens, steps, steps[-1].result.with_base(base))
