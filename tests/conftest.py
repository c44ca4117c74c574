from pytest import Item, fixture

from fincalc import precision
from fincalc.evaluator import StackEvaluator
from fincalc.items import Number
from fincalc.operations import REGISTRY


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture(autouse=True)
def default_precision():
    '''
    Every test starts, and leaves, the process-wide Precision at defaults.
    '''
    precision.reset()
    yield precision.current()
    precision.reset()


def _item(token):
    if isinstance(token, str) and token in REGISTRY:
        return REGISTRY.lookup(token)
    return Number(token)


@fixture
def items():
    '''
    Build evaluator input: operation symbols become Operations, anything
    else a Number.
    '''
    def items(*tokens):
        return [_item(token) for token in tokens]
    return items


@fixture
def calc(items):
    '''
    Evaluate tokens, as for items, and return the result stack.
    '''
    def calc(*tokens, precision=None):
        return StackEvaluator(precision).evaluate(items(*tokens))
    return calc


@fixture
def result(calc):
    '''
    Evaluate tokens to a single Number and return it as a float.
    '''
    def result(*tokens):
        stack = calc(*tokens)
        assert len(stack) == 1 and isinstance(stack[0], Number), stack
        return stack[0].value.to_float()
    return result
