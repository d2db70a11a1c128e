
from collections import OrderedDict, namedtuple

from lamcps.cpstyps import CpsAppExp, halt
from lamcps.gensym import GenSym
from lamcps.analysis import names, stats
from lamcps.naive import convert_naive, atomize_naive
from lamcps.higher_order import convert_higher_order, atomize_higher_order
from lamcps.hybrid import convert_hybrid, atomize_hybrid

__all__ = [
    'Strategy',
    'STRATEGIES',
    'compare'
    ]


# convert takes (exp, cont, gensym=None) with a syntactic continuation
Strategy = namedtuple('Strategy', ['name', 'atomize', 'convert'])

def _convert_higher_order(exp, cont, gensym=None):
    if gensym is None:
        gensym = GenSym(reserved=names(exp) | names(cont))
    return convert_higher_order(exp, lambda rv: CpsAppExp(cont, rv), gensym)

STRATEGIES = OrderedDict((s.name, s) for s in [
    Strategy('naive', atomize_naive, convert_naive),
    Strategy('higher_order', atomize_higher_order, _convert_higher_order),
    Strategy('hybrid', atomize_hybrid, convert_hybrid)
    ])

def compare(exp, cont=halt, strategies=None):
    """Convert `exp` with each strategy and measure the results.

    @type strategies: A list of strategy names
    @param strategies: Which strategies to run; all of them by default
    @return: An OrderedDict from strategy name to Stats
    """
    if strategies is None:
        strategies = list(STRATEGIES)
    return OrderedDict(
        (name, stats(STRATEGIES[name].convert(exp, cont)))
        for name in strategies
        )
