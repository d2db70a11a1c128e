
from collections import namedtuple

from lamcps.typs import (
    VarExp,
    LamExp,
    AppExp
    )
from lamcps.cpstyps import (
    CpsVarExp,
    CpsLamExp,
    CpsAppExp
    )

__all__ = [
    'names',
    'free_vars',
    'binders',
    'size',
    'redexes',
    'is_cps',
    'Stats',
    'stats'
    ]


def names(exp):
    """Every name occurring in a source or CPS expression, bound or free."""
    if isinstance(exp, (VarExp, CpsVarExp)):
        return {exp.name}
    elif isinstance(exp, LamExp):
        return {exp.param} | names(exp.bodyExp)
    elif isinstance(exp, CpsLamExp):
        return set(exp.params) | names(exp.bodyExp)
    elif isinstance(exp, AppExp):
        return names(exp.funcExp) | names(exp.argExp)
    elif isinstance(exp, CpsAppExp):
        res = names(exp.funcExp)
        for arg in exp.argExps:
            res |= names(arg)
        return res
    else:
        raise TypeError(exp)

def free_vars(exp):
    """The free names of a source or CPS expression."""
    if isinstance(exp, (VarExp, CpsVarExp)):
        return {exp.name}
    elif isinstance(exp, LamExp):
        return free_vars(exp.bodyExp) - {exp.param}
    elif isinstance(exp, CpsLamExp):
        return free_vars(exp.bodyExp) - set(exp.params)
    elif isinstance(exp, AppExp):
        return free_vars(exp.funcExp) | free_vars(exp.argExp)
    elif isinstance(exp, CpsAppExp):
        res = free_vars(exp.funcExp)
        for arg in exp.argExps:
            res |= free_vars(arg)
        return res
    else:
        raise TypeError(exp)

def binders(exp):
    """All names bound by lambdas in a CPS expression, in tree order.

    A name bound twice shows up twice.
    """
    if isinstance(exp, CpsVarExp):
        return []
    elif isinstance(exp, CpsLamExp):
        return list(exp.params) + binders(exp.bodyExp)
    elif isinstance(exp, CpsAppExp):
        res = binders(exp.funcExp)
        for arg in exp.argExps:
            res.extend(binders(arg))
        return res
    else:
        raise TypeError(exp)

def size(exp):
    """Number of nodes in a CPS expression."""
    if isinstance(exp, CpsVarExp):
        return 1
    elif isinstance(exp, CpsLamExp):
        return 1 + size(exp.bodyExp)
    elif isinstance(exp, CpsAppExp):
        return 1 + size(exp.funcExp) + sum(size(e) for e in exp.argExps)
    else:
        raise TypeError(exp)

def redexes(exp):
    """Number of calls in a CPS expression whose callee is a literal lambda."""
    if isinstance(exp, CpsVarExp):
        return 0
    elif isinstance(exp, CpsLamExp):
        return redexes(exp.bodyExp)
    elif isinstance(exp, CpsAppExp):
        here = 1 if isinstance(exp.funcExp, CpsLamExp) else 0
        return (here + redexes(exp.funcExp) +
                sum(redexes(e) for e in exp.argExps))
    else:
        raise TypeError(exp)

def is_cps(exp):
    """Check the shape of a complex CPS expression.

    Every complex expression must be one call whose callee and arguments
    are atomic, and every lambda body must again be such a call.
    """
    def atomic(e):
        if isinstance(e, CpsVarExp):
            return True
        elif isinstance(e, CpsLamExp):
            return is_cps(e.bodyExp)
        else:
            return False
    return (
        isinstance(exp, CpsAppExp) and
        atomic(exp.funcExp) and
        all(atomic(e) for e in exp.argExps)
        )


Stats = namedtuple('Stats', ['size', 'redexes'])

def stats(exp):
    return Stats(size(exp), redexes(exp))
