
from lamcps.typs import (
    AtomicExp,
    VarExp,
    LamExp,
    AppExp,
    NonAtomicInput
    )
from lamcps.cpstyps import (
    CpsVarExp,
    CpsLamExp,
    CpsAppExp,
    halt
    )
from lamcps.gensym import GenSym, K_PREFIX, RV_PREFIX
from lamcps.analysis import names

__all__ = ['convert_higher_order', 'atomize_higher_order', 'halt_k']


def halt_k(rv):
    return CpsAppExp(halt, rv)


################################################################################
## Conversion to CPS with continuations lifted into Python
################################################################################

def T(exp, k, gensym):
    """Transform an expression into CPS with a continuation lifted into the host
    language.

    @type exp: A lambda calculus expression
    @param exp: The expression to transform
    @type k: A *Python* function from AExp -> CExp
    @param k: The continuation to apply
    """
    if isinstance(exp, AtomicExp):
        return k(M(exp, gensym))
    elif isinstance(exp, AppExp):
        _rv = gensym(RV_PREFIX)
        cont = CpsLamExp([_rv], k(CpsVarExp(_rv)))
        return T(exp.funcExp, lambda _f:
                 T(exp.argExp, lambda _e:
                   CpsAppExp(_f, _e, cont),
                   gensym),
                 gensym)
    else:
        raise TypeError(exp)

def M(exp, gensym):
    """Transform an AtomicExp into CPS.

    @type exp: AtomicExp
    """
    if isinstance(exp, VarExp):
        return CpsVarExp(exp.name)
    elif isinstance(exp, LamExp):
        _k = CpsVarExp(gensym(K_PREFIX))
        return CpsLamExp([exp.param, _k.name],
                         T(exp.bodyExp, lambda rv: CpsAppExp(_k, rv), gensym))
    elif isinstance(exp, AppExp):
        raise NonAtomicInput(exp)
    else:
        raise TypeError(exp)


def convert_higher_order(exp, k, gensym=None):
    """Convert `exp` into CPS, handing its value to the Python callback `k`.

    Recursion follows the nesting of `exp`, so terms nested more than a few
    hundred levels deep can exceed sys.getrecursionlimit() and raise
    RecursionError.

    @type k: A *Python* function from AExp -> CExp
    @param k: The top-level continuation, e.g. `halt_k`
    @type gensym: GenSym
    @param gensym: Name source; by default a private one that avoids every
        name of `exp`. Names `k` itself introduces are not seen, pass a
        generator that reserves them if that matters.
    """
    if gensym is None:
        gensym = GenSym(reserved=names(exp))
    return T(exp, k, gensym)

def atomize_higher_order(exp, gensym=None):
    """Convert a variable or abstraction into an atomic CPS expression.

    Raises NonAtomicInput when given an application: only VarExp and LamExp
    have an atomic counterpart.
    """
    if gensym is None:
        gensym = GenSym(reserved=names(exp))
    return M(exp, gensym)
