
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
    CpsAppExp
    )
from lamcps.gensym import GenSym, K_PREFIX, F_PREFIX, E_PREFIX
from lamcps.analysis import names

__all__ = ['convert_naive', 'atomize_naive']


################################################################################
## Conversion to CPS with syntactic continuations
################################################################################

def T(exp, c, gensym):
    """Transform an expression into CPS.

    Every application is split into two continuation lambdas, one saving the
    function and one saving the argument, even when both are already
    variables.

    @type exp: A lambda calculus expression
    @param exp: The expression to transform
    @type c: AExp
    @param c: The continuation to apply
    """
    if isinstance(exp, AtomicExp):
        return CpsAppExp(c, M(exp, gensym))
    elif isinstance(exp, AppExp):
        _f = gensym(F_PREFIX)
        _e = gensym(E_PREFIX)
        call = CpsAppExp(CpsVarExp(_f), CpsVarExp(_e), c)
        return T(exp.funcExp,
                 CpsLamExp([_f], T(exp.argExp, CpsLamExp([_e], call), gensym)),
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
        _k = gensym(K_PREFIX)
        return CpsLamExp([exp.param, _k],
                         T(exp.bodyExp, CpsVarExp(_k), gensym))
    elif isinstance(exp, AppExp):
        raise NonAtomicInput(exp)
    else:
        raise TypeError(exp)


def convert_naive(exp, cont, gensym=None):
    """Convert `exp` into CPS, continuing with the syntactic value `cont`.

    Recursion follows the nesting of `exp`, so terms nested more than a few
    hundred levels deep can exceed sys.getrecursionlimit() and raise
    RecursionError.

    @type cont: AExp
    @param cont: The top-level continuation, e.g. `halt`
    @type gensym: GenSym
    @param gensym: Name source; by default a private one that avoids every
        name of `exp` and `cont`
    """
    if gensym is None:
        gensym = GenSym(reserved=names(exp) | names(cont))
    return T(exp, cont, gensym)

def atomize_naive(exp, gensym=None):
    """Convert a variable or abstraction into an atomic CPS expression.

    Raises NonAtomicInput when given an application: only VarExp and LamExp
    have an atomic counterpart.
    """
    if gensym is None:
        gensym = GenSym(reserved=names(exp))
    return M(exp, gensym)
