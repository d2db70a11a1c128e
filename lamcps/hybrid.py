
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
from lamcps.gensym import GenSym, K_PREFIX, RV_PREFIX
from lamcps.analysis import names

__all__ = ['convert_hybrid', 'atomize_hybrid']


################################################################################
## Conversion to CPS
################################################################################

def T_k(exp, k, gensym):
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
        return T_c(exp, cont, gensym)
    else:
        raise TypeError(exp)

def T_c(exp, c, gensym):
    """Transform an expression into CPS.

    @type exp: A lambda calculus expression
    @param exp: The expression to transform
    @type c: AExp
    @param c: The continuation to apply
    """
    if isinstance(exp, AtomicExp):
        return CpsAppExp(c, M(exp, gensym))
    elif isinstance(exp, AppExp):
        return T_k(exp.funcExp, lambda _f:
                   T_k(exp.argExp, lambda _e:
                       CpsAppExp(_f, _e, c),
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
        _k = gensym(K_PREFIX)
        return CpsLamExp([exp.param, _k],
                         T_c(exp.bodyExp, CpsVarExp(_k), gensym))
    elif isinstance(exp, AppExp):
        raise NonAtomicInput(exp)
    else:
        raise TypeError(exp)


def convert_hybrid(exp, cont, gensym=None):
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
    return T_c(exp, cont, gensym)

def atomize_hybrid(exp, gensym=None):
    """Convert a variable or abstraction into an atomic CPS expression.

    Raises NonAtomicInput when given an application: only VarExp and LamExp
    have an atomic counterpart.
    """
    if gensym is None:
        gensym = GenSym(reserved=names(exp))
    return M(exp, gensym)
