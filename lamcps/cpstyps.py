
from lamcps.typs import Exp

__all__ = [
    'CpsExp',
    'AExp',
    'CpsVarExp',
    'CpsLamExp',
    'CExp',
    'CpsAppExp',
    'halt'
    ]


################################################################################
## CPS expressions
################################################################################

class CpsExp(Exp):
    __slots__ = ()

## Atomic Expressions
class AExp(CpsExp):
    """An atomic CPS expression: always terminates, never has an effect."""
    __slots__ = ()

class CpsVarExp(AExp):
    """A variable.

    @type name: String
    @param name: The name of the variable
    """
    __slots__ = ('name',)

    def __init__(self, name):
        super(CpsVarExp, self).__init__(name)

    def map(self, f):
        return f(self)

class CpsLamExp(AExp):
    """A CPS lambda expression.

    @type params: A sequence of Strings
    @param params: The formal parameters; the last is conventionally the
        continuation
    @type bodyExp: CExp
    @param bodyExp: The body of the lambda
    """
    __slots__ = ('params', 'bodyExp')

    def __init__(self, params, bodyExp):
        super(CpsLamExp, self).__init__(tuple(params), bodyExp)

    def map(self, f):
        return f(CpsLamExp(self.params, self.bodyExp.map(f)))

## Complex Expressions
class CExp(CpsExp):
    """A complex CPS expression, the only place a call happens."""
    __slots__ = ()

class CpsAppExp(CExp):
    """A tail call.

    @type funcExp: AExp
    @param funcExp: The function being applied
    @type argExps: AExps (not passed as a list though!)
    @param argExps: The arguments to the function
    """
    __slots__ = ('funcExp', 'argExps')

    def __init__(self, funcExp, *argExps):
        super(CpsAppExp, self).__init__(funcExp, argExps)

    def map(self, f):
        return f(CpsAppExp(self.funcExp.map(f),
                           *[exp.map(f) for exp in self.argExps]))

    def __reduce__(self):
        return (CpsAppExp, (self.funcExp,) + self.argExps)

    def __repr__(self):
        return 'CpsAppExp({0})'.format(
            ', '.join(repr(e) for e in (self.funcExp,) + self.argExps))


halt = CpsVarExp('halt')
