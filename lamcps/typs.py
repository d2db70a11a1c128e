
__all__ = [
    'NonAtomicInput',
    'Exp',
    'AtomicExp',
    'VarExp',
    'LamExp',
    'AppExp'
    ]


class NonAtomicInput(TypeError):
    """Raised when an atomizing transform is handed an application.

    Only variables and abstractions have an atomic CPS counterpart; reaching
    this means a caller bug, not malformed input.

    @type exp: AppExp
    @param exp: The offending expression
    """
    def __init__(self, exp):
        super(NonAtomicInput, self).__init__(
            'not an atomic expression: {0!r}'.format(exp))
        self.exp = exp


################################################################################
## Lambda calculus expressions
################################################################################

class Exp:
    """Base of the three source forms.

    Subclasses list their attributes in __slots__; instances are immutable
    and compare structurally.
    """
    __slots__ = ()

    def __init__(self, *vals):
        if len(vals) != len(self.__slots__):
            raise TypeError('{0} takes {1} values, got {2}'.format(
                type(self).__name__, len(self.__slots__), len(vals)))
        for slot, val in zip(self.__slots__, vals):
            object.__setattr__(self, slot, val)

    def __setattr__(self, name, val):
        raise AttributeError('{0} is immutable'.format(type(self).__name__))

    def _key(self):
        return tuple(getattr(self, slot) for slot in self.__slots__)

    def __reduce__(self):
        return (type(self), self._key())

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __repr__(self):
        return '{0}({1})'.format(
            type(self).__name__,
            ', '.join(repr(v) for v in self._key()))

## Atomic Expressions
class AtomicExp(Exp):
    __slots__ = ()

class VarExp(AtomicExp):
    """A variable.

    @type name: String
    @param name: The name of the variable
    """
    __slots__ = ('name',)

    def __init__(self, name):
        super(VarExp, self).__init__(name)

class LamExp(AtomicExp):
    """A single-parameter lambda expression.

    @type param: String
    @param param: The formal parameter of the lambda
    @type bodyExp: Any lambda calculus expression
    @param bodyExp: The body of the lambda
    """
    __slots__ = ('param', 'bodyExp')

    def __init__(self, param, bodyExp):
        super(LamExp, self).__init__(param, bodyExp)

## More complex expressions
class AppExp(Exp):
    """An application.

    @type funcExp: Any lambda calculus expression
    @param funcExp: The function being applied
    @type argExp: Any lambda calculus expression
    @param argExp: The argument to the function
    """
    __slots__ = ('funcExp', 'argExp')

    def __init__(self, funcExp, argExp):
        super(AppExp, self).__init__(funcExp, argExp)
