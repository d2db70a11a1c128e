
from threading import Lock

__all__ = [
    'GenSym',
    'K_PREFIX',
    'RV_PREFIX',
    'F_PREFIX',
    'E_PREFIX'
    ]

# continuation parameters
K_PREFIX = 'k'
# values returned to a call site
RV_PREFIX = 'rv'
# saved function and argument values (naive conversion only)
F_PREFIX = 'f'
E_PREFIX = 'e'


class GenSym:
    """A fresh name generator.

    Each call returns the prefix followed by the current count, then bumps
    the count. Names listed in `reserved` are never returned; a colliding
    candidate is skipped and still uses up its number.

    @type start: int
    @param start: The first number handed out
    @type reserved: An iterable of Strings
    @param reserved: Names that are already taken, e.g. those of the input
    """
    def __init__(self, start=0, reserved=()):
        self.n = start
        self.reserved = frozenset(reserved)
        self._lock = Lock()

    def __call__(self, sym):
        with self._lock:
            while True:
                name = sym + str(self.n)
                self.n += 1
                if name not in self.reserved:
                    return name

    def __repr__(self):
        return 'GenSym(n={0})'.format(self.n)
