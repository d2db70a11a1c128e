import sys

from lamcps.typs import VarExp, LamExp, AppExp
from lamcps.strategies import STRATEGIES, compare


def error(msg):
    """
    print an error message
    @type msg: a string
    @param msg: string containing the error message
    """
    print('error:', msg, file=sys.stderr)

def app(f, *args):
    for arg in args:
        f = AppExp(f, arg)
    return f

x, y, z, f = VarExp('x'), VarExp('y'), VarExp('z'), VarExp('f')

identity = LamExp('x', x)
call = AppExp(f, x)
omega = AppExp(LamExp('x', AppExp(x, x)), LamExp('y', AppExp(y, y)))
# S = \x. \y. \z. x z (y z)
s_comb = LamExp('x', LamExp('y', LamExp('z', app(x, z, AppExp(y, z)))))
# 2 = \f. \x. f (f x), applied to the identity
two_id = AppExp(LamExp('f', LamExp('x', AppExp(f, AppExp(f, x)))), identity)

samples = [
    ('identity', identity),
    ('call', call),
    ('omega', omega),
    ('S', s_comb),
    ('two id', two_id)
    ]

def main(argv=()):
    """Print output size and redex count of each strategy on the samples.

    @type argv: A list of strategy names
    @param argv: Strategies to compare; all of them when empty
    """
    names = list(argv) or list(STRATEGIES)
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown:
        error('unknown strategy: {0} (choose from {1})'.format(
            ', '.join(unknown), ', '.join(STRATEGIES)))
        return 1
    print('{0:<10}'.format('term') +
          ''.join('{0:>20}'.format(name) for name in names))
    for label, exp in samples:
        results = compare(exp, strategies=names)
        print('{0:<10}'.format(label) +
              ''.join('{0:>20}'.format('{0.size} / {0.redexes}'.format(s))
                      for s in results.values()))
    return 0

if __name__ == '__main__':
    import sys
    sys.exit(main(sys.argv[1:]))
