
from lamcps.typs import NonAtomicInput, VarExp, LamExp, AppExp
from lamcps.cpstyps import CpsVarExp, CpsLamExp, CpsAppExp, halt
from lamcps.gensym import GenSym
from lamcps.naive import convert_naive, atomize_naive
from lamcps.higher_order import convert_higher_order, atomize_higher_order, halt_k
from lamcps.hybrid import convert_hybrid, atomize_hybrid
from lamcps.strategies import STRATEGIES, compare
