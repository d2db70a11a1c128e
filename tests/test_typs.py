"""Tests for the source and CPS expression types."""

import copy
import pickle

import pytest

from lamcps.typs import NonAtomicInput, Exp, AtomicExp, VarExp, LamExp, AppExp
from lamcps.hybrid import convert_hybrid
from lamcps.cpstyps import AExp, CExp, CpsVarExp, CpsLamExp, CpsAppExp, halt


class TestSourceTypes:
    def test_structural_equality(self):
        assert LamExp('x', VarExp('x')) == LamExp('x', VarExp('x'))
        assert AppExp(VarExp('f'), VarExp('x')) != AppExp(VarExp('x'), VarExp('f'))

    def test_hash_matches_equality(self):
        seen = {AppExp(VarExp('f'), VarExp('x')), AppExp(VarExp('f'), VarExp('x'))}
        assert len(seen) == 1

    def test_atomic_subset(self):
        assert isinstance(VarExp('x'), AtomicExp)
        assert isinstance(LamExp('x', VarExp('x')), AtomicExp)
        assert not isinstance(AppExp(VarExp('f'), VarExp('x')), AtomicExp)

    def test_immutable(self):
        v = VarExp('x')
        with pytest.raises(AttributeError):
            v.name = 'y'
        assert v.name == 'x'

    def test_wrong_number_of_values(self):
        with pytest.raises(TypeError):
            Exp('x')
        with pytest.raises(TypeError):
            AtomicExp('x', VarExp('x'))

    def test_copy(self):
        exp = LamExp('x', AppExp(VarExp('f'), VarExp('x')))
        assert copy.copy(exp) == exp
        assert copy.deepcopy(exp) == exp

    def test_repr(self):
        assert repr(LamExp('x', VarExp('x'))) == "LamExp('x', VarExp('x'))"

    def test_non_atomic_input(self):
        exp = AppExp(VarExp('f'), VarExp('x'))
        err = NonAtomicInput(exp)
        assert isinstance(err, TypeError)
        assert err.exp is exp


class TestCpsTypes:
    def test_sorts(self):
        assert isinstance(CpsVarExp('x'), AExp)
        assert isinstance(CpsLamExp(['x'], CpsAppExp(halt, CpsVarExp('x'))), AExp)
        assert isinstance(CpsAppExp(halt), CExp)

    def test_sequences_are_tuples(self):
        lam = CpsLamExp(['x', 'k'], CpsAppExp(CpsVarExp('k'), CpsVarExp('x')))
        assert lam.params == ('x', 'k')
        assert lam == CpsLamExp(('x', 'k'), lam.bodyExp)
        assert lam.bodyExp.argExps == (CpsVarExp('x'),)

    def test_cps_var_differs_from_source_var(self):
        assert CpsVarExp('x') != VarExp('x')

    def test_map_rebuilds_bottom_up(self):
        exp = CpsAppExp(CpsVarExp('f'), CpsVarExp('x'),
                        CpsLamExp(['v'], CpsAppExp(halt, CpsVarExp('v'))))
        def rename(e):
            if e == CpsVarExp('x'):
                return CpsVarExp('y')
            return e
        assert exp.map(rename) == CpsAppExp(
            CpsVarExp('f'), CpsVarExp('y'),
            CpsLamExp(['v'], CpsAppExp(halt, CpsVarExp('v'))))

    def test_app_repr(self):
        assert repr(CpsAppExp(halt, CpsVarExp('x'))) == \
            "CpsAppExp(CpsVarExp('halt'), CpsVarExp('x'))"

    def test_converted_term_survives_deepcopy_and_pickle(self):
        exp = AppExp(AppExp(VarExp('g'), VarExp('y')),
                     LamExp('x', AppExp(VarExp('f'), VarExp('x'))))
        out = convert_hybrid(exp, halt)
        assert copy.deepcopy(out) == out
        restored = pickle.loads(pickle.dumps(out))
        assert restored == out
        assert restored.argExps == out.argExps
