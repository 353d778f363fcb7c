import sys

import pytest

from sylow import config
from sylow.action import GroupAction
from sylow.cauchy import (ProductOneTuple, ProductOneTuples, cauchy,
                          exists_element_of_order, product_one_tuples,
                          rotation_action)
from sylow.counting import census
from sylow.errors import InvalidArgument, InvariantError, Unsatisfiable
from sylow.sylow import exists_subgroup_of_order
from sylow.group import *
from sylow.prime import factorint


def _groups():
    yield CyclicGroup(6)
    yield CyclicGroup(12)
    yield AbelianGroup(2, 4)
    yield SymmetricGroup(3)
    yield DihedralGroup(4)
    yield DihedralGroup(5)
    yield AlternatingGroup(4)
    yield SymmetricGroup(4)


def test_z6():
    G = CyclicGroup(6)
    assert exists_element_of_order(G, 2) == 3
    assert exists_element_of_order(G, 3) in {2, 4}


def test_element_order():
    for G in _groups():
        for p in factorint(G.order()):
            x = exists_element_of_order(G, p)
            assert x != G.identity
            assert G.pow(x, p) == G.identity
            assert all(G.pow(x, k) != G.identity for k in range(1, p))


def test_s4():
    G = SymmetricGroup(4)
    x = exists_element_of_order(G, 3)
    assert isinstance(x, Cycles)
    assert x.order == 3
    assert len(x.support) == 3


def test_errors():
    G = CyclicGroup(6)
    with pytest.raises(InvalidArgument):
        exists_element_of_order(G, 4)
    with pytest.raises(InvalidArgument):
        exists_element_of_order(G, 1)
    with pytest.raises(InvalidArgument):
        exists_element_of_order(G, 2.0)
    with pytest.raises(Unsatisfiable):
        exists_element_of_order(G, 5)
    with pytest.raises(Unsatisfiable):
        exists_element_of_order(DihedralGroup(4), 5)


def test_product_one_tuple():
    G = SymmetricGroup(3)
    a, b = Cycles((0, 1)), Cycles((1, 2))
    t = ProductOneTuple.complete(G, [a, b])
    assert t.product() == G.identity
    assert t[1:] == (a, b)
    with pytest.raises(ValueError):
        ProductOneTuple(G, [a, b, a])


def test_rotate():
    G = SymmetricGroup(4)
    for t in product_one_tuples(G, 3):
        for k in range(4):
            s = t.rotate(k)
            assert s.product() == G.identity
            assert len(s) == 3
        assert t.rotate(3) == t


def test_tuple_space():
    for G in [CyclicGroup(6), SymmetricGroup(3)]:
        for p in [2, 3]:
            V = product_one_tuples(G, p)
            assert len(V) == G.order()**(p - 1)
            assert len(set(V)) == len(V)


def test_rotation_fixed_points_are_constant():
    G = SymmetricGroup(3)
    action = rotation_action(product_one_tuples(G, 3), 3)
    action.check_axioms()
    fixed = action.fixed_points()
    assert all(t.is_constant() for t in fixed)
    assert {t[0] for t in fixed} == {x for x in G if G.pow(x, 3) == G.identity}
    assert len(fixed) == 3


def test_without_invariant_checks():
    config.set('check_invariants', False)
    assert cauchy(CyclicGroup(6), 2) == 3


def test_large_tuple_spaces():
    # 60**4 and 11**10 tuples, far too many to enumerate
    G = AlternatingGroup(5)
    x = exists_element_of_order(G, 5)
    assert x.order == 5
    assert G.element_order(x) == 5

    assert exists_element_of_order(CyclicGroup(11), 11) == 1

    H = exists_subgroup_of_order(G, 5, 1)
    assert H.order() == 5


def test_lazy_tuple_space():
    V = product_one_tuples(CyclicGroup(11), 11)
    assert isinstance(V, ProductOneTuples)
    assert V.size == 11**10
    assert V.trivial() in V
    assert ProductOneTuple(V.group, [1] * 11) in V
    assert ProductOneTuple(V.group, [1, 10] + [0] * 9) in V
    assert ProductOneTuple(CyclicGroup(2), [1, 1]) not in V
    assert len(V.constant_tuples()) == 11

    action = rotation_action(V, 11)
    assert action.size == 11**10
    assert action.is_fixed(V.trivial())


def test_census_matches_constant_tuples():
    G = SymmetricGroup(3)
    V = product_one_tuples(G, 3)
    fact, fixed = census(rotation_action(V, 3), 3)
    assert fact.set_size == 36
    assert fact.fixed_count == 3
    assert fact.holds
    assert set(fixed) == set(V.constant_tuples())


def test_without_census():
    config.set('cauchy.census_limit', 0)
    assert cauchy(CyclicGroup(6), 2) == 3
    assert exists_element_of_order(SymmetricGroup(4), 3).order == 3


def test_broken_rotation(monkeypatch):

    def rotation_action(V, p):
        moved = V.constant_tuples()[-1]
        return GroupAction(CyclicGroup(p), V, lambda k, t: moved)

    monkeypatch.setattr(sys.modules['sylow.cauchy'], 'rotation_action',
                        rotation_action)
    with pytest.raises(InvariantError):
        cauchy(CyclicGroup(6), 3)
