import pytest

from sylow.errors import InvalidArgument, Unsatisfiable
from sylow.group import *
from sylow.prime import factorint, multiplicity
from sylow.sylow import (exists_subgroup_of_order, extend, p_part,
                         sylow_subgroup)


def _groups():
    yield CyclicGroup(6)
    yield CyclicGroup(8)
    yield AbelianGroup(2, 2, 2)
    yield AbelianGroup(2, 6)
    yield SymmetricGroup(3)
    yield DihedralGroup(4)
    yield DihedralGroup(6)
    yield AlternatingGroup(4)
    yield SymmetricGroup(4)


def _assert_subgroup(G, H):
    assert G.identity in H
    assert all(G.mul(a, b) in H for a in H for b in H)
    assert all(G.inv(a) in H for a in H)
    assert H.is_subgroup(G)


def test_subgroups_of_every_order():
    for G in _groups():
        for p, m in factorint(G.order()).items():
            for n in range(m + 1):
                H = exists_subgroup_of_order(G, p, n)
                assert H.order() == p**n
                _assert_subgroup(G, H)


def test_base_case():
    for G in _groups():
        for p in [2, 3, 5, 7]:
            H = exists_subgroup_of_order(G, p, 0)
            assert H.elements == (G.identity, )


def test_full_case():
    for G in [CyclicGroup(8), AbelianGroup(2, 2, 2), DihedralGroup(4)]:
        H = exists_subgroup_of_order(G, 2, 3)
        assert H.order() == G.order()
        assert H == G

    G = CyclicGroup(9)
    assert exists_subgroup_of_order(G, 3, 2) == G


def test_s4_sylow_2():
    G = SymmetricGroup(4)
    H = exists_subgroup_of_order(G, 2, 3)
    assert H.order() == 8
    _assert_subgroup(G, H)
    assert all(x.order in (1, 2, 4) for x in H)


def test_s4_sylow_3():
    G = SymmetricGroup(4)
    H = exists_subgroup_of_order(G, 3, 1)
    assert H.order() == 3
    x = next(x for x in H if not x.is_identity())
    assert len(x.support) == 3
    assert H == G.generate([x])


def test_extend():
    G = SymmetricGroup(4)
    H = G.generate([Cycles((0, 1), (2, 3))])
    K = extend(G, H, 2)
    assert K.order() == 4
    assert H.is_subgroup(K)
    assert K.is_subgroup(G.normalizer(H))


def test_sylow_subgroup():
    G = SymmetricGroup(4)
    assert sylow_subgroup(G, 2).order() == 8
    assert sylow_subgroup(G, 3).order() == 3
    assert sylow_subgroup(G, 5).order() == 1
    assert p_part(24, 2) == 8
    assert p_part(24, 5) == 1
    G = DihedralGroup(6)
    assert sylow_subgroup(G, 2).order() == 2**multiplicity(2, 12)


def test_errors():
    with pytest.raises(InvalidArgument):
        exists_subgroup_of_order(SymmetricGroup(4), 4, 1)
    with pytest.raises(InvalidArgument):
        exists_subgroup_of_order(SymmetricGroup(4), 2, -1)
    with pytest.raises(InvalidArgument):
        sylow_subgroup(SymmetricGroup(4), 6)
    with pytest.raises(Unsatisfiable):
        exists_subgroup_of_order(DihedralGroup(4), 5, 1)
    with pytest.raises(Unsatisfiable):
        exists_subgroup_of_order(SymmetricGroup(4), 2, 4)
