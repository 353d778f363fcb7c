from itertools import permutations

import pytest

from sylow.action import (GroupAction, conjugation,
                          left_multiplication_on_cosets, on_sequences)
from sylow.errors import InvariantError
from sylow.group import *


def _all_actions():
    S4 = SymmetricGroup(4)
    H = S4.generate([Cycles((0, 1, 2, 3))])
    yield conjugation(S4)
    yield left_multiplication_on_cosets(S4.left_cosets(H), S4)
    yield left_multiplication_on_cosets(S4.left_cosets(H), H)
    yield on_sequences(S4, sorted({"".join(s) for s in permutations("aabb")}))
    yield on_sequences(S4, sorted({"".join(s) for s in permutations("abbc")}))
    Z6 = CyclicGroup(6)
    yield GroupAction(Z6, range(6), lambda g, x: (g + x) % 6)
    yield GroupAction(Z6, range(12), lambda g, x: (2 * g + x) % 12)


def test_orbit():
    G = SymmetricGroup(5)
    action = on_sequences(G, [])
    assert set(action.orbit("aaaaa")) == {"aaaaa"}
    assert set(action.orbit("aaaab")) == {
        "aaaab", "baaaa", "abaaa", "aabaa", "aaaba"
    }
    assert set(action.orbit("aaabb")) == {
        'aaabb', 'aabab', 'baaab', 'babaa', 'baaba', 'abbaa', 'bbaaa', 'aabba',
        'ababa', 'abaab'
    }


def test_orbits_partition():
    G = CyclicGroup(6)
    action = GroupAction(G, range(12), lambda g, x: (2 * g + x) % 12)
    orbits = action.orbits()
    assert sorted(sorted(o) for o in orbits) == [[0, 2, 4, 6, 8, 10],
                                                 [1, 3, 5, 7, 9, 11]]
    assert action.fixed_points() == []


def test_axioms():
    for action in _all_actions():
        action.check_axioms()


def test_broken_axioms():
    G = CyclicGroup(3)
    with pytest.raises(InvariantError):
        GroupAction(G, range(3), lambda g, x: (x + 1) % 3).check_axioms()
    with pytest.raises(InvariantError):
        GroupAction(G, range(3), lambda g, x: x + g).check_axioms()


def test_orbit_stabilizer_law():
    for action in _all_actions():
        G = action.group
        for x in action.points:
            orbit = action.orbit(x)
            stab = action.stabilizer(x)
            assert len(orbit) * stab.order() == G.order()
            bijection = action.orbit_stabilizer(x)
            assert set(bijection) == set(orbit)
            assert len(set(bijection.values())) == len(orbit)


def test_fixed_points():
    G = SymmetricGroup(4)
    action = conjugation(G)
    assert action.fixed_points() == [Cycles()]

    G = CyclicGroup(6)
    action = conjugation(G)
    assert action.fixed_points() == list(range(6))


def test_fixed_cosets_are_normalizer():
    G = SymmetricGroup(4)
    H = G.generate([Cycles((0, 1), (2, 3))])
    space = G.left_cosets(H)
    action = left_multiplication_on_cosets(space, H)
    N = G.normalizer(H)
    assert set(action.fixed_points()) == {space.project(x) for x in N}
    assert len(action.fixed_points()) == N.order() // H.order()
