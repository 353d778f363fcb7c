from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

import numpy as np

from ..errors import InvariantError

logger = logging.getLogger(__name__)


class FiniteGroup():
    """A finite group stored as a Cayley table.

    Elements may be any hashable values. Every element is identified by its
    position in ``elements``, and the group law is an integer array ``table``
    where ``table[i, j]`` is the position of ``elements[i] * elements[j]``.

    Construction checks closure, the identity and inverses. Associativity is
    only checked by :meth:`verify`.
    """

    def __init__(self,
                 elements: Iterable,
                 operation: Callable,
                 generators: list | None = None,
                 name: str | None = None):
        elements = tuple(elements)
        index = _make_index(elements)
        n = len(elements)
        table = np.empty((n, n), dtype=np.intp)
        for i, a in enumerate(elements):
            for j, b in enumerate(elements):
                c = operation(a, b)
                try:
                    table[i, j] = index[c]
                except KeyError:
                    raise ValueError(
                        f"{a!r} * {b!r} = {c!r} is not an element of the group"
                    ) from None
        self._setup(elements, index, table, generators, name)

    def _setup(self, elements, index, table, generators=None, name=None):
        n = len(elements)
        if n == 0:
            raise ValueError("a group must have at least one element")
        self._elements = elements
        self._index = index
        self._table = table
        self.name = name

        arange = np.arange(n)
        candidates = np.flatnonzero((table == arange).all(axis=1)
                                    & (table.T == arange).all(axis=1))
        if len(candidates) == 0:
            raise ValueError("the operation has no identity element")
        self._identity = int(candidates[0])

        has_right_inv = table == self._identity
        if not has_right_inv.any(axis=1).all():
            raise ValueError("some element has no inverse")
        self._inverse = np.argmax(has_right_inv, axis=1)
        if not (table[self._inverse, arange] == self._identity).all():
            raise ValueError("some element has no two-sided inverse")

        if generators is None:
            self._generators = None
        else:
            self._generators = [
                self._pos(g) for g in generators
                if self._pos(g) != self._identity
            ]

    def __repr__(self) -> str:
        if self.name is not None:
            return self.name
        return f"FiniteGroup(order={self.order()})"

    def order(self) -> int:
        return len(self._elements)

    def __len__(self):
        return self.order()

    def __iter__(self) -> Iterator:
        return iter(self._elements)

    def __getitem__(self, i):
        return self._elements[i]

    def __contains__(self, x) -> bool:
        try:
            return x in self._index
        except TypeError:
            return False

    def __eq__(self, other) -> bool:
        """Two groups are equal if they have the same elements and the same
        multiplication."""
        if not isinstance(other, FiniteGroup):
            return NotImplemented
        if self.order() != other.order() or any(x not in other
                                                for x in self._elements):
            return False
        perm = np.array([other._index[x] for x in self._elements])
        return bool(
            np.array_equal(other._table[np.ix_(perm, perm)],
                           perm[self._table]))

    def __hash__(self):
        return hash(frozenset(self._elements))

    def __le__(self, other: FiniteGroup) -> bool:
        return self.is_subgroup(other)

    def __lt__(self, other: FiniteGroup) -> bool:
        return self.is_subgroup(other) and self.order() < other.order()

    @property
    def elements(self) -> tuple:
        return self._elements

    @property
    def identity(self):
        return self._elements[self._identity]

    @property
    def generators(self) -> list:
        """A generating set, computed greedily when none was given."""
        if self._generators is None:
            gens = []
            found = {self._identity}
            for i in range(self.order()):
                if i not in found:
                    gens.append(i)
                    found = self._closure(gens)
            self._generators = gens
        return [self._elements[i] for i in self._generators]

    def _pos(self, x) -> int:
        try:
            return self._index[x]
        except (KeyError, TypeError):
            raise ValueError(f"{x!r} is not an element of {self!r}") from None

    def _positions(self, H: Iterable) -> np.ndarray:
        return np.array(sorted({self._pos(x) for x in H}), dtype=np.intp)

    def _closure(self, gens: list[int]) -> set[int]:
        found = {self._identity}
        queue = [self._identity]
        for a in queue:
            for g in gens:
                c = int(self._table[a, g])
                if c not in found:
                    found.add(c)
                    queue.append(c)
        return found

    def mul(self, a, b):
        return self._elements[self._table[self._pos(a), self._pos(b)]]

    def inv(self, a):
        return self._elements[self._inverse[self._pos(a)]]

    def pow(self, a, k: int):
        i = self._pos(a)
        if k < 0:
            i = self._inverse[i]
            k = -k
        ret = self._identity
        while k > 0:
            if k % 2 == 1:
                ret = self._table[ret, i]
            i = self._table[i, i]
            k //= 2
        return self._elements[ret]

    def element_order(self, a) -> int:
        """The least n > 0 such that a**n is the identity."""
        i = self._pos(a)
        x, n = i, 1
        while x != self._identity:
            x = self._table[x, i]
            n += 1
        return n

    def conjugate(self, g, x):
        """Return ``g * x * g**-1``."""
        i = self._pos(g)
        return self._elements[self._table[self._table[i, self._pos(x)],
                                          self._inverse[i]]]

    def subgroup(self, elements: Iterable) -> Subgroup:
        """Return the subgroup made of ``elements``.

        Raises ``ValueError`` if ``elements`` is not closed under the group
        operation.
        """
        return Subgroup(self, self._positions(elements))

    def generate(self, generators: Iterable) -> Subgroup:
        """Return the subgroup generated by ``generators``."""
        generators = list(generators)
        gens = [self._pos(g) for g in generators]
        return Subgroup(self, sorted(self._closure(gens)), generators)

    def trivial_subgroup(self) -> Subgroup:
        return Subgroup(self, [self._identity], [])

    def as_subgroup(self) -> Subgroup:
        return Subgroup(self, range(self.order()), self.generators)

    def is_subgroup(self, G: FiniteGroup) -> bool:
        """Return ``True`` if all elements of ``self`` belong to ``G`` and
        are closed under the operation of ``G``."""
        if not isinstance(G, FiniteGroup):
            return False
        if any(x not in G for x in self._elements):
            return False
        if G.order() % self.order() != 0:
            return False
        idx = G._positions(self._elements)
        mask = np.zeros(G.order(), dtype=bool)
        mask[idx] = True
        return bool(mask[G._table[np.ix_(idx, idx)]].all())

    def is_normal(self, G: FiniteGroup) -> bool:
        """Test if ``self`` is a normal subgroup of ``G``."""
        if not self.is_subgroup(G):
            return False
        return all(
            G.conjugate(g, h) in self for g in G.generators
            for h in self.generators)

    def normalizer(self, H: FiniteGroup) -> Subgroup:
        """Return the normalizer of ``H`` in ``self``."""
        if not H.is_subgroup(self):
            raise ValueError(f"{H!r} is not a subgroup of {self!r}")
        mask = np.zeros(self.order(), dtype=bool)
        mask[self._positions(H)] = True
        normal = np.ones(self.order(), dtype=bool)
        for h in H.generators:
            # g h g^-1 for every g at once
            conj = self._table[self._table[:, self._pos(h)], self._inverse]
            normal &= mask[conj]
        return Subgroup(self, np.flatnonzero(normal))

    def index(self, H: FiniteGroup) -> int:
        if not H.is_subgroup(self):
            raise ValueError(f"{H!r} is not a subgroup of {self!r}")
        return self.order() // H.order()

    def left_cosets(self, H: FiniteGroup) -> CosetSpace:
        return CosetSpace(self, H)

    def quotient(self, N: FiniteGroup) -> QuotientGroup:
        return QuotientGroup(CosetSpace(self, N))

    def verify(self) -> None:
        """Check the group axioms on the whole Cayley table."""
        T = self._table
        n = self.order()
        arange = np.arange(n)
        # T[T[a, b], c] == T[a, T[b, c]]
        if not np.array_equal(T[T], T[arange[:, None, None], T[None, :, :]]):
            raise InvariantError(f"{self!r} is not associative")
        if not ((T[self._identity] == arange).all() and
                (T[:, self._identity] == arange).all()):
            raise InvariantError(f"{self!r} has a broken identity")
        if not ((T[arange, self._inverse] == self._identity).all() and
                (T[self._inverse, arange] == self._identity).all()):
            raise InvariantError(f"{self!r} has broken inverses")


def _make_index(elements: tuple) -> dict:
    index = {}
    for i, x in enumerate(elements):
        if x in index:
            raise ValueError(f"duplicate element {x!r}")
        index[x] = i
    return index


class Subgroup(FiniteGroup):
    """A subset of ``parent`` that is a group under the same operation."""

    def __init__(self, parent: FiniteGroup, positions, generators=None):
        positions = sorted({int(i) for i in positions})
        if not positions:
            raise ValueError("a subgroup can not be empty")
        local = np.full(parent.order(), -1, dtype=np.intp)
        local[positions] = np.arange(len(positions))
        table = local[parent._table[np.ix_(positions, positions)]]
        if (table < 0).any():
            raise ValueError(
                "the subset is not closed under the group operation")
        elements = tuple(parent._elements[i] for i in positions)
        self.parent = parent
        self._setup(elements, _make_index(elements), table, generators)

    def __repr__(self) -> str:
        if self.order() <= 12:
            return f"Subgroup({list(self._elements)!r})"
        return f"Subgroup(order={self.order()})"


class Coset():
    """The left coset ``g * H``.

    ``g`` is the canonical representative, the member that comes first in the
    ambient group.
    """

    __slots__ = ('H', 'g', '_members')

    def __init__(self, H: FiniteGroup, g, members: frozenset):
        self.H = H
        self.g = g
        self._members = members

    def __contains__(self, x) -> bool:
        return x in self._members

    def __iter__(self):
        return iter(self._members)

    def __len__(self):
        return len(self._members)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coset):
            return NotImplemented
        return self._members == other._members

    def __hash__(self):
        return hash(self._members)

    def __repr__(self):
        return f"{self.g!r}*H"


class CosetSpace():
    """Left cosets of ``H`` in ``G`` as an explicit partition of ``G``.

    Every element of ``G`` is labelled with the number of its coset, which
    gives the projection ``g -> gH`` as an array lookup.
    """

    def __init__(self, G: FiniteGroup, H: FiniteGroup):
        if not H.is_subgroup(G):
            raise ValueError(f"{H!r} is not a subgroup of {G!r}")
        self.G = G
        self.H = H
        h_idx = G._positions(H)
        labels = np.full(G.order(), -1, dtype=np.intp)
        cosets = []
        for i in range(G.order()):
            if labels[i] >= 0:
                continue
            members = G._table[i, h_idx]
            labels[members] = len(cosets)
            cosets.append(
                Coset(H, G._elements[i],
                      frozenset(G._elements[m] for m in members)))
        self._labels = labels
        self.cosets = tuple(cosets)
        logger.debug("%d cosets of a subgroup of order %d in group of order %d",
                     len(cosets), H.order(), G.order())

    def __len__(self):
        return len(self.cosets)

    def __iter__(self):
        return iter(self.cosets)

    def label(self, g) -> int:
        return int(self._labels[self.G._pos(g)])

    def project(self, g) -> Coset:
        """The canonical map ``g -> gH``."""
        return self.cosets[self.label(g)]

    def representative(self, g):
        return self.project(g).g


class QuotientGroup(FiniteGroup):
    """The group ``G / N`` of cosets of a normal subgroup ``N``."""

    def __init__(self, space: CosetSpace):
        G, N = space.G, space.H
        if not N.is_normal(G):
            raise ValueError(f"{N!r} is not a normal subgroup of {G!r}")
        self.space = space
        self.numerator = G
        self.kernel = N
        reps = np.array([G._pos(c.g) for c in space.cosets], dtype=np.intp)
        # (aN)(bN) = (ab)N on representatives
        table = space._labels[G._table[np.ix_(reps, reps)]]
        elements = space.cosets
        self._setup(elements, _make_index(elements), table,
                    [space.project(g) for g in G.generators])

    def __repr__(self) -> str:
        return f"QuotientGroup(order={self.order()})"

    def project(self, g) -> Coset:
        return self.space.project(g)

    def preimage(self, K: FiniteGroup) -> Subgroup:
        """Pull a subgroup of the quotient back to the numerator.

        The result contains the kernel and has order ``|K| * |N|``.
        """
        if not K.is_subgroup(self):
            raise ValueError(f"{K!r} is not a subgroup of {self!r}")
        labels = self._positions(K)
        positions = np.flatnonzero(np.isin(self.space._labels, labels))
        return Subgroup(self.numerator, positions)
