"""Cauchy's theorem by counting fixed points.

For a prime ``p`` dividing ``|G|`` let ``V`` be the set of ``p``-tuples of
elements of ``G`` whose product is the identity. The cyclic group of order
``p`` acts on ``V`` by rotation, its fixed points are the constant tuples, and
``p`` divides ``|V| = |G|**(p-1)``. The all-identity tuple is one fixed point,
so there is another one ``(a, ..., a)`` with ``a != e`` and ``a**p == e``.
"""
from __future__ import annotations

import functools
import itertools
import logging

from . import config
from .action import GroupAction
from .counting import another_fixed_point, census
from .errors import InvalidArgument, InvariantError, Unsatisfiable
from .group import CyclicGroup, FiniteGroup
from .prime import is_prime

logger = logging.getLogger(__name__)


class ProductOneTuple():
    """A tuple of group elements whose product, in order, is the identity."""

    __slots__ = ('group', 'entries')

    def __init__(self, group: FiniteGroup, entries):
        self.group = group
        self.entries = tuple(entries)
        if self.product() != group.identity:
            raise ValueError(
                f"product of {self.entries!r} is not the identity")

    @classmethod
    def complete(cls, group: FiniteGroup, head) -> ProductOneTuple:
        """Prepend the inverse of the product of ``head``.

        This is a bijection from ``(p-1)``-tuples onto product-one
        ``p``-tuples.
        """
        head = tuple(head)
        prod = functools.reduce(group.mul, head, group.identity)
        return cls(group, (group.inv(prod), ) + head)

    def product(self):
        return functools.reduce(self.group.mul, self.entries,
                                self.group.identity)

    def rotate(self, k: int = 1) -> ProductOneTuple:
        """Cyclic shift by ``k`` places.

        The product of the shifted tuple is a conjugate of the identity.
        """
        k = k % len(self.entries)
        entries = self.entries[k:] + self.entries[:k]
        try:
            return ProductOneTuple(self.group, entries)
        except ValueError:
            raise InvariantError(
                f"rotating {self.entries!r} broke the product") from None

    def is_constant(self) -> bool:
        return all(x == self.entries[0] for x in self.entries)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, i):
        return self.entries[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProductOneTuple):
            return NotImplemented
        return self.entries == other.entries

    def __hash__(self):
        return hash(self.entries)

    def __repr__(self):
        return f"ProductOneTuple{self.entries!r}"


class ProductOneTuples():
    """The ``p``-tuples of ``G`` with product equal to the identity.

    Nothing is stored: iteration completes every ``(p-1)``-tuple on the fly,
    and the size ``|G|**(p-1)`` comes from that bijection.
    """

    def __init__(self, group: FiniteGroup, p: int):
        self.group = group
        self.p = p
        self.size = group.order()**(p - 1)

    def __repr__(self):
        return f"ProductOneTuples({self.group!r}, {self.p})"

    def __len__(self):
        return self.size

    def __iter__(self):
        for head in itertools.product(self.group.elements, repeat=self.p - 1):
            yield ProductOneTuple.complete(self.group, head)

    def __contains__(self, t) -> bool:
        return (isinstance(t, ProductOneTuple) and len(t) == self.p
                and all(x in self.group for x in t)
                and t.product() == self.group.identity)

    def trivial(self) -> ProductOneTuple:
        return ProductOneTuple(self.group, [self.group.identity] * self.p)

    def constant_tuples(self) -> list[ProductOneTuple]:
        """``(a, ..., a)`` for every ``a`` with ``a**p == e``."""
        G = self.group
        return [
            ProductOneTuple(G, [a] * self.p) for a in G
            if G.pow(a, self.p) == G.identity
        ]


def product_one_tuples(G: FiniteGroup, p: int) -> ProductOneTuples:
    return ProductOneTuples(G, p)


def rotation_action(V: ProductOneTuples, p: int) -> GroupAction:
    """The integers mod ``p`` acting on ``V`` by rotation."""
    return GroupAction(CyclicGroup(p), V, lambda k, t: t.rotate(k))


def cauchy(G: FiniteGroup, p: int):
    """Return an element of order ``p``.

    Assumes ``p`` is prime and divides ``|G|``.

    A tuple fixed by rotation equals all of its shifts, so the fixed points
    of the rotation action are the constant tuples in ``V``. When ``|V|`` is
    within ``cauchy.census_limit`` the whole of ``V`` is also streamed once
    to confirm that.
    """
    V = product_one_tuples(G, p)
    action = rotation_action(V, p)
    trivial = V.trivial()
    if not action.is_fixed(trivial):
        raise InvariantError(f"rotation moves {trivial!r}")

    fixed = V.constant_tuples()
    if config.check_invariants():
        if not all(action.is_fixed(t) for t in fixed):
            raise InvariantError("a constant tuple is moved by rotation")
        if V.size <= config.get('cauchy.census_limit'):
            _, streamed = census(action, p)
            if set(streamed) != set(fixed):
                raise InvariantError(
                    "fixed points of the rotation are not the constant tuples")
        else:
            logger.debug("skip census of %d product-one tuples", V.size)

    t = another_fixed_point(action, p, trivial, fixed)
    if not t.is_constant():
        raise InvariantError(f"fixed point {t!r} is not a constant tuple")
    a = t[0]
    if config.check_invariants() and G.element_order(a) != p:
        raise InvariantError(
            f"{a!r} has order {G.element_order(a)}, expected {p}")
    logger.debug("element %r of order %d", a, p)
    return a


def require_prime(p) -> None:
    if not isinstance(p, int) or not is_prime(p):
        raise InvalidArgument(f"p must be a prime, got {p!r}")


def exists_element_of_order(G: FiniteGroup, p: int):
    """An element of ``G`` of order exactly ``p``.

    Raises:
        InvalidArgument: ``p`` is not prime.
        Unsatisfiable: ``p`` does not divide the order of ``G``.
    """
    require_prime(p)
    if G.order() % p != 0:
        raise Unsatisfiable(f"{p} does not divide the order {G.order()}")
    return cauchy(G, p)
