from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Callable, Iterable, TypeVar

from . import config
from .errors import InvariantError
from .group import Coset, CosetSpace, Cycles, FiniteGroup, Subgroup, permute

logger = logging.getLogger(__name__)

T = TypeVar('T')


class GroupAction():
    """A left action of a finite group on a finite set of points.

    ``act(g, x)`` must satisfy ``act(e, x) == x`` and
    ``act(g * h, x) == act(g, act(h, x))``. This is not checked on each call;
    use :meth:`check_axioms` in tests.
    """

    def __init__(self, group: FiniteGroup, points: Iterable[T],
                 act: Callable[[object, T], T]):
        self.group = group
        if not isinstance(points, Collection):
            points = tuple(points)
        self.points = points
        self._act = act
        self._orbits = None

    def __repr__(self) -> str:
        return f"GroupAction({self.group!r}, {self.size} points)"

    def __call__(self, g, x: T) -> T:
        return self._act(g, x)

    def __len__(self):
        return len(self.points)

    @property
    def size(self) -> int:
        """Number of points, also when it is too large for ``len``."""
        try:
            return self.points.size
        except AttributeError:
            return len(self.points)

    def orbit(self, alpha: T) -> list[T]:
        """finds the orbit of ``alpha``, starting with ``alpha`` itself"""
        orbit = [alpha]
        seen = {alpha}
        for beta in orbit:
            for g in self.group.generators:
                gamma = self._act(g, beta)
                if gamma not in seen:
                    seen.add(gamma)
                    orbit.append(gamma)
        return orbit

    def orbits(self) -> list[list[T]]:
        """Partition of the points into orbits."""
        if self._orbits is None:
            seen = set()
            orbits = []
            for x in self.points:
                if x in seen:
                    continue
                orbit = self.orbit(x)
                seen.update(orbit)
                orbits.append(orbit)
            logger.debug("%d points split into %d orbits", self.size,
                         len(orbits))
            self._orbits = orbits
        return self._orbits

    def is_fixed(self, alpha: T) -> bool:
        return all(self._act(g, alpha) == alpha for g in self.group.generators)

    def fixed_points(self) -> list[T]:
        """Points whose orbit is a singleton."""
        return [x for x in self.points if self.is_fixed(x)]

    def stabilizer(self, alpha: T) -> Subgroup:
        """Return the stabilizer subgroup of ``alpha``."""
        return self.group.subgroup(
            [g for g in self.group if self._act(g, alpha) == alpha])

    def orbit_stabilizer(self, alpha: T) -> dict[T, Coset]:
        """The bijection ``g.alpha <-> g * Stab(alpha)``.

        Returns a dict from the orbit of ``alpha`` to the left cosets of its
        stabilizer, so ``len(orbit) == |G| / |Stab(alpha)|``.
        """
        space = self.group.left_cosets(self.stabilizer(alpha))
        ret = {}
        for coset in space:
            beta = self._act(coset.g, alpha)
            if beta in ret:
                raise InvariantError(
                    f"distinct cosets send {alpha!r} to the same point {beta!r}")
            ret[beta] = coset
        if config.check_invariants():
            if set(ret) != set(self.orbit(alpha)):
                raise InvariantError(
                    f"cosets of the stabilizer of {alpha!r} do not cover "
                    "its orbit")
            for beta, coset in ret.items():
                if any(self._act(g, alpha) != beta for g in coset):
                    raise InvariantError(
                        f"coset {coset!r} does not send {alpha!r} "
                        f"to a single point")
        return ret

    def check_axioms(self) -> None:
        """Check the action axioms on every point.

        Compatibility is checked against the generators only, which is enough
        since every element is a product of generators.
        """
        G = self.group
        points = set(self.points)
        for x in self.points:
            if self._act(G.identity, x) != x:
                raise InvariantError(f"identity moves {x!r}")
            for g in G:
                y = self._act(g, x)
                if y not in points:
                    raise InvariantError(f"{g!r} sends {x!r} outside the set")
                for h in G.generators:
                    if self._act(G.mul(g, h), x) != self._act(
                            g, self._act(h, x)):
                        raise InvariantError(
                            f"action is not compatible with {g!r} * {h!r}")


def left_multiplication_on_cosets(space: CosetSpace,
                                  acting: FiniteGroup) -> GroupAction:
    """``h . (xH) = (hx)H`` for ``h`` in a subgroup ``acting`` of ``space.G``."""
    G = space.G

    def act(h, coset: Coset) -> Coset:
        return space.project(G.mul(h, coset.g))

    return GroupAction(acting, space.cosets, act)


def conjugation(G: FiniteGroup, acting: FiniteGroup | None = None):
    """``g . x = g x g^-1`` on the elements of ``G``."""
    if acting is None:
        acting = G
    return GroupAction(acting, G.elements, G.conjugate)


def on_sequences(G: FiniteGroup, points: Iterable):
    """A permutation group acting on sequences by moving their positions."""

    def act(g: Cycles, x):
        # permute is a right action, so go through the inverse
        return permute(x, G.inv(g))

    return GroupAction(G, points, act)
