"""Fixed points of p-group actions.

If a group of order ``p**n`` acts on a finite set ``X``, every orbit has size
dividing ``p**n``, so every orbit that is not a single fixed point has size
divisible by ``p``. Summing orbit sizes gives

    |X| = |Fix(X)|  (mod p)

which is the only counting fact the Cauchy and Sylow constructions need.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from . import config
from .action import GroupAction
from .errors import InvariantError
from .prime import is_prime_power, multiplicity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Congruence():
    """``set_size = fixed_count (mod modulus)``"""
    set_size: int
    fixed_count: int
    modulus: int
    orbit_sizes: tuple[int, ...] | None = None

    @property
    def holds(self) -> bool:
        return (self.set_size - self.fixed_count) % self.modulus == 0


def p_group_exponent(order: int, p: int) -> int:
    """Return ``n`` such that ``order == p**n``."""
    if not is_prime_power(order, p):
        raise ValueError(f"group of order {order} is not a {p}-group")
    return multiplicity(p, order)


def fixed_point_congruence(action: GroupAction, p: int) -> Congruence:
    """Partition the points into orbits and count the singletons.

    Raises ``ValueError`` if the acting group is not a p-group and
    ``InvariantError`` if the orbits are not consistent with that.
    """
    order = action.group.order()
    p_group_exponent(order, p)
    sizes = tuple(len(orbit) for orbit in action.orbits())
    if sum(sizes) != action.size:
        raise InvariantError(
            f"orbits cover {sum(sizes)} points, expected {action.size}")
    if config.check_invariants():
        for size in sizes:
            if order % size != 0:
                raise InvariantError(
                    f"orbit of size {size} under a group of order {order}")
    fact = Congruence(set_size=action.size,
                      fixed_count=sum(1 for size in sizes if size == 1),
                      modulus=p,
                      orbit_sizes=sizes)
    logger.debug("|X| = %d, |Fix(X)| = %d (mod %d)", fact.set_size,
                 fact.fixed_count, p)
    if not fact.holds:
        raise InvariantError(f"{fact} does not hold")
    return fact


def census(action: GroupAction, p: int) -> tuple[Congruence, list]:
    """Count the points and collect the fixed ones in a single pass.

    Only the fixed points are kept, so the points may be a lazy collection
    far larger than memory. Orbit sizes are not recorded.
    """
    p_group_exponent(action.group.order(), p)
    count = 0
    fixed = []
    for x in action.points:
        count += 1
        if action.is_fixed(x):
            fixed.append(x)
    if count != action.size:
        raise InvariantError(
            f"iterated over {count} points, expected {action.size}")
    fact = Congruence(set_size=count, fixed_count=len(fixed), modulus=p)
    logger.debug("census: |X| = %d, |Fix(X)| = %d (mod %d)", count,
                 len(fixed), p)
    if not fact.holds:
        raise InvariantError(f"{fact} does not hold")
    return fact, fixed


def fixed_point_exists(action: GroupAction, p: int):
    """Return a fixed point, given that ``p`` does not divide ``|X|``."""
    if action.size % p == 0:
        raise ValueError(f"{p} divides the size {action.size} of the set")
    fixed_point_congruence(action, p)
    for orbit in action.orbits():
        if len(orbit) == 1:
            return orbit[0]
    raise InvariantError("no fixed point although |X| != 0 (mod p)")


def another_fixed_point(action: GroupAction, p: int, known, fixed_points=None):
    """Return a fixed point other than ``known``.

    Requires ``p`` to divide ``|X|`` and ``known`` to be fixed: then
    ``|Fix(X)|`` is a positive multiple of ``p``, hence at least 2.

    ``fixed_points`` may be passed when the fixed set is already known in
    closed form; the orbits are then never computed, and the list is only
    checked against the congruence.
    """
    if action.size % p != 0:
        raise ValueError(
            f"{p} does not divide the size {action.size} of the set")
    if not action.is_fixed(known):
        raise ValueError(f"{known!r} is not a fixed point")
    if fixed_points is None:
        fixed_point_congruence(action, p)
        fixed_points = [
            orbit[0] for orbit in action.orbits() if len(orbit) == 1
        ]
    else:
        fixed_points = list(fixed_points)
        if known not in fixed_points:
            raise InvariantError(f"{known!r} missing from the fixed points")
        if len(fixed_points) % p != 0:
            raise InvariantError(
                f"{len(fixed_points)} fixed points, but {p} divides |X|")
    for x in fixed_points:
        if x != known:
            return x
    raise InvariantError(f"{known!r} is the only fixed point")
