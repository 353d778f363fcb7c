from __future__ import annotations

import logging

from . import config
from .action import left_multiplication_on_cosets
from .cauchy import cauchy, require_prime
from .counting import fixed_point_congruence
from .errors import InvalidArgument, InvariantError, Unsatisfiable
from .group import FiniteGroup, Subgroup
from .prime import multiplicity

logger = logging.getLogger(__name__)


def extend(G: FiniteGroup, H: Subgroup, p: int) -> Subgroup:
    """Grow a subgroup ``H`` of order ``p**k`` to one of order ``p**(k+1)``.

    Requires ``p**(k+1)`` to divide ``|G|``. The result contains ``H`` and
    lies in the normalizer of ``H``.

    ``H`` acts on the cosets ``G/H`` by left multiplication and ``xH`` is
    fixed exactly when ``x`` normalizes ``H``, so the fixed points are the
    quotient ``N(H)/H``. Counting fixed points mod ``p`` shows that ``p``
    divides ``|N(H)/H|``, so that quotient has an element of order ``p``,
    whose cyclic group pulls back to the subgroup we want.
    """
    N = G.normalizer(H)
    Q = N.quotient(N.subgroup(H.elements))
    space = G.left_cosets(H)
    action = left_multiplication_on_cosets(space, H)
    fact = fixed_point_congruence(action, p)
    if fact.fixed_count != Q.order():
        raise InvariantError(
            f"{fact.fixed_count} fixed cosets, but |N(H)/H| = {Q.order()}")
    if config.check_invariants():
        if set(action.fixed_points()) != {space.project(x) for x in N}:
            raise InvariantError(
                "fixed cosets are not the cosets of the normalizer")
    if Q.order() % p != 0:
        raise InvariantError(f"{p} does not divide |N(H)/H| = {Q.order()}")
    logger.debug("|H| = %d, |N(H)| = %d, |N(H)/H| = %d", H.order(),
                 N.order(), Q.order())

    x = cauchy(Q, p)
    K = Q.preimage(Q.generate([x]))
    if K.order() != H.order() * p:
        raise InvariantError(
            f"preimage has order {K.order()}, expected {H.order() * p}")
    return G.subgroup(K.elements)


def exists_subgroup_of_order(G: FiniteGroup, p: int, n: int) -> Subgroup:
    """A subgroup of ``G`` of order exactly ``p**n``.

    Raises:
        InvalidArgument: ``p`` is not prime or ``n`` is negative.
        Unsatisfiable: ``p**n`` does not divide the order of ``G``.
    """
    require_prime(p)
    if not isinstance(n, int) or n < 0:
        raise InvalidArgument(f"n must be a non-negative integer, got {n!r}")
    if G.order() % p**n != 0:
        raise Unsatisfiable(f"{p}**{n} does not divide the order {G.order()}")

    H = G.trivial_subgroup()
    k = 0
    while k < n:
        logger.debug("step %d of %d: subgroup of order %d", k + 1, n,
                     H.order())
        H = extend(G, H, p)
        k += 1
    if H.order() != p**n:
        raise InvariantError(f"constructed order {H.order()} != {p}**{n}")
    return H


def p_part(order: int, p: int) -> int:
    """Largest power of ``p`` dividing ``order``."""
    return p**multiplicity(p, order)


def sylow_subgroup(G: FiniteGroup, p: int) -> Subgroup:
    """A Sylow ``p``-subgroup of ``G``."""
    require_prime(p)
    return exists_subgroup_of_order(G, p, multiplicity(p, G.order()))
