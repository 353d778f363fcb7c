from __future__ import annotations

from itertools import product

from .finite_group import FiniteGroup


class CyclicGroup(FiniteGroup):
    """The integers modulo ``N`` under addition."""

    def __init__(self, N: int):
        if N < 1:
            raise ValueError(f"N must be positive, got {N}")
        self.N = N
        super().__init__(range(N),
                         lambda a, b: (a + b) % N,
                         generators=[1] if N > 1 else [])

    def __repr__(self) -> str:
        return f"CyclicGroup({self.N})"


class AbelianGroup(FiniteGroup):
    """Direct product ``Z_{n_1} x ... x Z_{n_k}`` with elements as tuples."""

    def __init__(self, *n: int):
        if any(ni < 1 for ni in n):
            raise ValueError(f"all factors must be positive, got {n}")
        self.n = tuple(sorted(n))
        generators = []
        for i, ni in enumerate(self.n):
            if ni >= 2:
                generators.append(
                    tuple(1 if j == i else 0 for j in range(len(self.n))))

        def add(a, b):
            return tuple((x + y) % m for x, y, m in zip(a, b, self.n))

        super().__init__(product(*[range(ni) for ni in self.n]),
                         add,
                         generators=generators)

    def __repr__(self) -> str:
        return f"AbelianGroup{self.n}"
