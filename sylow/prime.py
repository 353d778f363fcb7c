import bisect
import itertools
import random
from math import isqrt
from typing import Dict, List, Set

SIEVE_LIMIT = 50000


def __sieve(lst, p_lst: List[int]) -> None:
    """Sieve of Eratosthenes"""
    p = next(lst)
    p_lst.append(p)
    for num in lst:
        if all(num % p != 0
               for p in itertools.takewhile(lambda x, lim=isqrt(num): x <= lim,
                                            p_lst)):
            p_lst.append(num)


__least_primes: List[int] = [2]

__sieve(iter(range(3, SIEVE_LIMIT, 2)), __least_primes)

__primes_set: Set[int] = set(__least_primes)


def _MillerRabin(n: int, a: int) -> bool:
    """
    Miller-Rabin test with base a

    Args:
        n (int): number to test
        a (int): base

    Returns:
        bool: result
    """
    d = n - 1
    while (d & 1) == 0:
        d >>= 1
    t = pow(a, d, n)
    while d != n - 1 and t != n - 1 and t != 1:
        t = (t * t) % n
        d <<= 1
    return t == n - 1 or (d & 1) == 1


def millerRabinTest(q: int) -> bool:
    if q < 4759123141:
        return all(_MillerRabin(q, a) for a in [2, 7, 61])
    elif q < 3474749660383:
        return all(_MillerRabin(q, a) for a in [2, 3, 5, 7, 11, 13])
    elif q < 3825123056546413051:
        return all(
            _MillerRabin(q, a) for a in [2, 3, 5, 7, 11, 13, 17, 19, 23])
    elif q < 3317044064679887385961981:
        return all(
            _MillerRabin(q, a)
            for a in [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41])
    else:
        bases = random.sample(__least_primes, 20)
        return all(_MillerRabin(q, a) for a in bases)


def is_prime(q: int) -> bool:
    if not isinstance(q, int) or q < 2:
        return False
    if q in __primes_set:
        return True
    if q <= SIEVE_LIMIT or q % 2 == 0 or q % 3 == 0:
        return False
    if millerRabinTest(q):
        __primes_set.add(q)
        return True
    else:
        return False


def next_prime(x: int) -> int:
    """smallest prime greater than `x`"""
    if x < __least_primes[-1]:
        index = bisect.bisect(__least_primes, x)
        return __least_primes[index]
    if x % 2 == 0:
        x += 1
    else:
        x += 2
    while True:
        if is_prime(x):
            return x
        else:
            x += 2


def factorint(n: int) -> Dict[int, int]:
    """
    prime factorization of `n`

    Args:
        n (int): a positive integer

    Returns:
        dict: mapping prime -> exponent, empty for n = 1
    """
    if n < 1:
        raise ValueError(f'n must be positive, got {n}')
    ret = {}
    for p in __least_primes:
        if p * p > n:
            break
        while n % p == 0:
            ret[p] = ret.get(p, 0) + 1
            n //= p
    if n == 1:
        return ret
    if is_prime(n):
        ret[n] = ret.get(n, 0) + 1
        return ret
    p = next_prime(__least_primes[-1])
    while p * p <= n:
        while n % p == 0:
            ret[p] = ret.get(p, 0) + 1
            n //= p
        p = next_prime(p)
    if n > 1:
        ret[n] = ret.get(n, 0) + 1
    return ret


def multiplicity(p: int, n: int) -> int:
    """exponent of `p` in `n`, i.e. the largest k with p**k | n"""
    if n == 0:
        raise ValueError('multiplicity of 0 is infinite')
    k = 0
    while n % p == 0:
        n //= p
        k += 1
    return k


def is_prime_power(n: int, p: int) -> bool:
    """True if `n` is p**k for some k >= 0"""
    if n < 1:
        return False
    return n == p**multiplicity(p, n)


__all__ = [
    'is_prime', 'next_prime', 'factorint', 'multiplicity', 'is_prime_power'
]
