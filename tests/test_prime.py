import pytest

from sylow.prime import (factorint, is_prime, is_prime_power, multiplicity,
                         next_prime)


def test_is_prime():
    assert [q for q in range(30) if is_prime(q)] == [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29
    ]
    assert is_prime(65537)
    assert not is_prime(65537 * 65537)
    assert not is_prime(65537 * 3)
    assert is_prime(2305843009213693951)
    assert not is_prime(-7)
    assert not is_prime(4.0)


def test_next_prime():
    assert next_prime(1) == 2
    assert next_prime(2) == 3
    assert next_prime(24) == 29
    assert next_prime(65536) == 65537


def test_factorint():
    assert factorint(1) == {}
    assert factorint(24) == {2: 3, 3: 1}
    assert factorint(88179840) == {2: 7, 3: 9, 5: 1, 7: 1}
    assert factorint(65537**2 * 6) == {2: 1, 3: 1, 65537: 2}
    with pytest.raises(ValueError):
        factorint(0)


def test_multiplicity():
    assert multiplicity(2, 24) == 3
    assert multiplicity(3, 24) == 1
    assert multiplicity(5, 24) == 0
    assert is_prime_power(1, 2)
    assert is_prime_power(27, 3)
    assert not is_prime_power(12, 2)
