import logging

from random_source import RandomSource, default_source

from .random_bits import random_bits

DEFAULT_CERTAINTY = 100
SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

logger = logging.getLogger(__name__)


# Returns a random witness from range [2, n - 2], n should be at least 5
def random_witness(n: int, source: RandomSource) -> int:
    while True:
        a = random_bits(n.bit_length(), source)
        if 2 <= a <= n - 2:  # noqa: PLR2004
            return a


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test
# n - 1 = d * 2^s
def rabin_miller(n: int, d: int, s: int, source: RandomSource) -> bool:
    a = random_witness(n, source)
    x = pow(a, d, n)
    if x in (1, n - 1):
        return True

    for _ in range(s - 1):
        x = x * x % n

        if x == 1:
            return False
        if x == n - 1:
            return True

    return False


# The probability of a false positive is (1/2)^certainty
def is_probable_prime(n: int, certainty: int = DEFAULT_CERTAINTY, source: RandomSource | None = None) -> bool:
    if n < 2:  # noqa: PLR2004
        return False

    # small cases
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    if source is None:
        source = default_source()

    return all(rabin_miller(n, d, s, source) for _ in range(certainty))


# Returns a probable prime from range [2, 2^bit_length)
def random_probable_prime(bit_length: int, certainty: int = DEFAULT_CERTAINTY, source: RandomSource | None = None) -> int:
    if bit_length < 2:  # noqa: PLR2004
        msg = f'There are no primes with less than 2 bits, but got: {bit_length}'
        raise ArithmeticError(msg)

    if source is None:
        source = default_source()

    candidates = 1
    while not is_probable_prime(x := random_bits(bit_length, source), certainty, source):
        candidates += 1

    logger.debug('found %d-bit probable prime after %d candidates', bit_length, candidates)
    return x
