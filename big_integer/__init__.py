from .primes import DEFAULT_CERTAINTY, is_probable_prime, random_probable_prime
from .random_bits import random_bits

__all__ = [
    'DEFAULT_CERTAINTY',
    'is_probable_prime',
    'random_bits',
    'random_probable_prime',
]
