from random_source import RandomSource, default_source


def random_bits(num_bits: int, source: RandomSource | None = None) -> int:
    """
    Returns a random integer uniformly distributed over [0, 2^num_bits - 1].

    A single bit is not generated at all: random_bits(1) is always 0.
    """
    if num_bits < 0:
        msg = f'Number of bits should be non-negative, but got: {num_bits}'
        raise ValueError(msg)
    if num_bits == 1:
        return 0

    if source is None:
        source = default_source()

    # whole bytes plus one byte for the remaining bits (zeroed when there are none)
    buffer = source.read(num_bits // 8 + 1)
    buffer[0] &= 0xFF >> (8 - num_bits % 8)

    return int.from_bytes(buffer, 'big')
