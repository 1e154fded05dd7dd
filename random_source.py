import secrets
from typing_extensions import override

from Crypto.Random import get_random_bytes


class RandomSource:
    # Must write len(buffer) cryptographically secure uniform bytes into buffer
    def fill(self, buffer: bytearray | memoryview) -> None:
        raise NotImplementedError

    def read(self, length: int) -> bytearray:
        if length < 0:
            msg = f'Length should be non-negative, but got: {length}'
            raise ValueError(msg)

        buffer = bytearray(length)
        self.fill(buffer)
        return buffer


class SystemRandomSource(RandomSource):
    @override
    def fill(self, buffer: bytearray | memoryview) -> None:
        buffer[:] = secrets.token_bytes(len(buffer))


class CryptoRandomSource(RandomSource):
    @override
    def fill(self, buffer: bytearray | memoryview) -> None:
        buffer[:] = get_random_bytes(len(buffer))


def default_source() -> RandomSource:
    return SystemRandomSource()
