"""AES-128 counter-mode pseudo-random generator."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK = 16
_MASK128 = (1 << 128) - 1


def _check_block(value: bytes, name: str) -> bytes:
    data = bytes(value)
    if len(data) != _BLOCK:
        raise ValueError(f"{name} must be {_BLOCK} bytes, got {len(data)}")
    return data


def aes128_ctr(seed: bytes, counter: bytes, num_bytes: int) -> tuple[bytes, bytes]:
    """Produce ``num_bytes`` of keystream and the advanced counter.

    ``seed`` is the AES-128 key. ``counter`` is a 128-bit little-endian
    value; block ``i`` is the encryption of ``counter + i`` (mod 2**128)
    in the same byte order. The returned counter has moved past every
    block used, a partial final block included.
    """
    key = _check_block(seed, "seed")
    start = int.from_bytes(_check_block(counter, "counter"), "little")
    if num_bytes < 0:
        raise ValueError(f"byte count must not be negative, got {num_bytes}")
    block_num = -(-num_bytes // _BLOCK)
    if block_num == 0:
        return b"", int(start).to_bytes(_BLOCK, "little")
    plaintext = b"".join(
        ((start + i) & _MASK128).to_bytes(_BLOCK, "little") for i in range(block_num)
    )
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    stream = encryptor.update(plaintext) + encryptor.finalize()
    next_counter = ((start + block_num) & _MASK128).to_bytes(_BLOCK, "little")
    return stream[:num_bytes], next_counter


class Prng:
    """A seeded generator whose counter advances with every call."""

    def __init__(self, seed: bytes | None = None, counter: bytes | None = None) -> None:
        self._seed = bytes(_BLOCK)
        self._counter = bytes(_BLOCK)
        if seed is not None:
            self.set_current_seed(seed, counter)
        elif counter is not None:
            self._counter = _check_block(counter, "counter")

    def set_current_seed(self, seed: bytes, counter: bytes | None = None) -> None:
        """Set the 16-byte seed; the counter is reset to zero unless given."""
        self._seed = _check_block(seed, "seed")
        self._counter = (
            bytes(_BLOCK) if counter is None else _check_block(counter, "counter")
        )

    def get_current_seed(self) -> tuple[bytes, bytes]:
        """Return the current ``(seed, counter)`` pair."""
        return self._seed, self._counter

    def generate(self, bit_width: int, element_size: int, element_num: int) -> bytes:
        """Return ``element_size * element_num`` random bytes.

        ``bit_width`` must lie between 1 and ``element_size * 8``.
        """
        if bit_width <= 0 or bit_width > element_size * 8:
            raise ValueError(
                f"bit width {bit_width} is invalid for {element_size}-byte elements"
            )
        data, self._counter = aes128_ctr(
            self._seed, self._counter, element_size * element_num
        )
        return data