"""Семейство хеш-функций с независимыми сидами.

Каждая HashFunction держит нетронутое состояние keyed blake2b и копирует его
на каждый вызов, поэтому между вызовами не остаётся "хвостов" от прошлых значений.
Сиды берутся из numpy Generator (переданного снаружи или собственного) либо задаются
явно, так что одинаковые сиды дают одинаковые индексы.
"""

import hashlib
import struct
from typing import Hashable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidConfigurationError

SeedLike = Union[None, int, np.random.Generator]

_SEED_BYTES = 8
_DIGEST_BYTES = 8


def _encode_int(value: int) -> bytes:
    raw = value.to_bytes(value.bit_length() // 8 + 1, "little", signed=True)
    return b"i" + len(raw).to_bytes(4, "little") + raw


def _encode_items(tag: bytes, parts: List[bytes]) -> bytes:
    # длина перед каждой частью, чтобы ("ab", "c") != ("a", "bc")
    body = b"".join(len(p).to_bytes(4, "little") + p for p in parts)
    return tag + len(parts).to_bytes(4, "little") + body


def encode_item(item: Hashable) -> bytes:
    """Байтовое представление значения. Префикс разделяет типы.

    Равные по == числа (1, 1.0, True) кодируются одинаково. int берётся целиком,
    tuple и frozenset разбираются рекурсивно. Только для прочих объектов остаётся
    встроенный hash(), у него коллизии не зависят от сида.
    """
    if isinstance(item, str):
        return b"s" + item.encode("utf-8", "surrogatepass")
    if isinstance(item, bytes):
        return b"b" + item
    if isinstance(item, int):
        return _encode_int(int(item))
    if isinstance(item, float):
        if item.is_integer():
            return _encode_int(int(item))
        return b"f" + struct.pack("<d", item)
    if isinstance(item, tuple):
        return _encode_items(b"t", [encode_item(x) for x in item])
    if isinstance(item, frozenset):
        return _encode_items(b"z", sorted(encode_item(x) for x in item))
    # TypeError для нехешируемых значений пробрасывается наверх
    return b"h" + hash(item).to_bytes(8, "little", signed=True)


class HashFunction:
    """Keyed blake2b: digest 64 бита, индекс = digest % m."""

    def __init__(self, seed: int, m: int):
        if not 0 <= seed < 1 << (8 * _SEED_BYTES):
            raise InvalidConfigurationError(f"seed must fit in 64 unsigned bits, got {seed}")
        self.seed = seed
        self.m = m
        self._state = hashlib.blake2b(
            digest_size=_DIGEST_BYTES, key=seed.to_bytes(_SEED_BYTES, "little")
        )

    def digest(self, item: Hashable) -> int:
        h = self._state.copy()
        h.update(encode_item(item))
        return int.from_bytes(h.digest(), "little")

    def __call__(self, item: Hashable) -> int:
        return self.digest(item) % self.m


def draw_seeds(k: int, seed: SeedLike = None) -> List[int]:
    """k независимых 64-битных сидов из Generator."""
    rng = np.random.default_rng(seed)
    return [int(s) for s in rng.integers(0, 2**64, size=k, dtype=np.uint64)]


class HashFamily:
    """k хеш-функций, отображающих значение в k позиций битового массива."""

    def __init__(self, k: int, m: int, seed: SeedLike = None,
                 seeds: Optional[Sequence[int]] = None):
        if seeds is None:
            seeds = draw_seeds(k, seed)
        elif len(seeds) != k:
            raise InvalidConfigurationError(f"expected {k} seeds, got {len(seeds)}")
        self.k = k
        self.m = m
        self.functions = tuple(HashFunction(int(s), m) for s in seeds)

    @property
    def seeds(self) -> Tuple[int, ...]:
        return tuple(h.seed for h in self.functions)

    def indices(self, item: Hashable) -> List[int]:
        return [h(item) for h in self.functions]

    def __iter__(self):
        return iter(self.functions)

    def __len__(self) -> int:
        return self.k
