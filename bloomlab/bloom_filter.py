"""Bloom Filter - вероятностная структура для проверки принадлежности."""

import logging
from typing import Hashable, Optional, Sequence

from .bit_vector import BitVector
from .hashing import HashFamily, SeedLike
from .params import BloomParams, FilterConfig, expected_fpr

logger = logging.getLogger(__name__)


class BloomFilter:
    """Bloom Filter с O(k) add/contains.

    prob_fp: максимально допустимая вероятность false positive, строго в (0, 1).
    data_set_size: ожидаемый максимальный размер множества.
    seed: None, int или numpy Generator, из которого берутся сиды хеш-функций.
    seeds: явные сиды (ровно k штук), например чтобы повторить другой фильтр.

    contains() == False означает, что значения точно нет. True - значение, возможно,
    есть (может быть false positive). False negative невозможен.
    """

    def __init__(self, prob_fp: float, data_set_size: int, seed: SeedLike = None,
                 seeds: Optional[Sequence[int]] = None):
        self.config = FilterConfig(prob_fp, data_set_size)
        self.params = BloomParams.from_config(self.config)
        self.bits = BitVector(self.params.m)
        self.hashes = HashFamily(self.params.k, self.params.m, seed=seed, seeds=seeds)
        self.n = 0
        logger.debug(
            "BloomFilter(prob_fp=%s, data_set_size=%d): m=%d, k=%d",
            self.config.prob_fp, self.config.data_set_size, self.params.m, self.params.k,
        )

    @property
    def vector_len(self) -> int:
        return self.params.m

    @property
    def num_hashers(self) -> int:
        return self.params.k

    def add(self, item: Hashable) -> None:
        for index in self.hashes.indices(item):
            self.bits.set(index)
        self.n += 1

    def contains(self, item: Hashable) -> bool:
        for h in self.hashes:
            if not self.bits.test(h(item)):
                return False
        return True

    def __contains__(self, item: Hashable) -> bool:
        return self.contains(item)

    def __or__(self, other: 'BloomFilter') -> 'BloomFilter':
        """Объединение фильтров (нужны одинаковые m, k и сиды)."""
        if self.params != other.params or self.hashes.seeds != other.hashes.seeds:
            raise ValueError("Incompatible filters")
        result = BloomFilter(self.config.prob_fp, self.config.data_set_size,
                             seeds=self.hashes.seeds)
        result.bits = self.bits | other.bits
        result.n = self.n + other.n
        return result

    @property
    def load_factor(self) -> float:
        return self.bits.load_factor

    @property
    def fpr(self) -> float:
        """False Positive Rate при текущей загрузке: (1 - e^(-kn/m))^k."""
        return expected_fpr(self.params.m, self.params.k, self.n)

    def __repr__(self) -> str:
        return (f"BloomFilter(prob_fp={self.config.prob_fp}, "
                f"data_set_size={self.config.data_set_size}, "
                f"m={self.params.m}, k={self.params.k}, n={self.n})")
