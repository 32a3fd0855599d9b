"""Расчёт оптимальных параметров Bloom Filter по prob_fp и размеру множества."""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfigurationError


def _check_prob_fp(prob_fp: float) -> float:
    # bool и строки не считаем числами
    if isinstance(prob_fp, bool) or not isinstance(prob_fp, numbers.Real):
        raise InvalidConfigurationError(f"prob_fp must be a number, got {prob_fp!r}")
    p = float(prob_fp)
    # nan тоже не проходит сравнение
    if not 0.0 < p < 1.0:
        raise InvalidConfigurationError(f"prob_fp must be in (0, 1), got {prob_fp!r}")
    return p


def _check_size(data_set_size: int) -> int:
    if isinstance(data_set_size, bool) or not isinstance(data_set_size, numbers.Integral):
        raise InvalidConfigurationError(
            f"data_set_size must be an integer, got {data_set_size!r}"
        )
    n = int(data_set_size)
    if n < 0:
        raise InvalidConfigurationError(f"data_set_size must be >= 0, got {n}")
    return n


def get_optimal_num_hashes(prob_fp: float) -> int:
    """k = ceil(-log2(p)), не меньше 1."""
    p = _check_prob_fp(prob_fp)
    return max(1, math.ceil(-math.log2(p)))


def get_optimal_vector_len(prob_fp: float, data_set_size: int) -> int:
    """m = ceil(-n * ln(p) / ln(2)^2), не меньше 1 (иначе index % m упадёт при n = 0)."""
    p = _check_prob_fp(prob_fp)
    n = _check_size(data_set_size)
    return max(1, math.ceil(-(n * math.log(p)) / (math.log(2) ** 2)))


def expected_fpr(m: int, k: int, n: int) -> float:
    """Теоретический FPR после n вставок: (1 - e^(-kn/m))^k."""
    if n == 0:
        return 0.0
    return float((1 - np.exp(-k * n / m)) ** k)


@dataclass(frozen=True)
class FilterConfig:
    prob_fp: float  # максимально допустимая вероятность false positive
    data_set_size: int  # ожидаемое число элементов

    def __post_init__(self):
        object.__setattr__(self, "prob_fp", _check_prob_fp(self.prob_fp))
        object.__setattr__(self, "data_set_size", _check_size(self.data_set_size))


@dataclass(frozen=True)
class BloomParams:
    m: int  # размер битового массива
    k: int  # количество хеш-функций

    @classmethod
    def from_config(cls, config: FilterConfig) -> 'BloomParams':
        return cls(
            m=get_optimal_vector_len(config.prob_fp, config.data_set_size),
            k=get_optimal_num_hashes(config.prob_fp),
        )

    @property
    def optimal_n(self) -> int:
        """Оптимальное количество элементов: n = (m/k) * ln(2)."""
        return int(self.m * np.log(2) / self.k)
