"""Bloom Filter: оптимальные m и k по prob_fp и размеру множества."""

from .bloom_filter import BloomFilter
from .errors import InternalIndexError, InvalidConfigurationError
from .params import BloomParams, FilterConfig, get_optimal_num_hashes, get_optimal_vector_len

__all__ = [
    'BloomFilter',
    'BloomParams',
    'FilterConfig',
    'InternalIndexError',
    'InvalidConfigurationError',
    'get_optimal_num_hashes',
    'get_optimal_vector_len',
]
