"""Исключения Bloom Filter."""


class InvalidConfigurationError(ValueError):
    """Недопустимые параметры фильтра: prob_fp вне (0, 1) или отрицательный размер."""


class InternalIndexError(IndexError):
    """Индекс вне битового массива. Это баг в расчёте m или в хешировании."""
