"""Битовый массив фильтра: ячейки только переходят False -> True."""

import numpy as np

from .errors import InternalIndexError


class BitVector:

    def __init__(self, size: int):
        if size < 1:
            raise InternalIndexError(f"bit vector size must be >= 1, got {size}")
        self.size = size
        self.bits = np.zeros(size, dtype=bool)

    def _check(self, index: int) -> None:
        # numpy молча принимает отрицательные индексы, поэтому проверяем сами
        if not 0 <= index < self.size:
            raise InternalIndexError(f"index {index} out of range [0, {self.size})")

    def set(self, index: int) -> None:
        self._check(index)
        self.bits[index] = True

    def test(self, index: int) -> bool:
        self._check(index)
        return bool(self.bits[index])

    def count(self) -> int:
        """Количество установленных битов."""
        return int(np.count_nonzero(self.bits))

    @property
    def load_factor(self) -> float:
        return self.count() / self.size

    def __len__(self) -> int:
        return self.size

    def __or__(self, other: 'BitVector') -> 'BitVector':
        if self.size != other.size:
            raise ValueError("Incompatible bit vectors")
        result = BitVector(self.size)
        result.bits = self.bits | other.bits
        return result
