"""Демонстрация: животные в фильтре и вне его."""

import argparse
import logging
from typing import Optional, Sequence

from .bloom_filter import BloomFilter
from .errors import InvalidConfigurationError

ANIMALS = [
    "dog", "cat", "giraffe", "fly", "mosquito", "horse", "eagle", "bird", "bison", "boar",
    "butterfly", "ant", "anaconda", "bear", "chicken", "dolphin", "donkey", "crow", "crocodile",
]

OTHER_ANIMALS = [
    "badger", "cow", "pig", "sheep", "bee", "wolf", "fox", "whale", "shark", "fish",
    "turkey", "duck", "dove", "deer", "elephant", "frog", "falcon", "goat", "gorilla", "hawk",
]


def run_demo(prob_fp: float = 0.001, data_set_size: int = 100,
             seed: Optional[int] = None) -> int:
    """Печатает m, k и классификацию каждого животного. Возвращает число false positives."""
    bloom_filter = BloomFilter(prob_fp, data_set_size, seed=seed)
    print(f"Vector Length : {bloom_filter.vector_len}\nNum Hashes: {bloom_filter.num_hashers}\n"
          f"Optimal Set Size: {bloom_filter.params.optimal_n}\n")

    for animal in ANIMALS:
        bloom_filter.add(animal)

    for animal in ANIMALS:
        if animal in bloom_filter:
            print(f'"{animal}" is PROBABLY IN the filter.')
        else:
            print(f'"{animal}" is DEFINITELY NOT IN the filter as expected.')

    false_positives = 0
    for animal in OTHER_ANIMALS:
        if animal in bloom_filter:
            false_positives += 1
            print(f'"{animal}" is a FALSE POSITIVE case (please adjust prob_fp to a smaller value).')
        else:
            print(f'"{animal}" is DEFINITELY NOT IN the filter as expected.')

    print(f"\nFalse positives: {false_positives}/{len(OTHER_ANIMALS)} "
          f"(theoretical FPR {bloom_filter.fpr:.4f})")
    return false_positives


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Bloom filter demo")
    parser.add_argument("--prob-fp", type=float, default=0.001)
    parser.add_argument("--size", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(levelname)s - %(message)s")
    try:
        run_demo(args.prob_fp, args.size, args.seed)
    except InvalidConfigurationError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
