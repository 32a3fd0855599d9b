"""Эксперименты: реальный FPR против заданного prob_fp и теории."""

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from .bloom_filter import BloomFilter
from .params import expected_fpr

logger = logging.getLogger(__name__)


def generate_dataset(size: int, rng: Optional[np.random.Generator] = None) -> Tuple[List[str], List[str]]:
    # разные префиксы = train и test гарантированно не пересекаются
    rng = np.random.default_rng(rng)
    salt = int(rng.integers(0, 10**6))
    train = [f"train_{salt}_{i}" for i in range(size)]
    test = [f"test_{salt}_{i}" for i in range(size)]
    return train, test


def measure_fpr(prob_fp: float, data_set_size: int, trials: int = 10,
                inserted: Optional[int] = None, queries: int = 1000,
                seed: Optional[int] = None) -> np.ndarray:
    """Реальный FPR в каждом из trials прогонов.

    inserted - сколько элементов вставить (по умолчанию data_set_size),
    queries - сколько заведомо отсутствующих элементов проверить.
    """
    rng = np.random.default_rng(seed)
    inserted = data_set_size if inserted is None else inserted
    results = np.zeros(trials)
    for t in range(trials):
        bf = BloomFilter(prob_fp, data_set_size, seed=rng)
        train, _ = generate_dataset(inserted, rng)
        _, test = generate_dataset(queries, rng)
        for item in train:
            bf.add(item)
        results[t] = sum(1 for item in test if item in bf) / len(test)
    return results


def binomial_check(prob_fp: float, data_set_size: int, trials: int = 10,
                   queries: int = 1000, seed: Optional[int] = None):
    """Биномиальный тест: не превышает ли реальный FPR заданный prob_fp.

    Возвращает (наблюдаемый FPR, p-value одностороннего теста).
    """
    fprs = measure_fpr(prob_fp, data_set_size, trials=trials, queries=queries, seed=seed)
    false_positives = int(round(fprs.sum() * queries))
    result = stats.binomtest(false_positives, trials * queries, prob_fp, alternative="greater")
    return float(fprs.mean()), float(result.pvalue)


def plot_fpr(prob_values: Sequence[float], data_set_size: int = 1000, trials: int = 10,
             seed: Optional[int] = None, output: str = "bloom_fpr.png") -> None:
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    fig.suptitle("Bloom Filter FPR Analysis", fontsize=16)

    # ── 1. Реальный FPR vs заданный prob_fp ──────────────────────────────
    ax = axes[0]
    actual = [measure_fpr(p, data_set_size, trials=trials, seed=seed).mean() for p in prob_values]
    ax.plot(prob_values, actual, 'o-', color='steelblue', label='Реальный')
    ax.plot(prob_values, prob_values, 's--', color='gray', label='prob_fp', alpha=0.7)
    ax.set_xlabel("prob_fp")
    ax.set_ylabel("FPR")
    ax.set_title(f"FPR vs prob_fp (n={data_set_size})")
    ax.set_xscale('log')
    ax.set_yscale('symlog', linthresh=1e-4)
    ax.legend()
    ax.grid(True, alpha=0.3)

    # ── 2. Переполнение: вставлено больше, чем data_set_size ─────────────
    ax = axes[1]
    p = 0.01
    probe = BloomFilter(p, data_set_size)
    overloads = [0.5, 1.0, 1.5, 2.0, 3.0]
    actual, theory = [], []
    for load in overloads:
        inserted = int(load * data_set_size)
        actual.append(measure_fpr(p, data_set_size, trials=trials, inserted=inserted, seed=seed).mean())
        theory.append(expected_fpr(probe.vector_len, probe.num_hashers, inserted))
    ax.plot(overloads, actual, 'o-', color='tomato', label='Реальный')
    ax.plot(overloads, theory, 's--', color='gray', label='Теория', alpha=0.7)
    ax.axhline(p, color='black', linestyle=':', alpha=0.5, label=f'prob_fp={p}')
    ax.set_xlabel("вставлено / data_set_size")
    ax.set_ylabel("FPR")
    ax.set_title(f"FPR при переполнении (prob_fp={p})")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output, dpi=150)
    plt.close(fig)
    logger.info("Saved figure to %s", output)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=1000)
    parser.add_argument("--trials", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="bloom_fpr.png")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    prob_values = [0.5, 0.1, 0.05, 0.01, 0.001]
    print("Binomial test (H1: FPR > prob_fp):")
    for p in prob_values:
        observed, pvalue = binomial_check(p, args.size, trials=args.trials, seed=args.seed)
        print(f"prob_fp={p}: FPR={observed:.5f}, p={pvalue:.4f} {'***' if pvalue < 0.001 else ''}")
    plot_fpr(prob_values, args.size, trials=args.trials, seed=args.seed, output=args.output)
