"""
Seeded pseudo-randomness for reproducible suggestion variety.

A glibc-style linear congruential generator drives every random decision in
the suggestion engine. Same seed, same sequence, same suggestions.
"""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF  # 2**31 - 1


class SeededRandom:
    """
    Linear congruential generator.

    Each call advances ``state = (state * 1103515245 + 12345) & (2**31 - 1)``
    and returns ``state / (2**31 - 1)``, a float in [0, 1].
    """

    def __init__(self, seed: int = 0) -> None:
        self.state = seed & LCG_MASK

    def random(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self.state / LCG_MASK

    __call__ = random


def shuffle_with_seed(items: Sequence[T], rng: SeededRandom) -> list[T]:
    """
    Fisher-Yates shuffle driven by a seeded generator.

    Returns a new list; the input is left untouched.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        # random() may return exactly 1.0, which would index past i
        j = min(int(rng.random() * (i + 1)), i)
        result[i], result[j] = result[j], result[i]
    return result


def weighted_top_pick(
    scored: Sequence[tuple[T, float]],
    rng: SeededRandom | None = None,
    top_n: int = 5,
) -> T | None:
    """
    Pick one item from the best ``top_n`` scored candidates.

    Candidates must be sorted best-first. Each candidate is weighted by
    ``(score + 1) ** 2`` so the best score dominates while near-ties still
    surface for different seeds. Without a generator the best item wins.
    """
    if not scored:
        return None
    if rng is None or len(scored) == 1:
        return scored[0][0]

    candidates = scored[:top_n]
    weights = [(score + 1) ** 2 for _, score in candidates]
    remaining = rng.random() * sum(weights)
    for (item, _), weight in zip(candidates, weights):
        remaining -= weight
        if remaining <= 0:
            return item

    return scored[0][0]
