from typing import MutableSequence, TypeVar

from .rng import XorShift64

T = TypeVar("T")


def shuffle_in_place(items: MutableSequence[T], seed: int) -> None:
    """
    Fisher-Yates shuffle driven by XorShift64(seed).

    Walks i from len-1 down to 1 and swaps items[i] with items[j],
    j = draw % (i + 1). The same seed and input length always produce
    the same permutation.
    """
    rng = XorShift64(seed)
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_u64() % (i + 1)
        items[i], items[j] = items[j], items[i]
