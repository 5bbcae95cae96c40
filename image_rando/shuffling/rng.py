"""
Seeded pseudo-random source for the shuffle.

The generator is a plain 64-bit xorshift register. It is not cryptographic;
the only requirement is that a given seed always yields the same draws, so a
rotation set can be rebuilt from the seed printed at the end of a run.
"""
import os
import time

from .. import config


class XorShift64:
    def __init__(self, seed: int):
        if not 0 <= seed <= config.U64_MASK:
            raise ValueError(f"seed must fit in 64 unsigned bits: {seed}")
        # Zero is a fixed point of the register.
        self.state = seed or config.ZERO_SEED_REPLACEMENT

    def next_u64(self) -> int:
        x = self.state
        x ^= (x << 13) & config.U64_MASK
        x ^= x >> 7
        x ^= (x << 17) & config.U64_MASK
        self.state = x
        return x


def default_seed() -> int:
    """Wall-clock nanoseconds mixed with the pid, so concurrent runs differ."""
    nanos = time.time_ns() & config.U64_MASK
    return nanos ^ ((os.getpid() * config.PID_SEED_MULTIPLIER) & config.U64_MASK)
