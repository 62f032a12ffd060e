import logging
import string
from collections.abc import MutableSequence, Sequence
from numbers import Integral
from typing import Optional, TypeVar

import numpy as np

from .config import RngConfig, get_config
from .core import types as t
from .core.bounds import RangeLike, coerce_bounds
from .core.types import IntKind, MASK64

T = TypeVar("T")

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
ALPHABETIC = LOWERCASE + UPPERCASE
ALPHANUMERIC = ALPHABETIC + string.digits
DIGITS = string.digits + string.ascii_lowercase

_BIT_GENERATORS = {
    "pcg64": np.random.PCG64,
    "pcg64dxsm": np.random.PCG64DXSM,
    "philox": np.random.Philox,
    "sfc64": np.random.SFC64,
}


def _check_u64(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if not 0 <= value <= MASK64:
        raise ValueError(f"{name} must fit in 64 unsigned bits, got {value}")
    return value


def _int_method(kind: IntKind):
    def sample(self: "Rng", bounds: RangeLike = None) -> int:
        return self.integer(kind, bounds)

    sample.__name__ = kind.name
    sample.__qualname__ = f"Rng.{kind.name}"
    sample.__doc__ = (
        f"Generates a random `{kind.name}` in the given range.\n\n"
        "Raises ValueError if the range is empty."
    )
    return sample


class Rng:
    """
    A small random number generator.

    Wraps a numpy Generator over the configured bit generator. Every draw is a
    deterministic function of the current state and advances it, so two
    instances seeded alike produce the same stream.

    ``Rng()`` without a seed draws one from the calling thread's generator.
    """

    def __init__(self, seed: Optional[int] = None, config: Optional[RngConfig] = None):
        self._config = config or get_config()
        if seed is None:
            # Deferred: thread_local builds on this class.
            from .thread_local import default_seed

            seed = default_seed(self._config)
        self.seed(seed)

    @classmethod
    def with_seed(cls, seed: int, config: Optional[RngConfig] = None) -> "Rng":
        """Creates a new generator with the given seed."""
        return cls(seed, config)

    def seed(self, seed: int) -> None:
        """Resets the generator to the state implied by `seed`."""
        seed = _check_u64("seed", seed)
        bit_generator = _BIT_GENERATORS[self._config.bit_generator](seed)
        self._bit_generator = bit_generator
        self._gen = np.random.Generator(bit_generator)
        self._seed = seed
        logging.debug(f"Seeded {self._config.bit_generator} generator with {seed:#018x}")

    def get_seed(self) -> int:
        """Returns the seed most recently applied to this generator."""
        return self._seed

    @property
    def config(self) -> RngConfig:
        return self._config

    def fork(self) -> "Rng":
        """Creates a new, independent generator seeded from this one."""
        return Rng(self.u64(), self._config)

    def _word(self, bits: int) -> int:
        if bits == 64:
            return int(self._bit_generator.random_raw())
        hi = int(self._bit_generator.random_raw())
        lo = int(self._bit_generator.random_raw())
        return (hi << 64) | lo

    def _bounded(self, n: int, bits: int = 64) -> int:
        """Uniform integer in [0, n) for 0 < n < 2**bits.

        Lemire's nearly-divisionless method: multiply a random word by n and
        keep the high half, rejecting the few low halves that would bias it.
        """
        mask = (1 << bits) - 1
        m = self._word(bits) * n
        low = m & mask
        if low < n:
            threshold = ((1 << bits) - n) % n
            while low < threshold:
                m = self._word(bits) * n
                low = m & mask
        return m >> bits

    def integer(self, kind: IntKind, bounds: RangeLike = None) -> int:
        """Generates a random integer of the given width in the given range.

        Raises:
            ValueError: if the range is empty or does not fit the width
        """
        low, high = coerce_bounds(bounds).resolve(kind)
        word_bits = 64 if kind.bits <= 64 else 128
        span = high - low + 1
        if span == 1 << word_bits:
            return low + self._word(word_bits)
        return low + self._bounded(span, word_bits)

    u8 = _int_method(t.u8)
    i8 = _int_method(t.i8)
    u16 = _int_method(t.u16)
    i16 = _int_method(t.i16)
    u32 = _int_method(t.u32)
    i32 = _int_method(t.i32)
    u64 = _int_method(t.u64)
    i64 = _int_method(t.i64)
    u128 = _int_method(t.u128)
    i128 = _int_method(t.i128)
    usize = _int_method(t.usize)
    isize = _int_method(t.isize)

    def bool(self) -> bool:
        """Generates a random `bool`."""
        return (self._word(64) >> 63) == 1

    def alphabetic(self) -> str:
        """Generates a random character in ranges a-z and A-Z."""
        return ALPHABETIC[self._bounded(len(ALPHABETIC))]

    def alphanumeric(self) -> str:
        """Generates a random character in ranges a-z, A-Z and 0-9."""
        return ALPHANUMERIC[self._bounded(len(ALPHANUMERIC))]

    def lowercase(self) -> str:
        """Generates a random character in range a-z."""
        return LOWERCASE[self._bounded(len(LOWERCASE))]

    def uppercase(self) -> str:
        """Generates a random character in range A-Z."""
        return UPPERCASE[self._bounded(len(UPPERCASE))]

    def digit(self, base: int) -> str:
        """Generates a random digit in the given `base`.

        Digits are represented by characters in ranges 0-9 and a-z.

        Raises ValueError if the base is zero or greater than 36.
        """
        if isinstance(base, bool) or not isinstance(base, Integral):
            raise TypeError(f"digit base must be an integer, got {base!r}")
        if not 1 <= base <= len(DIGITS):
            raise ValueError(f"digit base must be in 1..=36, got {base}")
        return DIGITS[self._bounded(int(base))]

    def f32(self) -> np.float32:
        """Generates a random `f32` in range `0..1`."""
        return np.float32(self._gen.random(dtype=np.float32))

    def f64(self) -> float:
        """Generates a random `f64` in range `0..1`."""
        return float(self._gen.random())

    def shuffle(self, seq) -> None:
        """Shuffles a mutable sequence or numpy array in place."""
        if not isinstance(seq, (np.ndarray, MutableSequence)):
            raise TypeError(f"Cannot shuffle {type(seq).__name__} in place")
        self._gen.shuffle(seq)

    def choice(self, seq: Sequence[T]) -> T:
        """Picks a random element of a non-empty sequence."""
        if len(seq) == 0:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._bounded(len(seq))]

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(seed={self._seed:#018x}, "
            f"bit_generator={self._config.bit_generator!r})"
        )
