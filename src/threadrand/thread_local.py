"""
Free functions over a generator private to the calling thread.

Each thread lazily creates its own Rng on first use. Nothing here is locked:
an instance is only ever reachable from the thread that created it.
"""

import atexit
import builtins
import logging
import threading
import time
from collections.abc import Sequence
from typing import Optional, TypeVar

import numpy as np

from .config import RngConfig
from .core import types as t
from .core.bounds import RangeLike
from .core.types import IntKind, MASK64
from .rng import Rng

T = TypeVar("T")

_local = threading.local()
_finalized = False


def _new_thread_seed() -> int:
    # Odd, hence never zero.
    h = hash((time.perf_counter_ns(), threading.get_ident())) & MASK64
    return ((h << 1) | 1) & MASK64


def _thread_rng() -> Rng:
    rng: Optional[Rng] = getattr(_local, "rng", None)
    if rng is None:
        rng = Rng.with_seed(_new_thread_seed())
        _local.rng = rng
        logging.debug(
            f"Created thread-local generator for thread {threading.get_ident()}"
        )
    return rng


def _try_thread_rng() -> Optional[Rng]:
    """The calling thread's generator, or None once interpreter shutdown began."""
    if _finalized:
        return None
    return _thread_rng()


@atexit.register
def _finalize() -> None:
    global _finalized
    _finalized = True


def default_seed(config: RngConfig) -> int:
    """
    Seed for a default-constructed Rng: a u64 drawn from the calling thread's
    generator, or the configured fallback seed when that generator is gone.
    """
    rng = _try_thread_rng()
    if rng is None:
        logging.debug("Thread-local generator unavailable, using fallback seed")
        return config.fallback_seed
    return rng.u64()


def seed(seed: int) -> None:
    """Initializes the thread-local generator with the given seed."""
    _thread_rng().seed(seed)


def get_seed() -> int:
    """Returns the seed most recently applied to the thread-local generator."""
    return _thread_rng().get_seed()


def fork() -> Rng:
    """Creates a new generator seeded from the thread-local one."""
    return _thread_rng().fork()


def bool() -> builtins.bool:
    """Generates a random `bool`."""
    return _thread_rng().bool()


def alphabetic() -> str:
    """Generates a random character in ranges a-z and A-Z."""
    return _thread_rng().alphabetic()


def alphanumeric() -> str:
    """Generates a random character in ranges a-z, A-Z and 0-9."""
    return _thread_rng().alphanumeric()


def lowercase() -> str:
    """Generates a random character in range a-z."""
    return _thread_rng().lowercase()


def uppercase() -> str:
    """Generates a random character in range A-Z."""
    return _thread_rng().uppercase()


def digit(base: int) -> str:
    """Generates a random digit in the given `base`.

    Digits are represented by characters in ranges 0-9 and a-z.

    Raises ValueError if the base is zero or greater than 36.
    """
    return _thread_rng().digit(base)


def shuffle(seq) -> None:
    """Shuffles a mutable sequence or numpy array in place."""
    _thread_rng().shuffle(seq)


def choice(seq: Sequence[T]) -> T:
    """Picks a random element of a non-empty sequence."""
    return _thread_rng().choice(seq)


def integer(kind: IntKind, bounds: RangeLike = None) -> int:
    """Generates a random integer of the given width in the given range."""
    return _thread_rng().integer(kind, bounds)


def _integer(kind: IntKind):
    def sample(bounds: RangeLike = None) -> int:
        return _thread_rng().integer(kind, bounds)

    sample.__name__ = sample.__qualname__ = kind.name
    sample.__doc__ = (
        f"Generates a random `{kind.name}` in the given range.\n\n"
        "Raises ValueError if the range is empty."
    )
    return sample


u8 = _integer(t.u8)
i8 = _integer(t.i8)
u16 = _integer(t.u16)
i16 = _integer(t.i16)
u32 = _integer(t.u32)
i32 = _integer(t.i32)
u64 = _integer(t.u64)
i64 = _integer(t.i64)
u128 = _integer(t.u128)
i128 = _integer(t.i128)
usize = _integer(t.usize)
isize = _integer(t.isize)


def f32() -> np.float32:
    """Generates a random `f32` in range `0..1`."""
    return _thread_rng().f32()


def f64() -> float:
    """Generates a random `f64` in range `0..1`."""
    return _thread_rng().f64()
