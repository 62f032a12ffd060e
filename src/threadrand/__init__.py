from threadrand.thread_local import (
    seed,
    get_seed,
    fork,
    bool,
    alphabetic,
    alphanumeric,
    lowercase,
    uppercase,
    digit,
    shuffle,
    choice,
    integer,
    u8,
    i8,
    u16,
    i16,
    u32,
    i32,
    u64,
    i64,
    u128,
    i128,
    usize,
    isize,
    f32,
    f64,
)
from threadrand.rng import Rng
from threadrand.config import RngConfig, get_config, set_config
from threadrand.core.bounds import Bounds
from threadrand.parallel import run_seeded

__all__ = [
    "Rng",
    "RngConfig",
    "Bounds",
    "get_config",
    "set_config",
    "run_seeded",
    "seed",
    "get_seed",
    "fork",
    "bool",
    "alphabetic",
    "alphanumeric",
    "lowercase",
    "uppercase",
    "digit",
    "shuffle",
    "choice",
    "integer",
    "u8",
    "i8",
    "u16",
    "i16",
    "u32",
    "i32",
    "u64",
    "i64",
    "u128",
    "i128",
    "usize",
    "isize",
    "f32",
    "f64",
]
