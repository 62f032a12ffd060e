from dataclasses import dataclass

import numpy as np

MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class IntKind:
    """A fixed-width integer type that range sampling can target."""

    name: str
    """Short name, also used as the name of the sampling function"""
    bits: int
    """Width in bits"""
    signed: bool
    """Two's complement signed when True"""

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name})"


# Pointer-sized width follows the interpreter's numpy build.
_PTR_BITS = np.dtype(np.uintp).itemsize * 8

u8 = IntKind("u8", 8, False)
i8 = IntKind("i8", 8, True)
u16 = IntKind("u16", 16, False)
i16 = IntKind("i16", 16, True)
u32 = IntKind("u32", 32, False)
i32 = IntKind("i32", 32, True)
u64 = IntKind("u64", 64, False)
i64 = IntKind("i64", 64, True)
u128 = IntKind("u128", 128, False)
i128 = IntKind("i128", 128, True)
usize = IntKind("usize", _PTR_BITS, False)
isize = IntKind("isize", _PTR_BITS, True)

INT_KINDS: tuple[IntKind, ...] = (
    u8, i8, u16, i16, u32, i32, u64, i64, u128, i128, usize, isize,
)
