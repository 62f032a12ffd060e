import logging
from dataclasses import dataclass
from typing import Literal

from .core.base import create_from_dict, ensure_literal_choice
from .core.types import MASK64

BitGeneratorKind = Literal["pcg64", "pcg64dxsm", "philox", "sfc64"]

FALLBACK_SEED = 0x4D595DF4D0F33173


@dataclass
class RngConfig:
    """Settings applied to newly constructed generators."""

    bit_generator: BitGeneratorKind = "pcg64"
    """The numpy bit generator backing each Rng."""
    fallback_seed: int = FALLBACK_SEED
    """Seed for Rng() when the thread-local generator can no longer be reached."""

    def __post_init__(self):
        ensure_literal_choice("bit_generator", self.bit_generator, BitGeneratorKind)
        if not 0 <= self.fallback_seed <= MASK64:
            raise ValueError(
                f"fallback_seed must fit in 64 unsigned bits, got {self.fallback_seed}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "RngConfig":
        return create_from_dict(data, cls)


_default_config = RngConfig()


def get_config() -> RngConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_config(config: RngConfig) -> None:
    """
    Replace the process-wide default configuration.

    Only generators created afterwards pick it up; thread-local generators
    that already exist keep their bit generator until their thread ends.
    """
    global _default_config
    if not isinstance(config, RngConfig):
        raise TypeError(f"Expected RngConfig, got {type(config).__name__}")
    _default_config = config
    logging.debug(f"Default RNG config set to {config}")
