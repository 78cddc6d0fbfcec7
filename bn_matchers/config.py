"""Canonicalization configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CanonicalizerConfig:
    """Behavior flags for turning operands into canonical integers.

    Attributes:
        allow_integral_floats: If True, a finite float with no fractional part
            (e.g. 10.0) is accepted as a native integer. If False, every float
            is rejected as an invalid numeric literal.
    """

    allow_integral_floats: bool = True


# Default configuration instance
DEFAULT_CANONICALIZER_CONFIG = CanonicalizerConfig()
