"""
Core math modules для numeral_systems

Арифметика позиционных систем счисления и int32 wraparound.
"""

from numeral_systems.core.math.radix_arithmetic import (
    # Constants
    DIGIT_ALPHABET,
    INT32_BITS,
    INT32_MAX,
    INT32_MIN,
    SUPPORTED_RADIXES,
    UINT32_MODULUS,
    # Types
    Radix,
    # Functions
    digit_alphabet,
    digit_value,
    is_supported_radix,
    wrap_int32,
)

__all__ = [
    # Radix Arithmetic — Constants
    "DIGIT_ALPHABET",
    "INT32_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "SUPPORTED_RADIXES",
    "UINT32_MODULUS",
    # Radix Arithmetic — Types
    "Radix",
    # Radix Arithmetic — Functions
    "digit_alphabet",
    "digit_value",
    "is_supported_radix",
    "wrap_int32",
]
