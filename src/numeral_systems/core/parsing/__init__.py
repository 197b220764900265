"""
RadixParser — парсинг строк в системах счисления 8/10/16.

Базовая операция parse_by_radix, положительные варианты и try-обёртки.
"""

from numeral_systems.core.parsing.radix_parser import (
    NegativeNumberError,
    NumeralFormatError,
    NumeralSystemsError,
    RadixConfigurationError,
    parse_by_radix,
    parse_positive_by_radix,
    parse_positive_from_decimal,
    parse_positive_from_hex,
    parse_positive_from_octal,
)
from numeral_systems.core.parsing.try_parse import (
    ParseResult,
    try_parse_by_radix,
    try_parse_positive_by_radix,
    try_parse_positive_from_decimal,
    try_parse_positive_from_hex,
    try_parse_positive_from_octal,
)

__all__ = [
    # Exceptions
    "NumeralSystemsError",
    "RadixConfigurationError",
    "NumeralFormatError",
    "NegativeNumberError",
    # Throwing parsers
    "parse_by_radix",
    "parse_positive_by_radix",
    "parse_positive_from_octal",
    "parse_positive_from_decimal",
    "parse_positive_from_hex",
    # Try family
    "ParseResult",
    "try_parse_by_radix",
    "try_parse_positive_by_radix",
    "try_parse_positive_from_octal",
    "try_parse_positive_from_decimal",
    "try_parse_positive_from_hex",
]
