"""
numeral_systems — строки в системах счисления 8/10/16 → int32

Публичный API пакета.
"""

import logging

from numeral_systems.core.contracts import validate_parse_outcome
from numeral_systems.core.domain import OutcomeErrorKind, ParseOutcome, describe_parse
from numeral_systems.core.math import Radix
from numeral_systems.core.parsing import (
    NegativeNumberError,
    NumeralFormatError,
    NumeralSystemsError,
    ParseResult,
    RadixConfigurationError,
    parse_by_radix,
    parse_positive_by_radix,
    parse_positive_from_decimal,
    parse_positive_from_hex,
    parse_positive_from_octal,
    try_parse_by_radix,
    try_parse_positive_by_radix,
    try_parse_positive_from_decimal,
    try_parse_positive_from_hex,
    try_parse_positive_from_octal,
)

# Библиотека не настраивает handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "Radix",
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
    # Outcome reports
    "OutcomeErrorKind",
    "ParseOutcome",
    "describe_parse",
    "validate_parse_outcome",
]
