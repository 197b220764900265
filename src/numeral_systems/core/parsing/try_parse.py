"""
Try-варианты RadixParser — конвертация без исключений формата

Тонкая обёртка над parse_by_radix / parse_positive_by_radix, возвращающая
tagged-значение ParseResult(success, value) вместо исключения.

Асимметрия ошибок:
- RadixConfigurationError — ошибка программиста, всегда пробрасывается
- NumeralFormatError (в т.ч. NegativeNumberError) — ошибка данных,
  превращается в ParseResult(False, 0)
- TypeError (source не строка) — пробрасывается
"""

import logging
from typing import Callable, NamedTuple, Optional

from numeral_systems.core.math.radix_arithmetic import Radix
from numeral_systems.core.parsing.radix_parser import (
    NumeralFormatError,
    parse_by_radix,
    parse_positive_by_radix,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class ParseResult(NamedTuple):
    """
    Результат try-конвертации.

    Распаковывается как кортеж: `success, value = try_parse_by_radix(...)`.
    При неудаче value всегда 0.

    Истинность следует success, а не длине кортежа: ParseResult.failed()
    равен (False, 0), но bool(ParseResult.failed()) is False, тогда как
    bool((False, 0)) is True.
    """

    success: bool
    value: int

    @classmethod
    def ok(cls, value: int) -> "ParseResult":
        return cls(True, value)

    @classmethod
    def failed(cls) -> "ParseResult":
        return cls(False, 0)

    def __bool__(self) -> bool:
        return self.success


# =============================================================================
# TRY WRAPPERS
# =============================================================================


def _capture(
    parse: Callable[[Optional[str], int], int], source: Optional[str], radix: int
) -> ParseResult:
    try:
        value = parse(source, radix)
    except NumeralFormatError as e:
        logger.debug("Swallowed format error for radix %s: %s", radix, e)
        return ParseResult.failed()
    return ParseResult.ok(value)


def try_parse_by_radix(source: Optional[str], radix: int) -> ParseResult:
    """
    Конвертация знакового числа без исключений формата.

    Args:
        source: Строковое представление числа
        radix: Основание (8, 10 или 16)

    Returns:
        ParseResult(True, value) при успехе, ParseResult(False, 0) иначе

    Raises:
        RadixConfigurationError: radix не равен 8, 10 или 16

    Examples:
        >>> try_parse_by_radix("XYZ", 10)
        ParseResult(success=False, value=0)
        >>> try_parse_by_radix("7f", 16)
        ParseResult(success=True, value=127)
    """
    return _capture(parse_by_radix, source, radix)


def try_parse_positive_by_radix(source: Optional[str], radix: int) -> ParseResult:
    """
    Конвертация неотрицательного числа без исключений формата.

    Отрицательный результат (например "FFFFFFFF" в hex) → ParseResult(False, 0).

    Raises:
        RadixConfigurationError: radix не равен 8, 10 или 16
    """
    return _capture(parse_positive_by_radix, source, radix)


def try_parse_positive_from_octal(source: Optional[str]) -> ParseResult:
    """Неотрицательное восьмеричное число; ParseResult(False, 0) при ошибке."""
    return try_parse_positive_by_radix(source, Radix.OCTAL)


def try_parse_positive_from_decimal(source: Optional[str]) -> ParseResult:
    """Неотрицательное десятичное число; ParseResult(False, 0) при ошибке."""
    return try_parse_positive_by_radix(source, Radix.DECIMAL)


def try_parse_positive_from_hex(source: Optional[str]) -> ParseResult:
    """Неотрицательное шестнадцатеричное число; ParseResult(False, 0) при ошибке."""
    return try_parse_positive_by_radix(source, Radix.HEX)
