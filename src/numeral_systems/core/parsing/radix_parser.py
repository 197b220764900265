"""
RadixParser — строка в системе счисления 8/10/16 → int32

Модуль реализует единственную базовую операцию parse_by_radix и
производные от неё положительные варианты:
- parse_by_radix: знаковое число (знак '-' допустим только для основания 10)
- parse_positive_by_radix: post-check, что результат не отрицателен
- parse_positive_from_octal/decimal/hex: фиксированное основание

ПОРЯДОК ПРОВЕРОК (наблюдаемое поведение, покрыто тестами):
1. source is None            → NumeralFormatError
2. radix не в {8, 10, 16}    → RadixConfigurationError
3. source пустая строка      → NumeralFormatError
4. недопустимый символ       → NumeralFormatError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в диапазоне int32
2. Переполнение не ошибка: сумма приводится к int32 через wraparound
3. Ошибка основания никогда не маскируется под ошибку формата
"""

from typing import Optional

from numeral_systems.core.math.radix_arithmetic import (
    Radix,
    UINT32_MODULUS,
    digit_alphabet,
    digit_value,
    is_supported_radix,
    wrap_int32,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralSystemsError(ValueError):
    """Базовое исключение парсера систем счисления."""


class RadixConfigurationError(NumeralSystemsError):
    """
    Основание не входит в {8, 10, 16}.

    Это ошибка программиста, а не данных: try-варианты всегда пробрасывают её.
    """

    def __init__(self, radix: object) -> None:
        self.radix = radix
        super().__init__(f"radix must be 8, 10, or 16, got {radix!r}")

    def __reduce__(self):
        return type(self), (self.radix,)


class NumeralFormatError(NumeralSystemsError):
    """Строка не является числом в заданной системе счисления."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.args[0], self.source)


class NegativeNumberError(NumeralFormatError):
    """Строка корректна, но представляет отрицательное число."""

    def __init__(self, source: str, value: int) -> None:
        self.value = value
        super().__init__(
            f"source does not represent a positive number, got {value}",
            source=source,
        )

    def __reduce__(self):
        return type(self), (self.source, self.value)


# =============================================================================
# CORE PARSER
# =============================================================================


def parse_by_radix(source: Optional[str], radix: int) -> int:
    """
    Конвертация строки в системе счисления 8, 10 или 16 в int32.

    Алгоритм:
    1. Приведение к верхнему регистру (hex цифры регистронезависимы)
    2. Ведущий '-' при radix == 10 — знак; при 8/16 — недопустимый символ
    3. Сумма digit(i) * radix^(L-1-i) по всем цифрам (по модулю 2^32)
    4. Wraparound суммы в int32, затем применение знака (с повторным wraparound)

    Args:
        source: Строковое представление числа
        radix: Основание (8, 10 или 16)

    Returns:
        Знаковое 32-битное значение. Для модулей вне int32 результат
        молча переполняется (two's-complement).

    Raises:
        NumeralFormatError: source is None / пустой / содержит недопустимые символы
        RadixConfigurationError: radix не равен 8, 10 или 16
        TypeError: source не является строкой

    Examples:
        >>> parse_by_radix("ff", 16)
        255
        >>> parse_by_radix("-42", 10)
        -42
        >>> parse_by_radix("FFFFFFFF", 16)
        -1
        >>> parse_by_radix("777", 8)
        511
    """
    if source is None:
        raise NumeralFormatError("source value is null")

    if not isinstance(source, str):
        raise TypeError(f"source must be str, got {type(source).__name__}")

    if not is_supported_radix(radix):
        raise RadixConfigurationError(radix)

    if not source:
        raise NumeralFormatError("source value is empty", source=source)

    # Посимвольный upper: str.upper() всей строки раскрывает лигатуры ('ﬀ' → 'FF')
    digits = [char.upper() if char.isascii() else char for char in source]
    sign = 1
    if radix == Radix.DECIMAL and digits[0] == "-":
        sign = -1
        digits = digits[1:]

    if not digits:
        raise NumeralFormatError(
            "source does not contain any digits after the sign", source=source
        )

    alphabet = frozenset(digit_alphabet(radix))
    for char in digits:
        if char not in alphabet:
            raise NumeralFormatError(
                "source does not represent a valid number in the given numeral system",
                source=source,
            )

    # Схема Горнера по модулю 2^32: сумма digit(i) * radix^(L-1-i) за O(L)
    total = 0
    for char in digits:
        total = (total * radix + digit_value(char)) % UINT32_MODULUS

    return wrap_int32(sign * wrap_int32(total))


# =============================================================================
# POSITIVE VARIANTS
# =============================================================================


def parse_positive_by_radix(source: Optional[str], radix: int) -> int:
    """
    Конвертация строки в неотрицательное int32.

    Делегирует parse_by_radix и проверяет знак результата. Символы повторно
    не валидируются: "FFFFFFFF" в hex корректна, но даёт -1 и отклоняется.

    Raises:
        NegativeNumberError: результат отрицателен (установлен знаковый бит)
        NumeralFormatError: см. parse_by_radix
        RadixConfigurationError: см. parse_by_radix
    """
    value = parse_by_radix(source, radix)
    if value < 0:
        raise NegativeNumberError(source, value)
    return value


def parse_positive_from_octal(source: Optional[str]) -> int:
    """Неотрицательное число в восьмеричной системе (цифры 0-7)."""
    return parse_positive_by_radix(source, Radix.OCTAL)


def parse_positive_from_decimal(source: Optional[str]) -> int:
    """Неотрицательное число в десятичной системе (цифры 0-9)."""
    return parse_positive_by_radix(source, Radix.DECIMAL)


def parse_positive_from_hex(source: Optional[str]) -> int:
    """Неотрицательное число в шестнадцатеричной системе (0-9, A-F, a-f)."""
    return parse_positive_by_radix(source, Radix.HEX)
