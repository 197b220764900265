"""
Radix Arithmetic — примитивы позиционных систем счисления

Модуль содержит арифметическую основу парсера:
- Алфавит цифр 0-9A-F и его срезы для оснований 8, 10, 16
- Проверка допустимости основания
- Значение отдельной цифры
- Two's-complement wraparound произвольного int в диапазон int32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Поддерживаются только основания 8, 10, 16
2. wrap_int32 всегда возвращает значение в [INT32_MIN, INT32_MAX]
3. wrap_int32(x) == (int32)(uint32)x для любого x >= 0
4. Все операции детерминированы и не имеют побочных эффектов
"""

from enum import IntEnum
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Упорядоченный алфавит цифр; первые `radix` символов — цифры основания
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEF"

# Разрядность результата
INT32_BITS: Final[int] = 32

# Модуль для wraparound (2^32)
UINT32_MODULUS: Final[int] = 1 << INT32_BITS

INT32_MIN: Final[int] = -(1 << (INT32_BITS - 1))
INT32_MAX: Final[int] = (1 << (INT32_BITS - 1)) - 1


class Radix(IntEnum):
    """Поддерживаемые основания систем счисления"""

    OCTAL = 8
    DECIMAL = 10
    HEX = 16


SUPPORTED_RADIXES: Final[frozenset] = frozenset(int(r) for r in Radix)


# =============================================================================
# ОСНОВАНИЕ И АЛФАВИТ
# =============================================================================


def is_supported_radix(radix: object) -> bool:
    """
    Проверка, что radix — одно из оснований 8, 10, 16.

    bool не считается основанием (True == 1 в Python).

    Examples:
        >>> is_supported_radix(16)
        True
        >>> is_supported_radix(2)
        False
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        return False
    return radix in SUPPORTED_RADIXES


def digit_alphabet(radix: int) -> str:
    """
    Срез алфавита цифр для основания.

    Args:
        radix: Основание (8, 10 или 16)

    Returns:
        Первые `radix` символов DIGIT_ALPHABET

    Raises:
        ValueError: Если основание не поддерживается

    Examples:
        >>> digit_alphabet(8)
        '01234567'
    """
    if not is_supported_radix(radix):
        raise ValueError(f"radix must be 8, 10, or 16, got {radix!r}")
    return DIGIT_ALPHABET[:radix]


def digit_value(char: str) -> int:
    """
    Числовое значение цифры: '0'-'9' → 0-9, 'A'-'F' → 10-15.

    Ожидает символ в верхнем регистре.

    Raises:
        ValueError: Если символ не входит в DIGIT_ALPHABET
    """
    index = DIGIT_ALPHABET.find(char) if len(char) == 1 else -1
    if index < 0:
        raise ValueError(f"not a digit character: {char!r}")
    return index


# =============================================================================
# TWO'S-COMPLEMENT WRAPAROUND
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Приведение произвольного int к int32 через two's-complement wraparound.

    Эквивалент (int32)(uint32)value: берётся value mod 2^32, затем
    биты интерпретируются как знаковое 32-битное число.
    Переполнение не является ошибкой.

    Examples:
        >>> wrap_int32(255)
        255
        >>> wrap_int32(0xFFFFFFFF)
        -1
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(2**32)
        0
    """
    unsigned = value % UINT32_MODULUS
    if unsigned > INT32_MAX:
        return unsigned - UINT32_MODULUS
    return unsigned
