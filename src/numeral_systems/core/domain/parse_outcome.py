"""
ParseOutcome — сериализуемый отчёт о конвертации

Immutable Pydantic модель, описывающая один вызов парсера: вход, основание,
результат или вид ошибки. Полная совместимость с JSON Schema
(numeral_systems/core/contracts/schema/parse_outcome.json).

Ошибка основания в отчёт не попадает: describe_parse пробрасывает её так же,
как try-варианты.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from numeral_systems.core.math.radix_arithmetic import (
    INT32_MAX,
    INT32_MIN,
    Radix,
    is_supported_radix,
)
from numeral_systems.core.parsing.radix_parser import (
    NegativeNumberError,
    NumeralFormatError,
    RadixConfigurationError,
    parse_by_radix,
    parse_positive_by_radix,
)


# =============================================================================
# ENUMS
# =============================================================================


class OutcomeErrorKind(str, Enum):
    """Вид ошибки данных"""

    FORMAT = "FORMAT"
    NEGATIVE = "NEGATIVE"


# =============================================================================
# PARSE OUTCOME MODEL
# =============================================================================


class ParseOutcome(BaseModel):
    """
    Отчёт о конвертации строки в int32.

    Инварианты:
    - success=True  → error_kind is None, message is None
    - success=False → error_kind задан, value == 0
    """

    source: Optional[str] = Field(..., description="Исходная строка (null допустим)")
    radix: Radix = Field(..., description="Основание системы счисления")
    positive_only: bool = Field(False, description="Вызван положительный вариант")

    success: bool = Field(..., description="Конвертация успешна")
    value: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Результат int32")
    error_kind: Optional[OutcomeErrorKind] = Field(None, description="Вид ошибки")
    message: Optional[str] = Field(None, description="Текст ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "ParseOutcome":
        """Согласованность success / error_kind / value"""
        if self.success:
            if self.error_kind is not None or self.message is not None:
                raise ValueError("successful outcome must not carry an error")
        else:
            if self.error_kind is None:
                raise ValueError("failed outcome must carry error_kind")
            if self.value != 0:
                raise ValueError("failed outcome must have value 0")
        if self.error_kind == OutcomeErrorKind.NEGATIVE and not self.positive_only:
            raise ValueError("NEGATIVE error_kind requires positive_only")
        return self


# =============================================================================
# FACTORY
# =============================================================================


def describe_parse(
    source: Optional[str], radix: int, positive_only: bool = False
) -> ParseOutcome:
    """
    Выполнение конвертации с фиксацией результата в ParseOutcome.

    Args:
        source: Строковое представление числа
        radix: Основание (8, 10 или 16)
        positive_only: Использовать parse_positive_by_radix

    Returns:
        ParseOutcome с результатом или видом ошибки

    Raises:
        RadixConfigurationError: radix не равен 8, 10 или 16
        TypeError: source не является строкой
    """
    parse = parse_positive_by_radix if positive_only else parse_by_radix
    try:
        value = parse(source, radix)
    except NegativeNumberError as e:
        kind, message = OutcomeErrorKind.NEGATIVE, str(e)
    except NumeralFormatError as e:
        kind, message = OutcomeErrorKind.FORMAT, str(e)
    else:
        return ParseOutcome(
            source=source,
            radix=radix,
            positive_only=positive_only,
            success=True,
            value=value,
        )

    # source is None проверяется раньше radix, поэтому radix ещё не проверен
    if not is_supported_radix(radix):
        raise RadixConfigurationError(radix)

    return ParseOutcome(
        source=source,
        radix=radix,
        positive_only=positive_only,
        success=False,
        error_kind=kind,
        message=message,
    )
