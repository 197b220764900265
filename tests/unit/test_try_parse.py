"""
Тесты для try-вариантов RadixParser

Проверяемые инварианты:
1. Успех → ParseResult(True, value)
2. Ошибка формата → ParseResult(False, 0), без исключения
3. Ошибка основания пробрасывается всегда
4. ParseResult распаковывается как (success, value)
"""

import logging

import pytest

from numeral_systems.core.math.radix_arithmetic import INT32_MIN
from numeral_systems.core.parsing.radix_parser import RadixConfigurationError
from numeral_systems.core.parsing.try_parse import (
    ParseResult,
    try_parse_by_radix,
    try_parse_positive_by_radix,
    try_parse_positive_from_decimal,
    try_parse_positive_from_hex,
    try_parse_positive_from_octal,
)


class TestParseResult:
    """Тесты tagged-результата"""

    def test_unpacking(self) -> None:
        success, value = ParseResult.ok(42)
        assert success is True
        assert value == 42

    def test_failed_has_zero_value(self) -> None:
        result = ParseResult.failed()
        assert result == (False, 0)
        assert result.success is False
        assert result.value == 0

    def test_truthiness_follows_success(self) -> None:
        assert ParseResult.ok(0)
        assert not ParseResult.failed()

    def test_truthiness_differs_from_plain_tuple(self) -> None:
        result = ParseResult.failed()
        assert result == (False, 0)
        assert bool(result) is False
        assert bool(tuple(result)) is True


class TestTryParseByRadix:
    """try_parse_by_radix"""

    def test_success(self) -> None:
        assert try_parse_by_radix("123", 10) == (True, 123)
        assert try_parse_by_radix("-123", 10) == (True, -123)
        assert try_parse_by_radix("ff", 16) == (True, 255)
        assert try_parse_by_radix("FFFFFFFF", 16) == (True, -1)
        assert try_parse_by_radix("-2147483648", 10) == (True, INT32_MIN)

    @pytest.mark.parametrize(
        "source,radix",
        [("XYZ", 10), ("8", 8), ("-1", 16), ("", 10), ("-", 10), (None, 10), ("1 2", 10)],
    )
    def test_format_errors_swallowed(self, source, radix: int) -> None:
        result = try_parse_by_radix(source, radix)
        assert result == (False, 0)
        assert isinstance(result, ParseResult)

    @pytest.mark.parametrize("radix", [5, 2, 0, 36])
    def test_radix_error_propagates(self, radix: int) -> None:
        with pytest.raises(RadixConfigurationError):
            try_parse_by_radix("123", radix)

    def test_radix_error_propagates_for_invalid_content(self) -> None:
        """Ошибка основания важнее ошибки содержимого"""
        with pytest.raises(RadixConfigurationError):
            try_parse_by_radix("XYZ", 5)
        with pytest.raises(RadixConfigurationError):
            try_parse_by_radix("", 5)

    def test_none_source_with_bad_radix_is_format_failure(self) -> None:
        """None проверяется раньше основания"""
        assert try_parse_by_radix(None, 5) == (False, 0)

    def test_non_string_source_propagates(self) -> None:
        with pytest.raises(TypeError):
            try_parse_by_radix(123, 10)

    def test_swallowed_error_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="numeral_systems.core.parsing.try_parse"):
            try_parse_by_radix("XYZ", 10)
        assert any("Swallowed format error" in r.getMessage() for r in caplog.records)


class TestTryParsePositive:
    """try_parse_positive_by_radix и обёртки"""

    def test_success(self) -> None:
        assert try_parse_positive_by_radix("7FFFFFFF", 16) == (True, 2147483647)
        assert try_parse_positive_by_radix("0", 8) == (True, 0)

    def test_negative_is_failure(self) -> None:
        assert try_parse_positive_by_radix("FFFFFFFF", 16) == (False, 0)
        assert try_parse_positive_by_radix("-7", 10) == (False, 0)

    def test_radix_error_propagates(self) -> None:
        with pytest.raises(RadixConfigurationError):
            try_parse_positive_by_radix("1", 9)

    def test_fixed_radix_wrappers(self) -> None:
        assert try_parse_positive_from_octal("755") == (True, 493)
        assert try_parse_positive_from_decimal("755") == (True, 755)
        assert try_parse_positive_from_hex("755") == (True, 0x755)

    def test_fixed_radix_wrappers_fail(self) -> None:
        assert try_parse_positive_from_octal("9") == (False, 0)
        assert try_parse_positive_from_decimal("-1") == (False, 0)
        assert try_parse_positive_from_hex("G") == (False, 0)
        assert try_parse_positive_from_hex("80000000") == (False, 0)
