"""
ParseOutcome JSON Schema contract

Проверка сериализованных ParseOutcome (model_dump(mode="json")) против
schema/parse_outcome.json, поставляемой вместе с пакетом.

Схема проверяется на корректность (Draft 2020-12) один раз при первом
обращении; дальше используется один read-only валидатор.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

PARSE_OUTCOME_SCHEMA_PATH = Path(__file__).parent / "schema" / "parse_outcome.json"


@lru_cache(maxsize=1)
def _outcome_validator() -> Draft202012Validator:
    with open(PARSE_OUTCOME_SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid parse_outcome schema: {e.message}") from e

    return Draft202012Validator(schema)


def parse_outcome_schema() -> Dict[str, Any]:
    """JSON Schema контракта ParseOutcome."""
    return _outcome_validator().schema


def validate_parse_outcome(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного ParseOutcome.

    Args:
        data: ParseOutcome.model_dump(mode="json") или эквивалентный dict

    Raises:
        jsonschema.ValidationError: данные не соответствуют контракту
    """
    _outcome_validator().validate(data)


def is_valid_parse_outcome(data: Dict[str, Any]) -> bool:
    return _outcome_validator().is_valid(data)


def parse_outcome_errors(data: Dict[str, Any]) -> List[str]:
    """
    Все нарушения контракта в виде "path: message", отсортированные по пути.

    Examples:
        >>> parse_outcome_errors({"radix": 2})[0]
        "<root>: 'error_kind' is a required property"
    """
    errors = []
    for error in _outcome_validator().iter_errors(data):
        path = "/".join(str(part) for part in error.absolute_path) or "<root>"
        errors.append(f"{path}: {error.message}")
    return sorted(errors)
