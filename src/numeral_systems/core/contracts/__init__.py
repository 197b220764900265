"""
Contract Validation Module

JSON Schema контракт сериализованных ParseOutcome.
"""

from .validators import (
    PARSE_OUTCOME_SCHEMA_PATH,
    is_valid_parse_outcome,
    parse_outcome_errors,
    parse_outcome_schema,
    validate_parse_outcome,
)

__all__ = [
    "PARSE_OUTCOME_SCHEMA_PATH",
    "is_valid_parse_outcome",
    "parse_outcome_errors",
    "parse_outcome_schema",
    "validate_parse_outcome",
]
