"""
Domain models and value objects.

Contains the serializable ParseOutcome report.
"""

from numeral_systems.core.domain.parse_outcome import (
    OutcomeErrorKind,
    ParseOutcome,
    describe_parse,
)

__all__ = [
    "OutcomeErrorKind",
    "ParseOutcome",
    "describe_parse",
]
