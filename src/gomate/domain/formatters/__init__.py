"""Pure display formatters shared by parsers and services."""

from gomate.domain.formatters.time_formatter import (
    format_clock_time,
    format_duration,
    parse_timestamp,
    to_local_time,
)
from gomate.domain.formatters.train_category import (
    classify_transport_type,
    describe_train_type,
    resolve_train_type,
)

__all__ = [
    "classify_transport_type",
    "describe_train_type",
    "format_clock_time",
    "format_duration",
    "parse_timestamp",
    "resolve_train_type",
    "to_local_time",
]
