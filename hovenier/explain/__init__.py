from .breakdown_builder import Breakdown, BreakdownBuilder, BreakdownKind, build_scope_breakdown
from .formatter import (
    format_deviation,
    format_euro,
    format_hours_as_days,
    format_number,
    format_steps_newlines,
    scope_display_name,
)

__all__ = [
    "Breakdown",
    "BreakdownBuilder",
    "BreakdownKind",
    "build_scope_breakdown",
    "format_deviation",
    "format_euro",
    "format_hours_as_days",
    "format_number",
    "format_steps_newlines",
    "scope_display_name",
]
