"""Output helpers for the loan solver.

Rows are rendered as ``Label: value`` fields separated by tabs, with values
left-aligned in a fixed-width column. The optional ``Num Payments`` and
``Rate`` columns appear only when the caller's ``DisplayOptions`` ask for
them, which is the case when those values were swept.
"""

from __future__ import annotations

from typing import Iterable, List

from .constants import AMOUNT_DECIMALS, FIELD_SEPARATOR, FIELD_WIDTH, RATE_DECIMALS
from .data_models import DisplayOptions, PaymentBreakdown, SweepGroup

USAGE_TEXT = (
    "\n"
    "Usage: loan -p principal [-i interest_rate | -t loan_period]\n"
    "       loan -m payment [-i interest_rate | -t loan_period]\n"
    "Example: loan -i 7.0 -p 39000.00 -t 60.0\n"
    "\n"
    "-i  simple yearly interest rate\n"
    "-p  principal amount of loan\n"
    "-t  loan period in months (ie. number of payments)\n"
    "-m  monthly payment\n"
    "-h  print definitions of the reported values\n"
    "\n"
    "Ordering of arguments does not matter.\n"
    "Unspecified arguments will be solved if possible.\n"
)

DEFINITIONS_TEXT = (
    "Definitions:\n"
    "Break Even Years = number of years to pay off principal if"
    " payment went to principal alone.\n"
    "Interest% = Total interest paid as a percentage of Principal."
)


def format_field(label: str, value: float, decimals: int = AMOUNT_DECIMALS) -> str:
    return f"{label}: {value:<{FIELD_WIDTH}.{decimals}f}"


def format_breakdown(row: PaymentBreakdown, options: DisplayOptions = DisplayOptions.DEFAULT) -> str:
    """Render one breakdown as a report line.

    Parameters
    ----------
    row: PaymentBreakdown
        The calculation result. Its ``solved`` field decides whether the line
        starts with the monthly payment or the principal.
    options: DisplayOptions
        Which of the optional term and rate columns to include.
    """
    fields = [format_field(row.solved.label, row.solved_value)]
    if options & DisplayOptions.TERM:
        fields.append(format_field("Num Payments", row.term_months))
    if options & DisplayOptions.RATE:
        fields.append(format_field("Rate", row.annual_rate, RATE_DECIMALS))
    fields.extend(
        [
            format_field("Interest", row.interest_paid),
            format_field("Total", row.total_paid),
            format_field("Interest%", row.interest_percent),
            format_field("Breakeven", row.break_even_years),
        ]
    )
    return FIELD_SEPARATOR.join(fields)


def format_report(groups: Iterable[SweepGroup]) -> List[str]:
    """Render sweep groups as report lines.

    Groups carrying a ``term_months`` heading (the full sweep) are preceded by
    a ``Num Payments`` line and followed by a blank line.
    """
    lines: List[str] = []
    for group in groups:
        if group.term_months is not None:
            lines.append(format_field("Num Payments", group.term_months))
        lines.extend(format_breakdown(row, group.options) for row in group.rows)
        if group.term_months is not None:
            lines.append("")
    return lines


def print_report(groups: Iterable[SweepGroup]) -> None:
    """Print the report for a solved query."""
    for line in format_report(groups):
        print(line)


def print_usage(conflict: bool = False) -> None:
    print(USAGE_TEXT)
    if conflict:
        print("Cannot specify BOTH -m and -p arguments at the same time")


def print_definitions() -> None:
    print(DEFINITIONS_TEXT)
