"""Data models for the loan solver.

This module defines the entities passed between the engine and the formatter:
the user's query, the breakdown computed for one combination of inputs and the
groups of breakdowns produced by a sweep. The enums describe which amount is
being solved, which calculation mode applies and which optional columns a
report row shows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import List, Optional

from .exceptions import UsageError


class SolveFor(str, Enum):
    """The amount the solver computes from the other inputs."""

    PAYMENT = "payment"  # principal given
    PRINCIPAL = "principal"  # payment given

    @property
    def label(self) -> str:
        return {
            "payment": "Monthly",
            "principal": "Principal",
        }[self.value]


class SweepMode(str, Enum):
    """Which of rate and term are enumerated instead of supplied."""

    SINGLE = "single"
    TERM_SWEEP = "term_sweep"
    RATE_SWEEP = "rate_sweep"
    FULL_SWEEP = "full_sweep"


class DisplayOptions(Flag):
    """Optional columns shown in a report row."""

    DEFAULT = 0
    TERM = 1
    RATE = 2


def _given(value: Optional[float]) -> bool:
    # Zero and negative values count as "not supplied".
    return value is not None and value > 0


@dataclass
class LoanQuery:
    """User inputs for one invocation.

    Attributes
    ----------
    principal: Optional[float]
        Amount borrowed. Mutually exclusive with ``payment``.
    payment: Optional[float]
        Monthly payment. Mutually exclusive with ``principal``.
    annual_rate: Optional[float]
        Nominal yearly interest rate in percent (``7.0`` means 7 %).
    term_months: Optional[float]
        Number of monthly payments.

    Values that are ``None`` or not strictly positive are treated as absent.
    """

    principal: Optional[float] = None
    payment: Optional[float] = None
    annual_rate: Optional[float] = None
    term_months: Optional[float] = None

    @property
    def has_rate(self) -> bool:
        return _given(self.annual_rate)

    @property
    def has_term(self) -> bool:
        return _given(self.term_months)

    @property
    def solve_for(self) -> SolveFor:
        """Return the direction of the calculation.

        Raises
        ------
        UsageError
            If neither or both of principal and payment were supplied.
        """
        has_principal = _given(self.principal)
        has_payment = _given(self.payment)
        if has_principal and has_payment:
            raise UsageError(
                "Cannot specify BOTH -m and -p arguments at the same time",
                conflict=True,
                context={"principal": self.principal, "payment": self.payment},
            )
        if has_payment:
            return SolveFor.PRINCIPAL
        if has_principal:
            return SolveFor.PAYMENT
        raise UsageError("A principal (-p) or a monthly payment (-m) is required")

    @property
    def given_amount(self) -> float:
        if self.solve_for is SolveFor.PAYMENT:
            return self.principal
        return self.payment

    @property
    def mode(self) -> SweepMode:
        if self.has_rate and self.has_term:
            return SweepMode.SINGLE
        if self.has_rate:
            return SweepMode.TERM_SWEEP
        if self.has_term:
            return SweepMode.RATE_SWEEP
        return SweepMode.FULL_SWEEP


@dataclass(frozen=True)
class PaymentBreakdown:
    """The result of one amortization calculation.

    ``solved`` names the field that was computed; the others were inputs or
    sweep values.
    """

    monthly_payment: float
    principal: float
    annual_rate: float
    term_months: float
    total_paid: float
    interest_paid: float
    interest_percent: float
    break_even_years: float
    solved: SolveFor

    @property
    def solved_value(self) -> float:
        if self.solved is SolveFor.PAYMENT:
            return self.monthly_payment
        return self.principal


@dataclass
class SweepGroup:
    """A block of report rows printed together.

    ``term_months`` is only set for the groups of a full sweep, where it is
    printed as a heading above the rows.
    """

    rows: List[PaymentBreakdown] = field(default_factory=list)
    options: DisplayOptions = DisplayOptions.DEFAULT
    term_months: Optional[float] = None
