"""Core calculation engine for the loan solver.

This module implements the closed-form annuity formulas used to derive a
monthly payment from a principal (or a principal from a monthly payment), and
the sweeps that enumerate the rate and/or the term when they were not
supplied. Results are returned as ``PaymentBreakdown`` objects grouped into
``SweepGroup`` blocks ready for printing.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .constants import (
    MONTHLY_RATE_DIVISOR,
    MONTHS_PER_YEAR,
    RATE_SWEEP_START,
    RATE_SWEEP_STEP,
    RATE_SWEEP_STOP,
    TERM_SWEEP_START,
    TERM_SWEEP_STEP,
    TERM_SWEEP_STOP,
)
from .data_models import DisplayOptions, LoanQuery, PaymentBreakdown, SolveFor, SweepGroup, SweepMode
from .exceptions import DegenerateInputError
from .logging_config import get_logger

logger = get_logger(__name__)


def monthly_rate(annual_rate: float) -> float:
    """Convert a yearly rate in percent to a monthly fraction."""
    return annual_rate / MONTHLY_RATE_DIVISOR


def _discount_factor(rate_per_month: float, term: float) -> float:
    # 1 - (1 + i)^-n, the denominator of the payment formula
    return 1 - (1 + rate_per_month) ** -term


def _formula_terms(annual_rate: float, term: float) -> Tuple[float, float]:
    """Return the monthly rate and the discount factor for the formulas.

    Both must be non-zero. Besides a literal zero rate or term, a tiny
    positive rate or term makes ``(1 + i)^-n`` round to exactly 1.0.
    """
    rate_per_month = monthly_rate(annual_rate)
    if rate_per_month == 0 or term == 0:
        raise DegenerateInputError(
            "Interest rate and term must be non-zero",
            context={"rate": annual_rate, "term": term},
        )
    discount = _discount_factor(rate_per_month, term)
    if discount == 0:
        raise DegenerateInputError(
            "Interest rate or term too small to amortize",
            context={"rate": annual_rate, "term": term},
        )
    return rate_per_month, discount


def payment_from_principal(principal: float, annual_rate: float, term: float) -> float:
    """Return the monthly payment that amortizes ``principal``.

    The formula is:

        payment = P * i / (1 - (1 + i)^-n)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments.

    Raises
    ------
    DegenerateInputError
        If the rate or the term is zero, or so small that the denominator
        rounds to zero.
    """
    rate_per_month, discount = _formula_terms(annual_rate, term)
    return principal * rate_per_month / discount


def principal_from_payment(payment: float, annual_rate: float, term: float) -> float:
    """Return the principal that ``payment`` amortizes over ``term`` months.

    The inverse of ``payment_from_principal``:

        P = payment * (1 - (1 + i)^-n) / i
    """
    rate_per_month, discount = _formula_terms(annual_rate, term)
    return payment * discount / rate_per_month


def breakdown(
    monthly_payment: float,
    principal: float,
    annual_rate: float,
    term: float,
    solved: SolveFor,
) -> PaymentBreakdown:
    """Derive totals and ratios for a resolved payment/principal pair."""
    if principal == 0 or monthly_payment == 0:
        raise DegenerateInputError(
            "Principal and monthly payment must be non-zero",
            context={"principal": principal, "payment": monthly_payment},
        )
    total_paid = monthly_payment * term
    interest_paid = total_paid - principal
    return PaymentBreakdown(
        monthly_payment=monthly_payment,
        principal=principal,
        annual_rate=annual_rate,
        term_months=term,
        total_paid=total_paid,
        interest_paid=interest_paid,
        interest_percent=interest_paid / principal * 100.0,
        break_even_years=(principal / monthly_payment) / MONTHS_PER_YEAR,
        solved=solved,
    )


def solve(solve_for: SolveFor, amount: float, annual_rate: float, term: float) -> PaymentBreakdown:
    """Compute one breakdown.

    Parameters
    ----------
    solve_for: SolveFor
        ``PAYMENT`` when ``amount`` is the principal, ``PRINCIPAL`` when
        ``amount`` is the monthly payment.
    amount: float
        The supplied principal or monthly payment.
    annual_rate: float
        Yearly rate in percent.
    term: float
        Number of monthly payments.
    """
    if solve_for is SolveFor.PAYMENT:
        payment = payment_from_principal(amount, annual_rate, term)
        return breakdown(payment, amount, annual_rate, term, solve_for)
    principal = principal_from_payment(amount, annual_rate, term)
    return breakdown(amount, principal, annual_rate, term, solve_for)


def _inclusive_range(start: float, stop: float, step: float) -> Iterator[float]:
    value = start
    while value <= stop:
        yield value
        value += step


def term_sweep() -> Iterator[float]:
    """Yield the candidate terms: 12, 24, ..., 360 months."""
    return _inclusive_range(TERM_SWEEP_START, TERM_SWEEP_STOP, TERM_SWEEP_STEP)


def rate_sweep() -> Iterator[float]:
    """Yield the candidate yearly rates: 1.0, 2.0, ..., 25.0 percent."""
    return _inclusive_range(RATE_SWEEP_START, RATE_SWEEP_STOP, RATE_SWEEP_STEP)


def sweep_terms(solve_for: SolveFor, amount: float, annual_rate: float) -> List[PaymentBreakdown]:
    return [solve(solve_for, amount, annual_rate, term) for term in term_sweep()]


def sweep_rates(solve_for: SolveFor, amount: float, term: float) -> List[PaymentBreakdown]:
    return [solve(solve_for, amount, rate, term) for rate in rate_sweep()]


def run_query(query: LoanQuery) -> List[SweepGroup]:
    """Dispatch a query to the calculation mode matching its inputs.

    Returns
    -------
    List[SweepGroup]
        One group for a single calculation or a one-dimensional sweep; one
        group per term for a full sweep.

    Raises
    ------
    UsageError
        If the query does not name exactly one of principal and payment.
    """
    solve_for = query.solve_for
    amount = query.given_amount
    mode = query.mode
    logger.info("Solving for %s from %.2f (%s)", solve_for.value, amount, mode.value)

    if mode is SweepMode.SINGLE:
        row = solve(solve_for, amount, query.annual_rate, query.term_months)
        return [SweepGroup(rows=[row])]
    if mode is SweepMode.TERM_SWEEP:
        rows = sweep_terms(solve_for, amount, query.annual_rate)
        return [SweepGroup(rows=rows, options=DisplayOptions.TERM)]
    if mode is SweepMode.RATE_SWEEP:
        rows = sweep_rates(solve_for, amount, query.term_months)
        return [SweepGroup(rows=rows, options=DisplayOptions.RATE)]

    groups: List[SweepGroup] = []
    for term in term_sweep():
        logger.debug("Sweeping rates for a term of %.0f months", term)
        groups.append(
            SweepGroup(
                rows=sweep_rates(solve_for, amount, term),
                options=DisplayOptions.RATE,
                term_months=term,
            )
        )
    return groups
