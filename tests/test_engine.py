"""Engine tests: formulas, sweeps and mode dispatch."""

import math

import pytest

from loan_solver.data_models import DisplayOptions, LoanQuery, SolveFor
from loan_solver.engine import (
    monthly_rate,
    payment_from_principal,
    principal_from_payment,
    rate_sweep,
    run_query,
    solve,
    sweep_rates,
    sweep_terms,
    term_sweep,
)
from loan_solver.exceptions import DegenerateInputError, UsageError


class TestFormulas:

    def test_monthly_rate(self):
        assert monthly_rate(12.0) == pytest.approx(0.01)

    def test_known_payment(self):
        """39000 at 7% over 60 months -> about 772.25 a month"""
        payment = payment_from_principal(39000.0, 7.0, 60.0)
        assert payment == pytest.approx(772.25, abs=0.01)

    def test_payment_exceeds_straight_line(self):
        payment = payment_from_principal(100_000.0, 5.0, 12.0)
        assert payment > 100_000.0 / 12

    @pytest.mark.parametrize(
        "principal, rate, term",
        [
            (39000.0, 7.0, 60.0),
            (1_000_000.0, 3.45, 360.0),
            (500.0, 25.0, 12.0),
            (250_000.0, 0.5, 180.0),
        ],
    )
    def test_round_trip(self, principal, rate, term):
        payment = payment_from_principal(principal, rate, term)
        assert principal_from_payment(payment, rate, term) == pytest.approx(principal, rel=1e-9)

    def test_zero_rate_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            payment_from_principal(1000.0, 0.0, 12.0)
        with pytest.raises(DegenerateInputError):
            principal_from_payment(100.0, 0.0, 12.0)

    def test_zero_term_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            solve(SolveFor.PAYMENT, 1000.0, 5.0, 0.0)

    @pytest.mark.parametrize("rate, term", [(1e-15, 60.0), (7.0, 1e-300)])
    def test_denominator_rounding_to_zero_is_degenerate(self, rate, term):
        with pytest.raises(DegenerateInputError, match="too small"):
            payment_from_principal(1000.0, rate, term)
        with pytest.raises(DegenerateInputError, match="too small"):
            principal_from_payment(500.0, rate, term)


class TestSolve:

    def test_payment_breakdown(self):
        row = solve(SolveFor.PAYMENT, 39000.0, 7.0, 60.0)
        assert row.principal == 39000.0
        assert row.solved is SolveFor.PAYMENT
        assert row.solved_value == row.monthly_payment
        assert row.total_paid == pytest.approx(46334.8, abs=1.0)
        assert row.interest_paid == pytest.approx(7334.8, abs=1.0)

    def test_totals_are_consistent(self):
        row = solve(SolveFor.PRINCIPAL, 850.0, 6.25, 240.0)
        assert row.monthly_payment == 850.0
        assert row.total_paid == row.monthly_payment * row.term_months
        assert row.interest_paid == row.total_paid - row.principal
        assert row.interest_percent == row.interest_paid / row.principal * 100.0
        assert row.break_even_years == pytest.approx(row.principal / 850.0 / 12)

    def test_directions_agree(self):
        forward = solve(SolveFor.PAYMENT, 20_000.0, 9.0, 48.0)
        backward = solve(SolveFor.PRINCIPAL, forward.monthly_payment, 9.0, 48.0)
        assert backward.principal == pytest.approx(20_000.0)
        assert backward.interest_paid == pytest.approx(forward.interest_paid)

    def test_results_are_finite(self):
        for rate in rate_sweep():
            row = solve(SolveFor.PAYMENT, 1000.0, rate, 12.0)
            assert math.isfinite(row.monthly_payment)


class TestSweeps:

    def test_term_sweep_values(self):
        terms = list(term_sweep())
        assert len(terms) == 30
        assert terms[0] == 12.0
        assert terms[-1] == 360.0

    def test_rate_sweep_values(self):
        rates = list(rate_sweep())
        assert len(rates) == 25
        assert rates[0] == 1.0
        assert rates[-1] == 25.0

    def test_rate_sweep_same_length_both_directions(self):
        assert len(sweep_rates(SolveFor.PAYMENT, 10_000.0, 60.0)) == 25
        assert len(sweep_rates(SolveFor.PRINCIPAL, 200.0, 60.0)) == 25

    def test_term_sweep_rows(self):
        rows = sweep_terms(SolveFor.PRINCIPAL, 200.0, 5.0)
        assert [row.term_months for row in rows] == list(term_sweep())
        # a longer term at the same payment buys a larger principal
        principals = [row.principal for row in rows]
        assert principals == sorted(principals)


class TestRunQuery:

    def test_single(self):
        groups = run_query(LoanQuery(principal=39000.0, annual_rate=7.0, term_months=60.0))
        assert len(groups) == 1
        assert len(groups[0].rows) == 1
        assert groups[0].options == DisplayOptions.DEFAULT
        assert groups[0].term_months is None

    def test_term_sweep(self):
        groups = run_query(LoanQuery(payment=500.0, annual_rate=6.5))
        assert len(groups) == 1
        assert len(groups[0].rows) == 30
        assert groups[0].options == DisplayOptions.TERM

    def test_rate_sweep(self):
        groups = run_query(LoanQuery(principal=10_000.0, term_months=36.0))
        assert len(groups) == 1
        assert len(groups[0].rows) == 25
        assert groups[0].options == DisplayOptions.RATE

    def test_full_sweep(self):
        groups = run_query(LoanQuery(payment=300.0))
        assert len(groups) == 30
        assert [g.term_months for g in groups] == list(term_sweep())
        assert all(len(g.rows) == 25 for g in groups)
        assert all(g.rows[0].solved is SolveFor.PRINCIPAL for g in groups)

    def test_non_positive_rate_is_swept(self):
        groups = run_query(LoanQuery(principal=10_000.0, annual_rate=0.0, term_months=36.0))
        assert len(groups[0].rows) == 25

    def test_missing_amount(self):
        with pytest.raises(UsageError) as excinfo:
            run_query(LoanQuery(annual_rate=7.0, term_months=60.0))
        assert not excinfo.value.conflict

    def test_both_amounts(self):
        with pytest.raises(UsageError) as excinfo:
            run_query(LoanQuery(principal=1000.0, payment=100.0))
        assert excinfo.value.conflict
