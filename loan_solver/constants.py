"""Fixed ranges and display settings for the loan solver.

When the rate or the term is not supplied, the solver enumerates candidate
values from the ranges below instead of solving for them algebraically.
"""

# ── Term sweep (months) ──────────────────────────────────────────────
TERM_SWEEP_START = 12.0
TERM_SWEEP_STOP = 360.0   # inclusive
TERM_SWEEP_STEP = 12.0

# ── Rate sweep (annual percent) ──────────────────────────────────────
RATE_SWEEP_START = 1.0
RATE_SWEEP_STOP = 25.0    # inclusive, same bound for both solve directions
RATE_SWEEP_STEP = 1.0

# ── Formulas ─────────────────────────────────────────────────────────
MONTHS_PER_YEAR = 12.0
MONTHLY_RATE_DIVISOR = 1200.0   # percent per year -> fraction per month

# ── Report layout ────────────────────────────────────────────────────
FIELD_WIDTH = 12
AMOUNT_DECIMALS = 2
RATE_DECIMALS = 3
FIELD_SEPARATOR = "\t"
