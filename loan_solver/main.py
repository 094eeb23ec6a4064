"""Command-line interface for the loan solver.

This module uses the ``click`` library to implement the ``loan`` command.
Exactly one of a principal (``-p``) or a monthly payment (``-m``) is
required; the other amount is solved. The rate (``-i``) and the term
(``-t``) are optional, and whichever is missing is swept over a fixed range,
printing one row per candidate value.

    loan -p 39000 -i 7.0 -t 60     # one row
    loan -m 500 -i 6.5             # one row per term, 12..360 months
    loan -p 250k                   # every term crossed with every rate
"""

from __future__ import annotations

from typing import Optional

import click

from .data_models import LoanQuery
from .engine import run_query
from .exceptions import DegenerateInputError, UsageError
from .formatter import print_definitions, print_report, print_usage
from .logging_config import configure_logging, get_logger, verbosity_to_level
from .utils import parse_optional_amount

logger = get_logger(__name__)

EXIT_FAILURE = 1


def _amount_callback(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[float]:
    try:
        return parse_optional_amount(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc))


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option("--principal", "-p", "principal", callback=_amount_callback, help="Principal amount of the loan")
@click.option("--payment", "-m", "payment", callback=_amount_callback, help="Monthly payment")
@click.option("--rate", "-i", "rate", type=float, help="Simple yearly interest rate (percent)")
@click.option("--term", "-t", "term", type=float, help="Loan period in months (number of payments)")
@click.option(
    "--definitions",
    "-h",
    "definitions",
    is_flag=True,
    help="Print definitions of Break Even Years and Interest%",
)
@click.option("--verbose", "-v", "verbose", count=True, help="Log progress to stderr (-vv for debug)")
@click.pass_context
def cli(
    ctx: click.Context,
    principal: Optional[float],
    payment: Optional[float],
    rate: Optional[float],
    term: Optional[float],
    definitions: bool,
    verbose: int,
) -> None:
    """Solve for the monthly payment or the principal of an amortized loan.

    Ordering of arguments does not matter. Unspecified arguments will be
    solved if possible.
    """
    configure_logging(verbosity_to_level(verbose))
    query = LoanQuery(principal=principal, payment=payment, annual_rate=rate, term_months=term)
    logger.debug("Parsed %s", query)

    if definitions:
        print_definitions()
        if principal is None and payment is None:
            print_usage()
            ctx.exit(EXIT_FAILURE)

    try:
        groups = run_query(query)
    except UsageError as exc:
        logger.info("Usage error: %s", exc)
        print_usage(conflict=exc.conflict)
        ctx.exit(EXIT_FAILURE)
    except DegenerateInputError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(EXIT_FAILURE)

    print_report(groups)


if __name__ == "__main__":
    cli()
