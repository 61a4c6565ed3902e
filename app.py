#!/usr/bin/env python3

import sys

import click
from pydantic import ValidationError

from propchain.config import get_settings
from propchain.error_details import get_error_human_message
from propchain.examples import PERSON_CHECKS, Person
from propchain.utils.logging import get_logger, setup_logging
from propchain.validation import ValidationFailedError, ValidationService

logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """propchain - Fluent property validation"""
    try:
        get_settings()
    except ValidationError as e:
        raise click.ClickException(get_error_human_message(e)) from e
    setup_logging()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option("--name", default="", help="Person name to validate")
@click.option("--age", type=int, required=True, help="Person age to validate")
@click.option(
    "--all-checks/--fail-fast",
    "all_checks",
    default=None,
    help="Evaluate every check instead of stopping at the first failure "
    "(default: STOP_ON_FIRST_FAILURE setting)",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Report only the first failure as an error",
)
def person(name, age, all_checks, strict) -> None:
    """Validate a person's Name and Age and print each check result"""
    stop_on_first_failure = None if all_checks is None else not all_checks
    service = ValidationService(PERSON_CHECKS, stop_on_first_failure)
    chain = service.validate(Person(name=name, age=age))
    logger.info("Person validated", valid=chain.is_valid())

    if strict:
        try:
            chain.raise_if_invalid()
        except ValidationFailedError as e:
            raise click.ClickException(get_error_human_message(e)) from e
        click.echo("All checks passed")
        return

    click.echo(service.format_results(chain))
    if not chain.is_valid():
        sys.exit(1)


@cli.command()
def checks() -> None:
    """List the checks applied by the person command"""
    for item in PERSON_CHECKS:
        click.echo(f"{item.accessor.name}: {item.message}")


if __name__ == "__main__":
    cli()
