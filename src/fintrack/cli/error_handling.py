"""CLI error handling helpers."""

import logging

import click

from fintrack.domain.errors import DomainError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_VALIDATION = 2
EXIT_STORAGE = 3


def exit_code_for(error: DomainError) -> int:
    """Map a domain error onto the process exit status."""
    if isinstance(error, NotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(error, ValidationError):
        return EXIT_VALIDATION
    if isinstance(error, StorageError):
        return EXIT_STORAGE
    return EXIT_NOT_FOUND


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error and exit with the matching status."""
    logger.debug(f"{type(error).__name__}: {error}")
    click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code_for(error))
