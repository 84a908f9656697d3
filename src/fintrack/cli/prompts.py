"""Interactive prompting capability.

Commands never talk to the terminal directly when they need a value; they
ask the Prompter found in ``ctx.obj["prompter"]``. The CLI installs a
ClickPrompter, tests install one that replays canned answers.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import click

from fintrack.domain.errors import ValidationError


class Prompter(ABC):
    """Source of interactively entered values."""

    @abstractmethod
    def text(self, message: str, help: Optional[str] = None, default: Optional[str] = None) -> str:
        """Ask for free text. An empty answer yields ``default`` when given."""
        pass

    @abstractmethod
    def select(self, message: str, options: Sequence[str], default: Optional[str] = None) -> str:
        """Ask the user to pick exactly one of ``options`` and return it."""
        pass


class ClickPrompter(Prompter):
    """Prompter backed by click.prompt."""

    def text(self, message: str, help: Optional[str] = None, default: Optional[str] = None) -> str:
        if help:
            click.echo(click.style(help, dim=True), err=True)
        return click.prompt(message, default=default, show_default=default is not None, type=str)

    def select(self, message: str, options: Sequence[str], default: Optional[str] = None) -> str:
        if not options:
            raise ValidationError(f"Nothing to choose from for '{message}'")

        click.echo(f"{message}:", err=True)
        for index, option in enumerate(options, start=1):
            click.echo(f"  {index}) {option}", err=True)

        default_index = options.index(default) + 1 if default in options else None
        choice = click.prompt(
            "Enter number",
            type=click.IntRange(1, len(options)),
            default=default_index,
            show_default=default_index is not None,
        )
        return options[choice - 1]
