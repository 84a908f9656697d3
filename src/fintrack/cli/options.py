"""Option sets shared by several commands."""

import click


def lookup_options(entity: str, searched_field: str = "name"):
    """Add ``--id/-i`` and ``--name/-n`` to a get, update or delete command.

    The id lands in the ``entity_id`` parameter so it does not shadow the
    builtin.
    """

    def decorator(f):
        f = click.option(
            "--name", "-n", help=f"Search the {entity} by {searched_field} (substring match)"
        )(f)
        f = click.option("--id", "-i", "entity_id", help=f"The id of the {entity}")(f)
        return f

    return decorator
