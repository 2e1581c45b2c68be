"""Test helpers."""
from scriba.log import CONSOLE


def equal(result, expected, extra=None):
    """Compare, printing both sides (and any context) with rich if they differ."""
    if result == expected:
        return True

    CONSOLE.print("[bold red]Result:[/]", result)
    CONSOLE.print("[bold green]Expected:[/]", expected)

    if extra is not None:
        CONSOLE.print("[bold]Context:[/]", extra)

    return False
