"""Interactive yes/no confirmation."""

from __future__ import annotations

import click

AFFIRMATIVE_ANSWERS = frozenset({"yes", "y"})


def is_affirmative(answer: str) -> bool:
    return answer.strip().casefold() in AFFIRMATIVE_ANSWERS


def confirm(prompt: str) -> bool:
    """Ask *prompt* and block until one line of input arrives.

    Only ``yes`` or ``y`` (any case) confirm. Empty input, end of input
    and Ctrl-C are treated as a refusal.
    """
    try:
        answer = click.prompt(prompt, default="", show_default=False, prompt_suffix=" ")
    except click.Abort:
        click.echo()
        return False
    return is_affirmative(answer)
