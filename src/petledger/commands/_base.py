"""Click classes for petledger commands, plus shared argument types.

Every command and group takes an optional ``examples=`` text. When given,
the command grows an ``--examples`` flag that prints the text and exits,
so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=_print_examples,
                    help="Print example invocations and exit.",
                )
            )


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", "")
    click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
    ctx.exit(0)


class LedgerCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class LedgerGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`LedgerCommand` by default."""

    command_class = LedgerCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


ANIMAL_CHOICE = click.Choice(
    ["none", "fish", "cat", "dog", "rabbit", "parrot"], case_sensitive=False
)
GENDER_CHOICE = click.Choice(["male", "female"], case_sensitive=False)
