"""Command: simulate the ticket seller queue."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtasks.commands._base import ObjCommand

if TYPE_CHECKING:
    from objtasks.commands._context import AppContext


@click.command(
    cls=ObjCommand,
    examples="""\
  objtasks tickets 25 25 50
  objtasks tickets 25 100
  objtasks -q tickets 25 50 25 100""",
)
@click.argument("bills", nargs=-1, type=int)
@click.pass_obj
def tickets(app: AppContext, bills: tuple[int, ...]) -> None:
    """Check whether a 25-priced ticket can be sold to every bill in BILLS."""
    from objtasks.services.exercises import ExerciseService

    app.emit(ExerciseService().sell_tickets(list(bills)))
