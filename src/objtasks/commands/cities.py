"""Command: sort or group country/city records from a JSON file."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from objtasks.commands._base import ObjCommand

if TYPE_CHECKING:
    from objtasks.commands._context import AppContext


@click.command(
    cls=ObjCommand,
    examples="""\
  objtasks cities cities.json
  objtasks cities cities.json --group
  cat cities.json | objtasks --json cities -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--group", "group_by", is_flag=True, help="Group cities by country.")
@click.pass_obj
def cities(app: AppContext, source: IO[str], group_by: bool) -> None:
    """Sort records in SOURCE by country then city (or group them)."""
    from objtasks.services.exercises import ExerciseService
    from objtasks.services.result import ServiceResult

    op = "group_cities" if group_by else "sort_cities"
    try:
        records = json.load(source)
    except json.JSONDecodeError as exc:
        app.emit(ServiceResult.failure(op, "INVALID_INPUT", f"Invalid JSON: {exc}"))
        return

    svc = ExerciseService()
    app.emit(svc.group_cities(records) if group_by else svc.sort_cities(records))
