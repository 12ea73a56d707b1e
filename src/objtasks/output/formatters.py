"""Dispatch a ServiceResult to JSON, quiet, or Rich human output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from objtasks.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from objtasks.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent or None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
