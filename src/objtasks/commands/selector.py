"""Command: build a CSS selector from kind:value tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtasks.commands._base import ObjCommand

if TYPE_CHECKING:
    from objtasks.commands._context import AppContext


@click.command(
    cls=ObjCommand,
    examples="""\
  objtasks selector id:main class:container class:editable
  objtasks selector element:a 'attr:href$=".png"' pseudo-class:focus
  objtasks selector element:div id:main + element:table id:data
  objtasks selector element:tr descendant element:td
  objtasks --json selector element:ul '>' element:li""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def selector(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS.

    Each token is KIND:VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: '>', '+', '~', or 'descendant'.
    """
    from objtasks.services.selector import SelectorService

    app.emit(SelectorService(app.settings.selector).build(list(tokens)))
