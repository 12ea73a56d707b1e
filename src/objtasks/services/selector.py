"""SelectorService — build a selector from ``kind:value`` and combinator tokens.

Token grammar (no CSS parsing is involved, every value is opaque text):

- ``element:div``, ``id:main``, ``class:box``, ``attr:href``,
  ``pseudo-class:hover``, ``pseudo-element:before`` append one fragment.
  Only the first ``:`` separates kind from value.
- ``>``, ``+``, ``~``, ``descendant`` or a literal single space close the
  current compound selector and combine it with the next one.

Compound selectors are combined left to right; because combination is
plain concatenation the result equals any nesting of the same sequence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from objtasks.config.models import SelectorConfig
from objtasks.domain.errors import SelectorError
from objtasks.domain.fragments import FragmentKind
from objtasks.domain.selectors import Combinator, SelectorBuilder
from objtasks.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "build_selector"

TOKEN_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

COMBINATOR_TOKENS: dict[str, Combinator] = {
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
    " ": Combinator.DESCENDANT,
    "descendant": Combinator.DESCENDANT,
}


class TokenError(ValueError):
    """A token is malformed or out of place."""

    def __init__(self, message: str, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(message)


@dataclass
class _Chain:
    """Compound selectors and the combinators between them."""

    compounds: list[SelectorBuilder] = field(default_factory=list)
    combinators: list[str] = field(default_factory=list)


class SelectorService:
    """Turn CLI tokens into a rendered selector wrapped in a ServiceResult."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self._config = config or SelectorConfig()

    def build(self, tokens: list[str]) -> ServiceResult:
        try:
            chain = self._parse(tokens)
            selector = self._fold(chain)
        except TokenError as exc:
            return ServiceResult.failure(
                OP, "INVALID_TOKEN", str(exc), token=exc.token, position=exc.position
            )
        except SelectorError as exc:
            detail = {"kind": str(exc.kind)}
            previous = getattr(exc, "previous", None)
            if previous is not None:
                detail["previous"] = str(previous)
            return ServiceResult.failure(OP, exc.code, str(exc), **detail)

        rendered = selector.render()
        logger.debug("Built selector %r from %d compound(s)", rendered, len(chain.compounds))
        return ServiceResult.success(OP, selector=rendered, compounds=len(chain.compounds))

    # --- Internals ---

    def _parse(self, tokens: list[str]) -> _Chain:
        if not tokens:
            raise TokenError("No selector tokens given", "", 0)

        chain = _Chain()
        current: SelectorBuilder | None = None
        for position, token in enumerate(tokens):
            combinator = self._as_combinator(token)
            if combinator is not None:
                if current is None:
                    raise TokenError(
                        f"Combinator {token!r} must follow a selector", token, position
                    )
                chain.compounds.append(current)
                chain.combinators.append(combinator)
                current = None
                continue

            kind_name, sep, value = token.partition(":")
            kind = TOKEN_KINDS.get(kind_name)
            if not sep or kind is None:
                raise TokenError(
                    f"Expected kind:value or a combinator, got {token!r}", token, position
                )
            if current is None:
                current = SelectorBuilder(kind, value)
            else:
                current.add(kind, value)

        if current is None:
            raise TokenError("Selector cannot end with a combinator", tokens[-1], len(tokens) - 1)
        chain.compounds.append(current)
        return chain

    def _as_combinator(self, token: str) -> str | None:
        known = COMBINATOR_TOKENS.get(token)
        if known is not None:
            return str(known)
        if self._config.strict_combinators or ":" in token:
            return None
        # Non-strict: any other colon-free token is used verbatim.
        return token

    def _fold(self, chain: _Chain) -> SelectorBuilder:
        strict = self._config.strict_combinators
        result = chain.compounds[0]
        for combinator, right in zip(chain.combinators, chain.compounds[1:], strict=True):
            result = result.combine(right, combinator, strict=strict)
        return result
