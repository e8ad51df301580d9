"""
Semantic token synthesis.

The semantic tier is a fixed template filled from a declarative rule
table: each rule names a path in the tree, where its reference comes from,
and the literal used when the raw tier has nothing to point at. References
are plain ``{raw.<category>.<name>}`` strings; resolving them is left to
downstream tooling.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .ir.tokens import RawTokenSet


def raw_reference(category: str, name: str) -> str:
    """Build the alias string for ``raw.<category>.<name>``."""
    return f"{{raw.{category}.{name}}}"


def _color(value: str) -> dict[str, Any]:
    return {"value": value, "type": "color"}


def _text(font_size: str, font_weight: int, line_height: str) -> dict[str, Any]:
    return {"fontSize": font_size, "fontWeight": font_weight, "lineHeight": line_height}


def _as_is(reference: str) -> Any:
    return reference


@dataclass(frozen=True)
class AliasRule:
    """One leaf of the semantic tree.

    Attributes:
        path: Location of the leaf, e.g. ``("color", "brand", "primary")``.
        fallback: Literal node used when no reference can be made.
        category: Raw category to reference (document key, e.g. ``fontSize``).
        position: Insertion position of the referenced key within ``category``.
        key: Fixed key to reference without checking it exists.
        build: Wraps the reference string into the leaf node.
    """

    path: tuple[str, ...]
    fallback: Any
    category: str | None = None
    position: int = 0
    key: str | None = None
    build: Callable[[str], Any] = _as_is

    def resolve(self, raw: RawTokenSet) -> Any:
        if self.category is not None:
            if self.key is not None:
                return self.build(raw_reference(self.category, self.key))
            names = list(raw.category(self.category))
            if len(names) > self.position:
                return self.build(raw_reference(self.category, names[self.position]))
        return copy.deepcopy(self.fallback)


SEMANTIC_RULES: tuple[AliasRule, ...] = (
    # Brand colors take the first two raw colors in insertion order.
    AliasRule(
        ("color", "brand", "primary"),
        fallback=_color("#1976D2"),
        category="color",
        position=0,
        build=_color,
    ),
    AliasRule(
        ("color", "brand", "secondary"),
        fallback=_color("#424242"),
        category="color",
        position=1,
        build=_color,
    ),
    # No color-role inference: text and background are always literal.
    AliasRule(("color", "text", "primary"), fallback=_color("#111827")),
    AliasRule(("color", "text", "secondary"), fallback=_color("#6B7280")),
    AliasRule(("color", "background", "page"), fallback=_color("#FFFFFF")),
    AliasRule(("color", "background", "surface"), fallback=_color("#F9FAFB")),
    AliasRule(
        ("typography", "heading", "h1"),
        fallback=_text("32px", 700, "1.2"),
        category="fontSize",
        position=0,
        build=lambda ref: _text(ref, 700, "1.2"),
    ),
    AliasRule(("typography", "body", "base"), fallback=_text("16px", 400, "1.5")),
    AliasRule(
        ("spacing", "component", "padding"),
        fallback=raw_reference("spacing", "3"),
        category="spacing",
        key="3",
    ),
    AliasRule(
        ("spacing", "component", "margin"),
        fallback=raw_reference("spacing", "2"),
        category="spacing",
        key="2",
    ),
)


def generate_semantic_tokens(
    raw: RawTokenSet,
    rules: Sequence[AliasRule] = SEMANTIC_RULES,
) -> dict[str, Any]:
    """Evaluate the rule table against the raw tier.

    Never fails: every rule has a literal fallback.

    Args:
        raw: Fully assembled raw token set.
        rules: Rule table; defaults to the standard template.

    Returns:
        Nested dict with ``color``, ``typography`` and ``spacing`` branches.
    """
    tree: dict[str, Any] = {}

    for rule in rules:
        *branches, leaf = rule.path
        node = tree
        for branch in branches:
            node = node.setdefault(branch, {})
        node[leaf] = rule.resolve(raw)

    return tree
