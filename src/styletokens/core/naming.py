"""Token name sanitizing."""

from __future__ import annotations

import re

# "-" and "." are the delimiters sanitizing emits, so they survive a second pass.
_DISALLOWED = re.compile(r"[^a-z0-9\s/.\-]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_name(name: str) -> str:
    """Derive a token key from a free-form style name.

    Lowercases, drops punctuation, collapses whitespace runs to ``-`` and
    turns ``/`` into ``.``::

        >>> sanitize_name("Primary / Brand Color")
        'primary-.-brand-color'

    Sanitizing is idempotent. Distinct names may map to the same key;
    callers own uniqueness.
    """
    name = _DISALLOWED.sub("", name.lower())
    name = _WHITESPACE.sub("-", name)
    return name.replace("/", ".")
