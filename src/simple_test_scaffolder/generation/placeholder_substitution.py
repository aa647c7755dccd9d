"""Literal placeholder substitution."""

from __future__ import annotations

from collections.abc import Iterable


def substitute_placeholders(text: str, placeholders: Iterable[str], value: str) -> str:
    """Replace every occurrence of each placeholder token with `value`.

    Tokens are replaced literally and in order. There is no escaping: when
    `value` itself contains a later token, that occurrence is replaced too.
    """
    for placeholder in placeholders:
        text = text.replace(placeholder, value)
    return text
