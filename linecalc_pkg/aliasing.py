"""Aliasing of non-ASCII variable names.

The engine only accepts ASCII identifiers, so names such as ``房租`` are
swapped for synthetic ``_v0``, ``_v1``... names before a line is parsed.
A table lives for exactly one evaluation pass.
"""

from __future__ import annotations

import re

from .config import IDENTIFIER_REGEX


def needs_alias(token: str) -> bool:
    """Return True if the token has any character outside 7-bit ASCII."""
    return any(ord(char) > 0x7F for char in token)


class AliasTable:
    """Pass-local mapping from original identifiers to synthetic names."""

    def __init__(self) -> None:
        self.mapping: dict[str, str] = {}
        self.counter = 0

    def __contains__(self, name: object) -> bool:
        return name in self.mapping

    def __len__(self) -> int:
        return len(self.mapping)

    def alias_for(self, name: str) -> str:
        """Return the alias for ``name``, allocating ``_v{N}`` on first use."""
        alias = self.mapping.get(name)
        if alias is None:
            alias = f"_v{self.counter}"
            self.counter += 1
            self.mapping[name] = alias
        return alias

    def _replace(self, match: re.Match[str]) -> str:
        token = match.group(0)
        if needs_alias(token):
            return self.alias_for(token)
        return token

    def substitute(self, line: str) -> str:
        """Replace every non-ASCII identifier in ``line`` by its alias."""
        return IDENTIFIER_REGEX.sub(self._replace, line)
