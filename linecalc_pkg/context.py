"""Per-pass evaluation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .aliasing import AliasTable


@dataclass
class EvaluationContext:
    """State threaded through the lines of one evaluation pass.

    A new context is created for every pass and never shared.
    """

    scope: dict[str, Any] = field(default_factory=dict)
    previous_answer: Any = None
    aliases: AliasTable = field(default_factory=AliasTable)

    @property
    def has_previous_answer(self) -> bool:
        return self.previous_answer is not None

    def is_known_name(self, name: str) -> bool:
        """True if ``name`` is bound in scope or was already aliased."""
        return name in self.scope or name in self.aliases
