"""Runtime configuration for the game commands.

Environment-first: ``TTT_DEBUG`` and ``TTT_HUMAN`` provide defaults, and
command-line flags override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from .board import Cell

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Config:
    debug: bool = False
    human: Cell = Cell.X
    timing: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        human = os.getenv("TTT_HUMAN", "").strip().upper()
        if human and human not in ("X", "O"):
            raise ValueError(f"TTT_HUMAN must be X or O, got {human!r}")
        return cls(
            debug=_env_flag("TTT_DEBUG"),
            human=Cell.from_symbol(human) if human else Cell.X,
        )

    def override(
        self,
        debug: Optional[bool] = None,
        human: Optional[str] = None,
        timing: Optional[bool] = None,
    ) -> "Config":
        changes = {}
        if debug:
            changes["debug"] = True
        if human is not None:
            changes["human"] = Cell.from_symbol(human)
        if timing is not None:
            changes["timing"] = timing
        return replace(self, **changes)

    @property
    def computer(self) -> Cell:
        return self.human.opponent
