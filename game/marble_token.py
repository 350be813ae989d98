"""Token and player state.

A token's position is one of four variants. Only the variant that applies
carries an index, so an outer-loop token never holds a stale inner index
and a finished token holds no index at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from game.constants import TOKENS_PER_PLAYER


class TokenMode(str, Enum):
    AT_HOME = "home"
    OUTER = "outer"
    INNER = "inner"
    FINISHED = "finished"


@dataclass(frozen=True)
class AtHome:
    mode = TokenMode.AT_HOME


@dataclass(frozen=True)
class OnOuter:
    index: int
    mode = TokenMode.OUTER


@dataclass(frozen=True)
class OnInner:
    index: int
    mode = TokenMode.INNER


@dataclass(frozen=True)
class Finished:
    mode = TokenMode.FINISHED


TokenPosition = Union[AtHome, OnOuter, OnInner, Finished]


@dataclass
class MarbleToken:
    """A single token owned by one player.

    Attributes:
        owner: Player ordinal (0-3)
        n: Token ordinal within its owner's set (0-3)
        start_index: Outer path index of the owner's start cell
        position: Current position variant
        has_captured: True once this token has captured since it last returned home
    """

    owner: int
    n: int
    start_index: int
    position: TokenPosition = field(default_factory=AtHome)
    has_captured: bool = False

    @property
    def mode(self) -> TokenMode:
        return self.position.mode

    @property
    def is_at_home(self) -> bool:
        return isinstance(self.position, AtHome)

    @property
    def finished(self) -> bool:
        return isinstance(self.position, Finished)

    @property
    def outer_index(self) -> int | None:
        # Home tokens wait on their start cell
        if isinstance(self.position, OnOuter):
            return self.position.index
        if isinstance(self.position, AtHome):
            return self.start_index
        return None

    @property
    def inner_index(self) -> int | None:
        if isinstance(self.position, OnInner):
            return self.position.index
        return None

    def send_home(self) -> None:
        self.position = AtHome()
        self.has_captured = False

    def leave_home(self) -> None:
        self.position = OnOuter(self.start_index)


class MarblePlayer:
    """A seat at the table with its four tokens."""

    def __init__(self, n: int, start_index: int, name: str | None = None):
        self.n = n
        self.start_index = start_index
        self.name = name if name is not None else f"Player {n + 1}"
        self.tokens = [
            MarbleToken(owner=n, n=i, start_index=start_index)
            for i in range(TOKENS_PER_PLAYER)
        ]

    def __repr__(self):
        return f"MarblePlayer(n={self.n}, name={self.name!r})"

    def reset(self) -> None:
        for token in self.tokens:
            token.send_home()

    def finished_count(self) -> int:
        return sum(1 for token in self.tokens if token.finished)
