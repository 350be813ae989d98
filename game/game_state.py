"""Immutable snapshots of a game in progress.

``MarbleGame.get_state()`` returns a GameSnapshot built from these
records. They hold only tuples, ints, enums and frozen positions, so a
consumer can keep or pass one around without seeing later moves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from game.marble_board import Coord
from game.marble_draw import Roll
from game.marble_token import TokenMode, TokenPosition


class TurnPhase(str, Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TokenSnapshot:
    n: int
    position: TokenPosition
    has_captured: bool
    outer_index: int | None
    inner_index: int | None
    coord: Coord | None

    @property
    def mode(self) -> TokenMode:
        return self.position.mode

    @property
    def is_at_home(self) -> bool:
        return self.position.mode == TokenMode.AT_HOME

    @property
    def finished(self) -> bool:
        return self.position.mode == TokenMode.FINISHED


@dataclass(frozen=True)
class PlayerSnapshot:
    n: int
    name: str
    start: Coord
    tokens: tuple[TokenSnapshot, ...]

    def finished_count(self) -> int:
        return sum(1 for token in self.tokens if token.finished)


@dataclass(frozen=True)
class GameSnapshot:
    players: tuple[PlayerSnapshot, ...]
    current_player: int
    phase: TurnPhase
    pending_roll: Roll | None
    extra_turn_count: int
    game_over: bool
    winner: int | None
    is_moving: bool

    def current(self) -> PlayerSnapshot:
        return self.players[self.current_player]
