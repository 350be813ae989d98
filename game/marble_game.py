from __future__ import annotations

import logging
from contextlib import contextmanager

from .action_result import (
    ErrorResult,
    MoveError,
    MoveResult,
    RejectedMove,
    RejectionReason,
)
from .constants import MAX_CONSECUTIVE_EXTRA_TURNS, NUM_PLAYERS
from .game_state import GameSnapshot, PlayerSnapshot, TokenSnapshot, TurnPhase
from .marble_board import Coord, MarbleBoard
from .marble_draw import MarbleDraw, RandomSource, Roll
from .marble_logic import (
    advance,
    check_capture,
    check_win,
    legal_token_indices,
    position_coord,
    resolve_step_count,
)
from .marble_token import MarblePlayer, MarbleToken

logger = logging.getLogger(__name__)


class MarbleGame:
    """Rules engine and turn controller for one four-player game.

    Turn cycle:
        AWAITING_ROLL --draw()--> AWAITING_MOVE --move()--> AWAITING_ROLL | GAME_OVER

    All game state lives on the instance, so several games can run side by
    side. The random source is injected so tests can script draws.
    """

    def __init__(self, source: RandomSource | None = None, player_names=None):
        self.board = MarbleBoard()
        self.marble_draw = MarbleDraw(source)
        names = list(player_names or [])
        self.players = [
            MarblePlayer(
                n,
                self.board.start_index(n),
                name=names[n] if n < len(names) else None,
            )
            for n in range(NUM_PLAYERS)
        ]
        self.init()

    def init(self):
        """Reset every token to home and clear all turn state."""
        for player in self.players:
            player.reset()
        self.current_player = 0
        self.pending_roll: Roll | None = None
        self.extra_turn_count = 0
        self.game_over = False
        self.winner: int | None = None
        self.is_moving = False

    @property
    def phase(self) -> TurnPhase:
        if self.game_over:
            return TurnPhase.GAME_OVER
        if self.pending_roll is not None:
            return TurnPhase.AWAITING_MOVE
        return TurnPhase.AWAITING_ROLL

    #
    # Move lock
    #
    def set_moving(self, value: bool) -> None:
        """Hold or release the move lock (e.g. while a front end animates a move)."""
        self.is_moving = value

    @contextmanager
    def moving(self):
        self.is_moving = True
        try:
            yield self
        finally:
            self.is_moving = False

    #
    # Turn operations
    #
    def draw(self) -> Roll | None:
        """Draw four marbles for the current player.

        Returns None without touching any state when a move is in progress
        or the game is over.

        Also returns None while a roll is pending: a drawn roll is spent by
        ``move()`` or, when ``legal_token_indices()`` is empty, by
        ``skip_turn()``. It is never replaced by drawing again.
        """
        if self.is_moving or self.game_over or self.pending_roll is not None:
            logger.debug("Draw refused in phase %s (moving=%s)", self.phase.value, self.is_moving)
            return None
        self.pending_roll = self.marble_draw.draw()
        return self.pending_roll

    def legal_token_indices(self, player: int | None = None, roll: Roll | None = None) -> frozenset[int]:
        """Tokens of ``player`` that may move with ``roll``.

        Defaults to the current player and the pending roll. Empty when there
        is no roll to judge against.
        """
        if player is None:
            player = self.current_player
        if roll is None:
            roll = self.pending_roll
        if roll is None:
            return frozenset()
        return legal_token_indices(self.players[player], roll)

    def _check_turn_allowed(self) -> ErrorResult | None:
        if self.game_over:
            return ErrorResult(MoveError.GAME_ALREADY_OVER)
        if self.is_moving:
            return ErrorResult(MoveError.MOVE_IN_PROGRESS)
        if self.pending_roll is None:
            return ErrorResult(MoveError.NO_PENDING_ROLL)
        return None

    def move(self, token_index: int):
        """Move one of the current player's tokens with the pending roll.

        Returns:
            ErrorResult: the move was not allowed; nothing changed
            RejectedMove: the token cannot move with this roll; roll and turn are kept
            MoveResult: the move was applied
        """
        error = self._check_turn_allowed()
        if error is not None:
            return error

        player = self.players[self.current_player]
        if not 0 <= token_index < len(player.tokens):
            return ErrorResult(MoveError.INVALID_TOKEN)

        token = player.tokens[token_index]
        roll = self.pending_roll
        if token.finished:
            return RejectedMove(token_index, RejectionReason.TOKEN_FINISHED)
        if token.is_at_home and not roll.all_same:
            logger.debug("Player %d token %d must wait at home", player.n, token_index)
            return RejectedMove(token_index, RejectionReason.ILLEGAL_HOME_DEPARTURE)

        with self.moving():
            result = self._resolve_move(player, token, roll)

        self.pending_roll = None
        if result.just_won:
            self.game_over = True
            self.winner = player.n
            logger.info("%s wins", player.name)
        elif not result.grant_extra_turn:
            self._advance_turn()
        return result

    def _resolve_move(self, player: MarblePlayer, token: MarbleToken, roll: Roll) -> MoveResult:
        left_home = token.is_at_home
        if left_home:
            token.leave_home()

        steps = resolve_step_count(roll, token.position)
        token.position = advance(self.board, token.position, steps, token.has_captured)

        captured = check_capture(self.board, self.players, player.n, token)
        won = check_win(player)

        grant = self._grant_extra_turn(roll.all_same or bool(captured) or token.finished)
        logger.debug(
            "Player %d moved token %d by %d to %s (captured=%d, extra=%s)",
            player.n, token.n, steps, token.position, len(captured), grant,
        )
        return MoveResult(
            token_index=token.n,
            steps=steps,
            left_home=left_home,
            captured=[(t.owner, t.n) for t in captured],
            finished=token.finished,
            just_won=won,
            grant_extra_turn=grant,
        )

    def _grant_extra_turn(self, eligible: bool) -> bool:
        if not eligible:
            self.extra_turn_count = 0
            return False
        self.extra_turn_count += 1
        if self.extra_turn_count > MAX_CONSECUTIVE_EXTRA_TURNS:
            self.extra_turn_count = 0
            return False
        return True

    def _advance_turn(self):
        self.current_player = (self.current_player + 1) % NUM_PLAYERS
        self.extra_turn_count = 0

    def skip_turn(self) -> ErrorResult | None:
        """Pass the pending roll and hand the turn to the next player.

        Used by callers when ``legal_token_indices()`` is empty.
        """
        error = self._check_turn_allowed()
        if error is not None:
            return error
        logger.debug("Player %d passes", self.current_player)
        self.pending_roll = None
        self._advance_turn()
        return None

    #
    # Queries
    #
    def token_position(self, player: int, token: int) -> Coord | None:
        t = self.players[player].tokens[token]
        return position_coord(self.board, t.position, t.start_index)

    def get_outer_path(self) -> tuple[Coord, ...]:
        return self.board.outer_path

    def get_inner_path(self) -> tuple[Coord, ...]:
        return self.board.inner_path

    def get_state(self) -> GameSnapshot:
        """Return a snapshot that does not share any mutable state with the game."""
        players = tuple(
            PlayerSnapshot(
                n=p.n,
                name=p.name,
                start=self.board.start_coord(p.n),
                tokens=tuple(
                    TokenSnapshot(
                        n=t.n,
                        position=t.position,
                        has_captured=t.has_captured,
                        outer_index=t.outer_index,
                        inner_index=t.inner_index,
                        coord=position_coord(self.board, t.position, t.start_index),
                    )
                    for t in p.tokens
                ),
            )
            for p in self.players
        )
        return GameSnapshot(
            players=players,
            current_player=self.current_player,
            phase=self.phase,
            pending_roll=self.pending_roll,
            extra_turn_count=self.extra_turn_count,
            game_over=self.game_over,
            winner=self.winner,
            is_moving=self.is_moving,
        )
