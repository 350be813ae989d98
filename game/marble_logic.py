"""Rule functions for marble draw.

Movement and legality are pure: same inputs give the same outputs and
nothing is mutated. Capture is the one rule that writes token state, and
only the tokens it captures plus the capturing token.

Usage:
    board = MarbleBoard()
    steps = resolve_step_count(roll, token.position)
    token.position = advance(board, token.position, steps, token.has_captured)
    captured = check_capture(board, players, player_index, token)
"""

from __future__ import annotations

import logging

from game.constants import ALL_WHITE_INNER_STEPS
from game.marble_board import Coord, MarbleBoard
from game.marble_draw import Roll
from game.marble_token import (
    AtHome,
    Finished,
    MarblePlayer,
    MarbleToken,
    OnInner,
    OnOuter,
    TokenPosition,
)

logger = logging.getLogger(__name__)


def position_coord(board: MarbleBoard, position: TokenPosition, start_index: int) -> Coord | None:
    """Board coordinate of a position, or None once the token has finished.

    Home tokens stand on their owner's start cell.
    """
    if isinstance(position, AtHome):
        return board.outer_coord(start_index)
    if isinstance(position, OnOuter):
        return board.outer_coord(position.index)
    if isinstance(position, OnInner):
        return board.inner_coord(position.index)
    return None


def resolve_step_count(roll: Roll, position: TokenPosition) -> int:
    """Steps a roll is worth for a token at ``position``.

    An all-white roll moves a token that is already on the inner loop nine
    steps instead of eight. Tokens that only reach the inner loop during the
    move get the plain eight.
    """
    if roll.all_white and isinstance(position, OnInner):
        return ALL_WHITE_INNER_STEPS
    return roll.step_count


def advance(board: MarbleBoard, position: TokenPosition, steps: int, has_captured: bool) -> TokenPosition:
    """Move a position forward ``steps`` cells along its current path.

    Steps are consumed one at a time. On the outer loop, a token that has
    captured switches to the inner loop the moment it lands on a junction
    and spends the rest of its steps there. On the inner loop, stepping past
    the last cell finishes the token and any remaining steps are dropped.

    Home and finished positions do not move.
    """
    if isinstance(position, (AtHome, Finished)):
        return position

    remaining = steps
    while remaining > 0:
        remaining -= 1
        if isinstance(position, OnOuter):
            index = (position.index + 1) % board.OUTER_LENGTH
            position = OnOuter(index)
            if has_captured and board.is_inner_junction(board.outer_coord(index)):
                position = OnInner(0)
        else:
            index = position.index + 1
            if index == board.INNER_LENGTH:
                return Finished()
            position = OnInner(index)
    return position


def legal_token_indices(player: MarblePlayer, roll: Roll) -> frozenset[int]:
    """Indices of the player's tokens that may move with ``roll``."""
    legal = set()
    for i, token in enumerate(player.tokens):
        if token.finished:
            continue
        if token.is_at_home and not roll.all_same:
            continue
        legal.add(i)
    return frozenset(legal)


def check_capture(
    board: MarbleBoard,
    players: list[MarblePlayer],
    moving_player: int,
    moved_token: MarbleToken,
) -> list[MarbleToken]:
    """Send home every opposing token sharing the moved token's cell.

    Only applies when the moved token ended on the outer loop on a normal
    cell; safe cells never capture. Teammates sharing the cell are left
    alone. Returns the captured tokens (empty when nothing was captured).
    """
    if not isinstance(moved_token.position, OnOuter):
        return []

    landing = board.outer_coord(moved_token.position.index)
    if board.is_safe(landing):
        return []

    captured = []
    for player in players:
        if player.n == moving_player:
            continue
        for token in player.tokens:
            if isinstance(token.position, OnOuter) and token.position.index == moved_token.position.index:
                token.send_home()
                captured.append(token)

    if captured:
        moved_token.has_captured = True
        logger.debug(
            "Player %d captured %d token(s) at %s", moving_player, len(captured), tuple(landing)
        )
    return captured


def check_win(player: MarblePlayer) -> bool:
    """True when every one of the player's tokens has finished."""
    return all(token.finished for token in player.tokens)
