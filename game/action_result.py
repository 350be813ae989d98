"""Result value objects for game actions.

Every outcome of ``MarbleGame.move`` is returned as one of these objects,
never raised. Callers branch on ``is_error()`` and ``moved``:

- ErrorResult: the call was not allowed at all (game over, lock held,
  no roll, bad token index)
- RejectedMove: an expected rejection during normal play (home token
  without an all-same roll, finished token)
- MoveResult: the token moved
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class MoveError(str, Enum):
    GAME_ALREADY_OVER = "Game already over"
    MOVE_IN_PROGRESS = "Wait for current move to finish"
    NO_PENDING_ROLL = "No roll yet"
    INVALID_TOKEN = "No such token"


class RejectionReason(str, Enum):
    ILLEGAL_HOME_DEPARTURE = "Token at home needs all 4 same color to enter"
    TOKEN_FINISHED = "Token has already finished"


class ActionResult(ABC):
    """Common interface for move outcomes."""

    moved = False
    error: MoveError | None = None

    def is_error(self):
        """Check if the action was refused as API misuse.

        Returns:
            bool: True for ErrorResult
        """
        return self.error is not None

    @property
    @abstractmethod
    def message(self) -> str:
        """Human readable description of the outcome."""

    @abstractmethod
    def to_dict(self) -> dict:
        """Transcript/event form of the outcome."""


class ErrorResult(ActionResult):
    """A move or skip that was refused before touching any state.

    Attributes:
        error: The MoveError category
    """

    def __init__(self, error: MoveError):
        self.error = error

    def __repr__(self):
        return f"ErrorResult(error={self.error.name})"

    def __eq__(self, other):
        return isinstance(other, ErrorResult) and other.error == self.error

    def __hash__(self):
        return hash(self.error)

    @property
    def message(self):
        return self.error.value

    def to_dict(self):
        return {"error": self.error.name, "message": self.message}


class RejectedMove(ActionResult):
    """A token selection the rules do not allow with the pending roll.

    The roll stays pending and the same player may select another token.

    Attributes:
        token_index: Index of the selected token
        reason: Why the selection was rejected
    """

    grant_extra_turn = False

    def __init__(self, token_index: int, reason: RejectionReason):
        self.token_index = token_index
        self.reason = reason

    def __repr__(self):
        return f"RejectedMove(token={self.token_index}, reason={self.reason.name})"

    @property
    def message(self):
        return self.reason.value

    def to_dict(self):
        return {
            "action": "REJECT",
            "token": self.token_index,
            "reason": self.reason.name,
        }


class MoveResult(ActionResult):
    """A resolved move.

    Attributes:
        token_index: Index of the moved token within its player's set
        steps: Steps consumed (after the all-white inner loop bonus)
        left_home: True if the token entered the board this move
        captured: Opposing tokens sent home, as (player, token) pairs
        finished: True if the token finished this move
        just_won: True if this move finished the player's last token
        grant_extra_turn: True if the same player draws again
    """

    moved = True

    def __init__(
        self,
        token_index: int,
        steps: int,
        left_home: bool = False,
        captured=None,
        finished: bool = False,
        just_won: bool = False,
        grant_extra_turn: bool = False,
    ):
        self.token_index = token_index
        self.steps = steps
        self.left_home = left_home
        self.captured = list(captured) if captured is not None else []
        self.finished = finished
        self.just_won = just_won
        self.grant_extra_turn = grant_extra_turn

    def __repr__(self):
        return (
            f"MoveResult(token={self.token_index}, steps={self.steps}, "
            f"captured={self.captured}, won={self.just_won}, extra={self.grant_extra_turn})"
        )

    @property
    def captured_any(self):
        return len(self.captured) > 0

    @property
    def message(self):
        return "Moved"

    def to_dict(self):
        action = {
            "action": "MOVE",
            "token": self.token_index,
            "steps": self.steps,
        }
        if self.left_home:
            action["enter"] = True
        if self.captured:
            action["captured"] = [list(c) for c in self.captured]
        if self.finished:
            action["finished"] = True
        if self.grant_extra_turn:
            action["extra"] = True
        return action
