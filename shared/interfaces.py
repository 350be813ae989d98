"""Shared protocol definitions."""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

from game.game_state import GameSnapshot

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from controller.marble_game_controller import MarbleGameController


@runtime_checkable
class IRenderer(Protocol):
    """Protocol describing renderer capabilities required by the controller."""

    def reset_board(self) -> None: ...

    def render_state(self, state: GameSnapshot) -> None: ...

    def report_status(self, message: str) -> None: ...


@runtime_checkable
class IRendererFactory(Protocol):
    """Protocol for factories that produce renderers for a controller."""

    def __call__(self, controller: MarbleGameController) -> IRenderer: ...
