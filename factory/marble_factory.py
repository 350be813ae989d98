"""Factory helpers for constructing marble draw game components."""

from __future__ import annotations

from typing import TextIO

from controller.marble_game_controller import MarbleGameController, TokenSelector
from controller.token_prompt import ConsoleTokenPrompt
from game.player_config import PlayerConfig
from renderer.text_renderer import TextRenderer
from shared.interfaces import IRenderer


class MarbleFactory:
    """Centralised factory for assembling MarbleGameController instances."""

    def __init__(self, text_stream: TextIO | None = None):
        self._text_stream = text_stream

    def create_controller(
        self,
        *,
        seed: int | None = None,
        player_configs: list[PlayerConfig] | None = None,
        log_to_file: str | None = None,
        log_to_screen: bool = False,
        max_games: int | None = 1,
        show_board: bool = True,
        auto_select: bool = True,
        token_selector: TokenSelector | None = None,
    ) -> MarbleGameController:
        """Create a fully-wired MarbleGameController with a text renderer."""

        def renderer_factory(controller: MarbleGameController) -> IRenderer:
            return TextRenderer(stream=self._text_stream, show_board=show_board)

        if token_selector is None:
            token_selector = ConsoleTokenPrompt(output=self._text_stream)

        return MarbleGameController(
            token_selector=token_selector,
            seed=seed,
            player_configs=player_configs,
            log_to_file=log_to_file,
            log_to_screen=log_to_screen,
            max_games=max_games,
            auto_select=auto_select,
            renderer_or_factory=renderer_factory,
        )
