"""Game controller for marble draw.

Drives the draw/select/move cycle for a front end, reports what happened
and keeps the transcript in sync with the engine.
"""

from __future__ import annotations

from typing import Callable, Iterable

from controller.game_logger import GameLogger
from controller.game_session import GameSession
from game.action_result import MoveError
from game.formatters import TranscriptFormatter
from game.game_state import GameSnapshot
from game.player_config import PlayerConfig
from shared.interfaces import IRenderer, IRendererFactory

TokenSelector = Callable[[GameSnapshot, frozenset], int]


class MarbleGameController:
    def __init__(
        self,
        token_selector: TokenSelector,
        seed=None,
        player_configs: list[PlayerConfig] | None = None,
        log_to_file: str | None = None,
        log_to_screen=False,
        max_games=1,
        auto_select=True,
        renderer_or_factory: IRenderer | IRendererFactory | None = None,
        status_reporter: Callable[[str], None] | None = None,
    ):
        """Create a controller.

        Args:
            token_selector: Called with (snapshot, legal token indices) when the
                current player has to choose a token; returns a token index
            seed: Session seed (auto-generated if None)
            player_configs: One PlayerConfig per seat
            log_to_file: Directory for transcript files (None to disable)
            log_to_screen: Echo the transcript to stdout
            max_games: Number of games to play (None = play indefinitely)
            auto_select: Move the only legal token without asking
            renderer_or_factory: Renderer, factory producing one, or None
            status_reporter: Override for status output (default: renderer, then print)
        """
        self.token_selector = token_selector
        self.max_games = max_games
        self.auto_select = auto_select
        self.formatter = TranscriptFormatter()
        self.win_stats: dict[int, int] = {}
        self._status_override = status_reporter

        self.renderer = None
        self.session = GameSession(
            seed=seed,
            player_configs=player_configs,
            status_reporter=self._report,
        )
        self.logger = GameLogger(
            session=self.session,
            transcript_dir=log_to_file,
            log_to_screen=log_to_screen,
            status_reporter=self._report,
        )

        if isinstance(renderer_or_factory, IRenderer):
            self.renderer = renderer_or_factory
        elif isinstance(renderer_or_factory, IRendererFactory):
            self.renderer = renderer_or_factory(self)
        elif renderer_or_factory is None:
            pass
        else:
            raise TypeError(
                "renderer_or_factory must be an IRenderer, IRendererFactory, or None"
            )

        for filename in self.logger.get_log_filenames():
            self._report(f"Logging to: {filename}")

        self.logger.start_log(self.session.get_seed())

    @property
    def game(self):
        return self.session.game

    def run(self):
        """Play games until ``max_games`` have finished."""
        self._render()
        while True:
            while not self.play_turn():
                pass
            if self._finish_game():
                return

    def play_turn(self) -> bool:
        """Play one draw for the current player.

        Returns:
            bool: True once the game is over
        """
        game = self.game
        if game.game_over:
            return True

        player = self.session.get_current_player()
        player_num = player.n + 1
        roll = game.draw()
        if roll is None:
            raise RuntimeError(
                f"{player.name} cannot draw: a roll is pending or a move is in progress"
            )

        self.logger.log_action(player_num, self.formatter.roll_to_action_dict(roll))
        self._report(f"{player.name} drew {roll.describe()}")

        legal = game.legal_token_indices()
        if not legal:
            self._report(f"{player.name} has no valid moves")
            game.skip_turn()
            self.logger.log_action(player_num, self.formatter.pass_action_dict())
            return False

        while True:
            if self.auto_select and len(legal) == 1:
                token_index = next(iter(legal))
            else:
                token_index = self.token_selector(game.get_state(), legal)

            result = game.move(token_index)
            if result.is_error():
                self._report(result.message)
                if result.error == MoveError.INVALID_TOKEN:
                    continue
                raise RuntimeError(f"Move refused: {result.message}")
            if not result.moved:
                self._report(result.message)
                self.logger.log_action(player_num, result.to_dict())
                continue
            break

        self.logger.log_action(player_num, result.to_dict())
        self._report_move(player, result)

        # Hold the lock while the board is shown, as an animating front end would
        with game.moving():
            self._render()
        return game.game_over

    def _report_move(self, player, result):
        self._report(f"{player.name} moved token {result.token_index + 1}")
        for owner, token in result.captured:
            victim = self.game.players[owner].name
            self._report(f"Captured {victim}'s token {token + 1}!")
        if result.finished:
            self._report(f"{player.name}'s token {result.token_index + 1} finished")
        if result.just_won:
            self._report(f"{player.name} WINS!")
        elif result.grant_extra_turn:
            self._report(f"{player.name} draws again")

    def _finish_game(self) -> bool:
        """Record the finished game and start the next one.

        Returns:
            bool: True when no more games should be played
        """
        game = self.game
        if game.winner is not None:
            self.win_stats[game.winner] = self.win_stats.get(game.winner, 0) + 1
        self.logger.end_log(game)
        self.session.increment_games_played()

        if self.max_games is not None and self.session.get_games_played() >= self.max_games:
            return True

        self.session.reset_game()
        if self.renderer is not None:
            self.renderer.reset_board()
        self.logger.start_log(self.session.get_seed())
        self._render()
        return False

    def abandon(self):
        """Close the current transcript for a game stopped before anyone won."""
        self.logger.log_comment("Game abandoned")
        self.logger.end_log(self.game)

    def _render(self):
        if self.renderer is not None:
            self.renderer.render_state(self.game.get_state())

    def statistics_lines(self) -> Iterable[str]:
        played = self.session.get_games_played()
        yield f"Games played: {played}"
        for player in self.game.players:
            wins = self.win_stats.get(player.n, 0)
            yield f"{player.name}: {wins} win(s)"

    def print_statistics(self):
        for line in self.statistics_lines():
            self._report(line)

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_override is not None:
            self._status_override(message)
        elif self.renderer is not None:
            self.renderer.report_status(message)
        else:
            print(message)
