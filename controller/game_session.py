"""Game session management for marble draw.

Manages a single game's lifecycle including the rules engine, seat
configuration and seed management.
"""

import hashlib
import time
from typing import Callable

import numpy as np

from game.constants import NUM_PLAYERS
from game.marble_game import MarbleGame
from game.player_config import PlayerConfig


class GameSession:
    """Manages a single game's lifecycle (engine, seats, seed)."""

    def __init__(
        self,
        seed=None,
        player_configs: list[PlayerConfig] | None = None,
        status_reporter: Callable[[str], None] | None = None,
    ):
        """Initialize a game session.

        Args:
            seed: Random seed for reproducibility (auto-generated if None)
            player_configs: One PlayerConfig per seat (default names if None)
            status_reporter: Callback for status messages (default: print)
        """
        self._status_reporter: Callable[[str], None] | None = status_reporter

        if player_configs is None:
            player_configs = [PlayerConfig.default(seat) for seat in range(NUM_PLAYERS)]
        if len(player_configs) != NUM_PLAYERS:
            raise ValueError(
                f"Expected {NUM_PLAYERS} player configs, got {len(player_configs)}"
            )
        self.player_configs = list(player_configs)

        if seed is None:
            seed = int(time.time())
        self.current_seed = seed
        self.rng = None

        self.game = None
        self.games_played = 0

        self.reset_game()

    def _apply_seed(self, seed):
        """Create the marble draw generator for a seed."""
        self._report(f"-- Setting Seed: {seed}")
        self.rng = np.random.default_rng(seed)

    def _generate_next_seed(self):
        """Generate the next seed deterministically from the current seed using hash.

        Returns:
            int: New seed value
        """
        hash_obj = hashlib.sha256(str(self.current_seed).encode())
        new_seed = int.from_bytes(hash_obj.digest()[:8], byteorder="big")
        return new_seed % (2**32)

    def reset_game(self):
        """Start a fresh game.

        Every game after the first one gets a new seed derived from the
        previous one, so a whole session replays from its first seed.
        """
        self._report("** New game **")

        if self.game is not None:
            self.current_seed = self._generate_next_seed()
        self._apply_seed(self.current_seed)

        names = [config.name for config in self.player_configs]
        self.game = MarbleGame(source=self.rng, player_names=names)

    def get_current_player(self):
        """Get the player whose turn it is.

        Returns:
            MarblePlayer: Current player
        """
        return self.game.players[self.game.current_player]

    def increment_games_played(self):
        self.games_played += 1

    def get_seed(self):
        return self.current_seed

    def get_games_played(self):
        return self.games_played

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_reporter is not None:
            self._status_reporter(message)
        else:
            print(message)
