"""Game event writers for marble draw.

Provides pluggable writer classes that combine a formatter with an output
stream to log game events.
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from game.formatters import TranscriptFormatter


class GameWriter(ABC):
    """Abstract base class for game event writers.

    A GameWriter combines a formatter with an output stream to write game
    events in a specific format. Subclasses implement format-specific
    headers and event formatting.
    """

    def __init__(self, output: TextIO):
        """Initialize the writer.

        Args:
            output: Output stream to write to (file, stdout, etc.)
        """
        self.output = output
        self._game_started = False

    @abstractmethod
    def write_header(self, seed: int | None, player_names: list[str] | None = None) -> None:
        """Write header with game metadata.

        Args:
            seed: Random seed for this game
            player_names: Optional display names, one per seat
        """
        pass

    @abstractmethod
    def write_action(self, player_num: int, action_dict: dict) -> None:
        """Write a game event.

        Args:
            player_num: Player number (1-4)
            action_dict: Event dictionary
        """
        pass

    def write_comment(self, message: str) -> None:
        """Write a status/comment message (ignored by default)."""
        pass

    def write_footer(self, game=None) -> None:
        """Write footer with final game state (optional).

        Args:
            game: Optional MarbleGame instance for final state
        """
        pass

    def flush(self) -> None:
        self.output.flush()

    def close(self) -> None:
        """Close the output stream (but never close stdout/stderr)."""
        if self.output in (sys.stdout, sys.stderr):
            return
        if hasattr(self.output, "close"):
            self.output.close()


class TranscriptWriter(GameWriter):
    """Writes game events in transcript file format.

    File format:
        # Seed: 12345
        # Player 1: Ann
        # Player 2: Bo
        #
        Player 1: {'action': 'DRAW', 'whites': 4, 'steps': 8}
        Player 1: {'action': 'MOVE', 'token': 0, 'steps': 8, 'enter': True, 'extra': True}
        Player 1: {'action': 'DRAW', 'whites': 1, 'steps': 1}
        Player 1: {'action': 'PASS'}
        #
        # Final game state:
        # Player 1 tokens: finished finished finished finished
        # ...
    """

    def __init__(self, output: TextIO):
        super().__init__(output)
        self.formatter = TranscriptFormatter()

    def write_header(self, seed: int | None, player_names: list[str] | None = None) -> None:
        self.output.write(f"# Seed: {seed}\n")
        for i, name in enumerate(player_names or []):
            if name:
                self.output.write(f"# Player {i + 1}: {name}\n")
        self.output.write("#\n")
        self._game_started = True
        self.flush()

    def write_action(self, player_num: int, action_dict: dict) -> None:
        """Write one event as "Player {player_num}: {action_dict}"."""
        transcript_str = self.formatter.action_to_transcript(action_dict)
        self.output.write(f"Player {player_num}: {transcript_str}\n")
        self.flush()

    def write_comment(self, message: str) -> None:
        self.output.write(f"# {message}\n")
        self.flush()

    def write_footer(self, game=None) -> None:
        """Write final token positions for every player.

        Args:
            game: MarbleGame instance to get final state from
        """
        if game is None:
            return

        state = game.get_state()
        self.output.write("#\n")
        self.output.write("# Final game state:\n")
        self.output.write("# ---------------\n")
        for player in state.players:
            cells = []
            for token in player.tokens:
                if token.coord is None:
                    cells.append(token.mode.value)
                else:
                    cells.append(f"{token.mode.value}({token.coord.x},{token.coord.y})")
            self.output.write(f"# Player {player.n + 1} tokens: {' '.join(cells)}\n")
        self.output.write("# ---------------\n")
        if state.winner is not None:
            self.output.write(f"# Winner: Player {state.winner + 1}\n")
        self.flush()
