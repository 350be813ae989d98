"""Transcript logging for marble draw sessions."""

import os
import sys
from typing import Callable

from game.writers import GameWriter, TranscriptWriter


class GameLogger:
    """Fans game events out to the session's transcript writers.

    The stdout writer lives for the whole session. A file writer is opened
    per game as ``marblelog_<seed>.txt`` and closed by ``end_log``.
    """

    def __init__(
        self,
        session,
        transcript_dir: str | None = None,
        log_to_screen: bool = False,
        status_reporter: Callable[[str], None] | None = None,
    ):
        """Initialize the game logger.

        Args:
            session: GameSession providing the seed and player names
            transcript_dir: Directory for transcript files (None to disable)
            log_to_screen: Echo the transcript to stdout
            status_reporter: Callback for "Logging to" messages (default: print)
        """
        self.session = session
        self._transcript_dir = transcript_dir
        self._status_reporter = status_reporter
        self._log_filenames: list[str] = []

        self._screen_writer: GameWriter | None = (
            TranscriptWriter(sys.stdout) if log_to_screen else None
        )
        self._file_writer: GameWriter | None = self._open_file_writer()
        self._needs_new_file = False

    @property
    def writers(self) -> list[GameWriter]:
        return [w for w in (self._screen_writer, self._file_writer) if w is not None]

    def _open_file_writer(self) -> GameWriter | None:
        """Open the transcript file for the session's current seed.

        Failures are printed to stderr and disable file logging for this game.
        """
        if not self._transcript_dir:
            return None

        filepath = os.path.join(
            self._transcript_dir, f"marblelog_{self.session.get_seed()}.txt"
        )
        try:
            os.makedirs(self._transcript_dir, exist_ok=True)
            output = open(filepath, "w")
        except OSError as e:
            print(f"Error: Cannot create transcript file: {e}", file=sys.stderr)
            print(f"Attempted path: {self._transcript_dir}", file=sys.stderr)
            print("Transcript logging to file disabled for this session", file=sys.stderr)
            return None

        self._log_filenames.append(filepath)
        return TranscriptWriter(output)

    def get_log_filenames(self) -> list[str]:
        return self._log_filenames.copy()

    def start_log(self, seed: int | None) -> None:
        """Write the header for a new game, reopening the file writer if needed."""
        if self._needs_new_file:
            self._file_writer = self._open_file_writer()
            if self._file_writer is not None:
                self._report(f"Logging to: {self._log_filenames[-1]}")
            self._needs_new_file = False

        player_names = [config.name for config in self.session.player_configs]
        for writer in self.writers:
            writer.write_header(seed, player_names)

    def end_log(self, game=None) -> None:
        """Write footers and close the game's transcript file.

        Args:
            game: Optional MarbleGame whose final tokens go in the footer
        """
        for writer in self.writers:
            writer.write_footer(game)

        if self._file_writer is not None:
            self._file_writer.close()
            self._file_writer = None
        self._needs_new_file = True

    def log_action(self, player_num: int, action_dict: dict) -> None:
        """Log an event dict for player ``player_num`` (1-4)."""
        for writer in self.writers:
            writer.write_action(player_num, action_dict)

    def log_comment(self, message: str) -> None:
        for writer in self.writers:
            writer.write_comment(message)

    def _report(self, message: str) -> None:
        if self._status_reporter is not None:
            self._status_reporter(message)
        else:
            print(message)
