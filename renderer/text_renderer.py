"""Text-based renderer for terminal play."""

from __future__ import annotations

import sys
from typing import TextIO

from game.game_state import GameSnapshot
from game.marble_board import CellType, MarbleBoard

# Empty-cell glyphs
CELL_GLYPHS = {
    CellType.NORMAL: ".",
    CellType.SAFE: "*",
    CellType.CENTER: "#",
}
INNER_GLYPH = "o"
CELL_WIDTH = 6


class TextRenderer:
    """Prints status lines and an ASCII board to a stream.

    Each cell shows one digit per token standing on it (the owning player's
    number), so "113" is two tokens of player 1 and one of player 3. Tokens
    waiting at home are listed under the board rather than on their start
    cells.
    """

    def __init__(self, stream: TextIO | None = None, show_board: bool = True):
        self._stream: TextIO = stream or sys.stdout
        self.show_board = show_board
        self._board = MarbleBoard()

    def reset_board(self) -> None:
        self.report_status("Board reset.")

    def report_status(self, message: str) -> None:
        if message is None:
            return
        print(message, file=self._stream)

    def render_state(self, state: GameSnapshot) -> None:
        if not self.show_board:
            return
        for line in self.board_lines(state):
            print(line, file=self._stream)

    def board_lines(self, state: GameSnapshot) -> list[str]:
        occupants: dict[tuple[int, int], str] = {}
        for player in state.players:
            for token in player.tokens:
                if token.is_at_home or token.coord is None:
                    continue
                key = (token.coord.x, token.coord.y)
                occupants[key] = occupants.get(key, "") + str(player.n + 1)

        inner = set(self._board.inner_path)
        lines = []
        for y in range(self._board.width):
            row = []
            for x in range(self._board.width):
                label = occupants.get((x, y))
                if label is None:
                    if (x, y) in inner:
                        label = INNER_GLYPH
                    else:
                        label = CELL_GLYPHS[self._board.cell_at((x, y))]
                row.append(label.center(CELL_WIDTH))
            lines.append("".join(row).rstrip())

        summary = []
        for player in state.players:
            home = sum(1 for t in player.tokens if t.is_at_home)
            summary.append(f"P{player.n + 1} home:{home} done:{player.finished_count()}")
        lines.append("  ".join(summary))
        return lines
