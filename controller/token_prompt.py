"""Console token selection for hot-seat play."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from game.game_state import GameSnapshot


class ConsoleTokenPrompt:
    """Asks the current player which token to move.

    Tokens are numbered 1-4 on screen. Input is re-requested until it names
    a legal token. EOFError from the input function propagates so the CLI
    can exit cleanly.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ):
        self._input = input_fn
        self._output = output or sys.stdout

    def __call__(self, state: GameSnapshot, legal: frozenset) -> int:
        player = state.current()
        choices = sorted(legal)
        for i in choices:
            token = player.tokens[i]
            if token.is_at_home:
                where = "home"
            else:
                where = f"{token.mode.value} ({token.coord.x},{token.coord.y})"
            print(f"  [{i + 1}] token {i + 1}: {where}", file=self._output)

        labels = ",".join(str(i + 1) for i in choices)
        while True:
            answer = self._input(f"{player.name}, move which token? [{labels}] ").strip()
            try:
                token_index = int(answer) - 1
            except ValueError:
                print(f"Please enter one of {labels}", file=self._output)
                continue
            if token_index in legal:
                return token_index
            print(f"Token {answer} cannot move with this draw", file=self._output)
