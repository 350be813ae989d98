"""Marble draw: the four-marble dice substitute.

Each draw pulls four marbles, each independently white with probability
one half. The white count decides how far the chosen token moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from game.constants import MARBLES_PER_DRAW, STEPS_BY_WHITE_COUNT, WHITE_PROBABILITY

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


@dataclass(frozen=True)
class Roll:
    """Result of one marble draw.

    Attributes:
        white_count: Number of white marbles drawn (0-4)
        step_count: Steps granted by the draw (before the inner-loop bonus)
        all_same: True when all four marbles matched (all white or all black)
    """

    white_count: int
    step_count: int
    all_same: bool

    @classmethod
    def from_white_count(cls, white_count: int) -> Roll:
        if white_count not in STEPS_BY_WHITE_COUNT:
            raise ValueError(
                f"Invalid white count: {white_count}. Must be between 0 and {MARBLES_PER_DRAW}"
            )
        return cls(
            white_count=white_count,
            step_count=STEPS_BY_WHITE_COUNT[white_count],
            all_same=white_count in (0, MARBLES_PER_DRAW),
        )

    @property
    def all_white(self) -> bool:
        return self.white_count == MARBLES_PER_DRAW

    def describe(self) -> str:
        return f"Whites: {self.white_count} - Steps: {self.step_count}"


class MarbleDraw:
    """Draws rolls from an injected random source."""

    def __init__(self, source: RandomSource | None = None):
        self.source = source if source is not None else np.random.default_rng()

    def draw(self) -> Roll:
        whites = 0
        for _ in range(MARBLES_PER_DRAW):
            if self.source.random() < WHITE_PROBABILITY:
                whites += 1
        roll = Roll.from_white_count(whites)
        logger.debug("Drew %s", roll)
        return roll
