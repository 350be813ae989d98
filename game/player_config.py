"""Player configuration for marble draw."""

from __future__ import annotations

from dataclasses import dataclass

from game.constants import NUM_PLAYERS


@dataclass
class PlayerConfig:
    """Configuration for a single seat.

    Attributes:
        name: Display name (None = "Player N")
    """

    name: str | None = None

    @classmethod
    def default(cls, seat: int) -> PlayerConfig:
        """Create the default configuration for a seat (0-based)."""
        return cls(name=f"Player {seat + 1}")


def parse_player_names(names_arg: str | None) -> list[PlayerConfig]:
    """Parse a comma-separated list of player names into seat configurations.

    Empty entries and missing trailing seats keep their default names.

    Examples:
        "Ann,Bo,Cy,Di" -> four named seats
        "Ann,,Cy" -> Ann, Player 2, Cy, Player 4
        None -> Player 1 .. Player 4
    """
    configs = [PlayerConfig.default(seat) for seat in range(NUM_PLAYERS)]
    if not names_arg:
        return configs

    names = [name.strip() for name in names_arg.split(",")]
    if len(names) > NUM_PLAYERS:
        raise ValueError(
            f"Too many player names: {len(names)}. The game seats {NUM_PLAYERS} players"
        )

    for seat, name in enumerate(names):
        if name:
            configs[seat].name = name
    return configs
