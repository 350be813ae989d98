"""Controller module for marble draw.

Contains the game controller, session and transcript logger.
"""

from controller.marble_game_controller import MarbleGameController

__all__ = ["MarbleGameController"]
