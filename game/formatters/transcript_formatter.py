"""Transcript event formatter for marble draw.

Events are logged as dict literals, e.g.
"{'action': 'DRAW', 'whites': 4, 'steps': 8}".
"""


class TranscriptFormatter:
    """Builds transcript event dicts and their one-line text form."""

    @staticmethod
    def roll_to_action_dict(roll) -> dict:
        """Build the event dict for a marble draw.

        Args:
            roll: Roll produced by the draw

        Returns:
            dict: {'action': 'DRAW', 'whites': int, 'steps': int}
        """
        return {"action": "DRAW", "whites": roll.white_count, "steps": roll.step_count}

    @staticmethod
    def pass_action_dict() -> dict:
        return {"action": "PASS"}

    @staticmethod
    def action_to_transcript(action_dict: dict) -> str:
        return str(action_dict)
