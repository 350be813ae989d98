"""
Unit tests for GameLogger and the transcript writer.
"""

import os
import tempfile
from io import StringIO
from unittest.mock import Mock

import pytest

from controller.game_logger import GameLogger
from game.marble_token import Finished, OnOuter
from game.player_config import PlayerConfig
from game.writers import TranscriptWriter


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def mock_session():
    session = Mock()
    session.get_seed.return_value = 12345
    session.player_configs = [PlayerConfig(name=n) for n in ("Ann", "Bo", "Cy", "Di")]
    return session


# ============================================================================
# TranscriptWriter
# ============================================================================


class TestTranscriptWriter:
    """Tests for TranscriptWriter."""

    def test_header(self):
        """Test the seed and player name header."""
        output = StringIO()
        TranscriptWriter(output).write_header(42, ["Ann", "Bo", None, "Di"])
        assert output.getvalue() == (
            "# Seed: 42\n# Player 1: Ann\n# Player 2: Bo\n# Player 4: Di\n#\n"
        )

    def test_action_line(self):
        """Test the one-line event format."""
        output = StringIO()
        writer = TranscriptWriter(output)
        action = {"action": "MOVE", "token": 0, "steps": 8, "enter": True}

        writer.write_action(1, action)

        assert output.getvalue() == (
            "Player 1: {'action': 'MOVE', 'token': 0, 'steps': 8, 'enter': True}\n"
        )

    def test_comment(self):
        """Test comment lines."""
        output = StringIO()
        TranscriptWriter(output).write_comment("hello")
        assert output.getvalue() == "# hello\n"

    def test_footer_lists_tokens_and_winner(self, game):
        """Test that the footer lists final tokens and the winner."""
        for token in game.players[0].tokens:
            token.position = Finished()
        game.players[1].tokens[0].position = OnOuter(0)
        game.winner = 0
        output = StringIO()

        TranscriptWriter(output).write_footer(game)

        text = output.getvalue()
        assert "# Player 1 tokens: finished finished finished finished" in text
        assert "# Player 2 tokens: outer(0,1) home(4,2) home(4,2) home(4,2)" in text
        assert "# Winner: Player 1" in text

    def test_footer_without_game_is_empty(self):
        """Test that the footer is empty without a game."""
        output = StringIO()
        TranscriptWriter(output).write_footer(None)
        assert output.getvalue() == ""

    def test_close_never_closes_stdout(self):
        """Test that closing a stdout writer leaves stdout open."""
        import sys

        TranscriptWriter(sys.stdout).close()
        assert not sys.stdout.closed


# ============================================================================
# GameLogger
# ============================================================================


def test_logger_with_no_writers(mock_session):
    """Test that logging without writers is a no-op."""
    logger = GameLogger(session=mock_session)
    logger.start_log(seed=12345)
    logger.log_action(1, {"action": "DRAW", "whites": 2, "steps": 2})
    logger.end_log()
    assert logger.writers == []


def test_screen_writer_gets_events_and_comments(mock_session, capsys):
    """Test that the screen writer receives events and comments."""
    logger = GameLogger(session=mock_session, log_to_screen=True)

    logger.start_log(seed=12345)
    logger.log_action(2, {"action": "PASS"})
    logger.log_comment("Game abandoned")

    out = capsys.readouterr().out
    assert out.startswith("# Seed: 12345\n# Player 1: Ann\n")
    assert "Player 2: {'action': 'PASS'}\n" in out
    assert "# Game abandoned\n" in out


def test_file_writer_closed_after_end_log(temp_dir, mock_session):
    """Test that end_log closes the transcript file."""
    logger = GameLogger(session=mock_session, transcript_dir=temp_dir)
    file_writer = logger.writers[0]

    logger.start_log(seed=12345)
    logger.end_log()

    assert file_writer.output.closed
    assert logger.writers == []


def test_file_writer_created_in_directory(temp_dir, mock_session):
    """Test that the transcript file is named after the seed."""
    logger = GameLogger(session=mock_session, transcript_dir=temp_dir)

    expected = os.path.join(temp_dir, "marblelog_12345.txt")
    assert logger.get_log_filenames() == [expected]

    logger.start_log(seed=12345)
    logger.log_action(1, {"action": "DRAW", "whites": 0, "steps": 4})
    logger.end_log()

    with open(expected) as f:
        content = f.read()
    assert "# Seed: 12345" in content
    assert "Player 1: {'action': 'DRAW', 'whites': 0, 'steps': 4}" in content


def test_new_game_gets_new_file(temp_dir, mock_session):
    """Test that each game gets its own transcript file."""
    messages = []
    logger = GameLogger(session=mock_session, transcript_dir=temp_dir, status_reporter=messages.append)
    logger.start_log(seed=12345)
    logger.end_log()

    mock_session.get_seed.return_value = 777
    logger.start_log(seed=777)
    logger.end_log()

    assert os.path.exists(os.path.join(temp_dir, "marblelog_12345.txt"))
    assert os.path.exists(os.path.join(temp_dir, "marblelog_777.txt"))
    assert f"Logging to: {os.path.join(temp_dir, 'marblelog_777.txt')}" in messages


def test_screen_writer_persists_across_games(mock_session, capsys):
    """Test that the screen writer is reused across games."""
    logger = GameLogger(session=mock_session, log_to_screen=True)
    logger.start_log(seed=1)
    logger.end_log()
    logger.start_log(seed=2)
    logger.log_action(3, {"action": "PASS"})

    out = capsys.readouterr().out
    assert "# Seed: 1" in out
    assert "# Seed: 2" in out
    assert "Player 3: {'action': 'PASS'}" in out
    assert len(logger.writers) == 1


def test_unwritable_directory_disables_file_logging(temp_dir, mock_session, capsys):
    """Test that an unusable directory disables file logging."""
    blocker = os.path.join(temp_dir, "not_a_dir")
    with open(blocker, "w") as f:
        f.write("x")

    logger = GameLogger(session=mock_session, transcript_dir=blocker)

    assert logger.writers == []
    assert logger.get_log_filenames() == []
    assert "logging to file disabled" in capsys.readouterr().err
