"""Unit tests for the movement resolver.

Outer path reference (index: cell):
    0:(0,1) 1:(0,2)* 2:(0,3) 3:(0,4) 4:(1,4) 5:(2,4)J 6:(3,4) 7:(4,4)
    8:(4,3) 9:(4,2)* 10:(4,1) 11:(4,0) 12:(3,0) 13:(2,0)J 14:(1,0) 15:(0,0)
    (* safe, J safe inner-loop junction)
"""

import pytest

from game.marble_board import MarbleBoard
from game.marble_draw import Roll
from game.marble_logic import advance, position_coord, resolve_step_count
from game.marble_token import AtHome, Finished, OnInner, OnOuter


@pytest.fixture
def board():
    return MarbleBoard()


class TestOuterLoop:
    """Tests for movement on the outer loop."""

    def test_simple_advance(self, board):
        """Test a plain advance."""
        assert advance(board, OnOuter(0), 3, False) == OnOuter(3)

    def test_wraps_modulo_path_length(self, board):
        """Test wrapping past the end of the outer path."""
        assert advance(board, OnOuter(14), 4, False) == OnOuter(2)
        assert advance(board, OnOuter(15), 1, False) == OnOuter(0)

    def test_zero_steps_is_noop(self, board):
        """Test that zero steps leaves the token in place."""
        assert advance(board, OnOuter(6), 0, False) == OnOuter(6)

    @pytest.mark.parametrize("start", range(16))
    @pytest.mark.parametrize("steps", [1, 2, 4, 8])
    def test_index_stays_in_bounds(self, board, start, steps):
        """Test that the outer index stays in range."""
        result = advance(board, OnOuter(start), steps, False)
        assert isinstance(result, OnOuter)
        assert 0 <= result.index < 16
        assert result.index == (start + steps) % 16


class TestJunctionBranching:
    """Tests for turning into the inner loop."""

    def test_without_capture_token_stays_on_outer_at_junction(self, board):
        """Test that a token without a capture stays outer at a junction."""
        # Lands exactly on the (2,4) junction
        assert advance(board, OnOuter(3), 2, False) == OnOuter(5)

    def test_without_capture_token_passes_junction(self, board):
        """Test that a token without a capture passes a junction."""
        assert advance(board, OnOuter(3), 4, False) == OnOuter(7)
        assert advance(board, OnOuter(11), 4, False) == OnOuter(15)

    def test_with_capture_token_switches_to_inner(self, board):
        """Test that a token with a capture turns inward at a junction."""
        assert advance(board, OnOuter(3), 2, True) == OnInner(0)

    def test_leftover_steps_continue_on_inner(self, board):
        """Test that leftover steps carry on along the inner loop."""
        # Two steps to the junction, two more on the inner loop
        assert advance(board, OnOuter(3), 4, True) == OnInner(2)

    def test_top_junction(self, board):
        """Test the junction on the top row."""
        assert advance(board, OnOuter(12), 1, True) == OnInner(0)
        assert advance(board, OnOuter(10), 4, True) == OnInner(1)

    def test_enter_and_finish_in_one_move(self, board):
        """Test entering and finishing the inner loop in one move."""
        # One step to the junction, then four inner steps reach the finish
        assert advance(board, OnOuter(4), 8, True) == Finished()

    def test_start_on_junction_does_not_branch(self, board):
        """Test that starting on a junction does not branch."""
        # Branching only happens when stepping onto the junction
        assert advance(board, OnOuter(5), 1, True) == OnOuter(6)


class TestInnerLoop:
    """Tests for movement on the inner loop."""

    def test_advance_on_inner(self, board):
        """Test a plain inner advance."""
        assert advance(board, OnInner(0), 3, False) == OnInner(3)

    def test_last_step_finishes(self, board):
        """Test that stepping past the last inner cell finishes."""
        assert advance(board, OnInner(3), 1, True) == Finished()

    def test_extra_steps_discarded_on_finish(self, board):
        """Test that steps beyond the finish are discarded."""
        assert advance(board, OnInner(3), 5, True) == Finished()
        assert advance(board, OnInner(1), 9, True) == Finished()

    def test_inner_index_never_exceeds_path(self, board):
        """Test that the inner index stays in range."""
        for start in range(4):
            for steps in range(1, 10):
                result = advance(board, OnInner(start), steps, True)
                if isinstance(result, OnInner):
                    assert 0 <= result.index < 4
                else:
                    assert result == Finished()


class TestStaticPositions:
    """Tests for positions that do not move."""

    def test_home_does_not_move(self, board):
        """Test that advance leaves a home token alone."""
        assert advance(board, AtHome(), 4, True) == AtHome()

    def test_finished_does_not_move(self, board):
        """Test that advance leaves a finished token alone."""
        assert advance(board, Finished(), 4, True) == Finished()


class TestStepResolution:
    """Tests for resolve_step_count."""

    def test_all_white_on_inner_is_nine(self):
        """Test that all white on the inner loop moves nine."""
        assert resolve_step_count(Roll.from_white_count(4), OnInner(1)) == 9

    def test_all_white_on_outer_is_eight(self):
        """Test that all white on the outer loop moves eight."""
        assert resolve_step_count(Roll.from_white_count(4), OnOuter(4)) == 8

    def test_all_black_on_inner_is_four(self):
        """Test that all black on the inner loop moves four."""
        assert resolve_step_count(Roll.from_white_count(0), OnInner(0)) == 4

    def test_partial_roll_on_inner(self):
        """Test that mixed rolls keep their steps on the inner loop."""
        assert resolve_step_count(Roll.from_white_count(3), OnInner(2)) == 2


class TestPositionCoord:
    """Tests for position_coord."""

    def test_home_sits_on_start_cell(self, board):
        """Test that a home token reports its start cell."""
        assert position_coord(board, AtHome(), 9) == (4, 2)

    def test_outer_and_inner_coords(self, board):
        """Test outer and inner coordinates."""
        assert position_coord(board, OnOuter(0), 5) == (0, 1)
        assert position_coord(board, OnInner(1), 5) == (3, 2)

    def test_finished_has_no_coord(self, board):
        """Test that finished tokens have no coordinate."""
        assert position_coord(board, Finished(), 5) is None
