import pytest

from gridsnake.config import UP, DOWN, LEFT, RIGHT
from gridsnake.snake import Snake, is_opposite


class TestDirections:
    """Pending vs committed direction handling."""

    @pytest.mark.parametrize("committed, reverse", [
        (RIGHT, LEFT), (LEFT, RIGHT), (UP, DOWN), (DOWN, UP),
    ])
    def test_reversal_is_ignored(self, committed, reverse):
        """Turning straight back is a silent no-op on every axis."""
        snake = Snake((2, 2), committed)
        assert snake.request_turn(reverse) is False
        assert snake.pending == committed

    @pytest.mark.parametrize("bad", [(0, 0), (1, 1), (2, 0), (-1, -1)])
    def test_non_unit_vectors_are_ignored(self, bad):
        snake = Snake((2, 2), RIGHT)
        assert snake.request_turn(bad) is False
        assert snake.pending == RIGHT

    @pytest.mark.parametrize("given, expected", [
        ((0.0, -1.0), UP), ((1.0, 0.0), RIGHT), ((True, 0), RIGHT),
    ])
    def test_accepted_turn_is_stored_as_int_tuple(self, given, expected):
        """Equal-comparing floats or bools never leak into the body cells."""
        snake = Snake((2, 2), LEFT if expected == UP else DOWN)
        assert snake.request_turn(given)
        assert snake.pending == expected
        assert all(type(c) is int for c in snake.pending)
        snake.commit()
        snake.advance(snake.next_head(), grow=False)
        assert all(type(c) is int for c in snake.head)

    def test_last_request_wins_until_commit(self):
        """Several requests between ticks: only the last valid one sticks."""
        snake = Snake((2, 2), RIGHT)
        assert snake.request_turn(UP)
        assert snake.request_turn(DOWN)
        assert snake.pending == DOWN
        assert snake.direction == RIGHT
        assert snake.commit() == DOWN
        assert snake.direction == DOWN

    def test_reversal_checked_against_committed_not_pending(self):
        """UP then LEFT while heading RIGHT: LEFT is a reversal of RIGHT."""
        snake = Snake((2, 2), RIGHT)
        snake.request_turn(UP)
        assert snake.request_turn(LEFT) is False
        assert snake.pending == UP

    def test_is_opposite(self):
        assert is_opposite(UP, DOWN)
        assert not is_opposite(UP, LEFT)
        assert not is_opposite(RIGHT, RIGHT)


class TestBody:
    """Head growth and tail pop."""

    def test_single_cell_start(self):
        snake = Snake((3, 4))
        assert list(snake) == [(3, 4)]
        assert snake.head == snake.tail == (3, 4)
        assert (3, 4) in snake

    def test_advance_without_growth_keeps_length(self):
        snake = Snake((2, 2), RIGHT)
        snake.advance(snake.next_head(), grow=False)
        assert list(snake) == [(3, 2)]
        assert (2, 2) not in snake

    def test_advance_with_growth_keeps_tail(self):
        snake = Snake((2, 2), RIGHT)
        snake.advance((3, 2), grow=True)
        assert list(snake) == [(3, 2), (2, 2)]
        assert len(snake) == 2
        assert snake.occupied == {(3, 2), (2, 2)}

    def test_next_head_is_unbounded(self):
        """The grid, not the snake, handles edges."""
        snake = Snake((0, 0), LEFT)
        snake.commit()
        assert snake.next_head() == (-1, 0)
