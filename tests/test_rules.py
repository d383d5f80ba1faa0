import random

import pytest

from canvas_snake.collision import (
    Collision,
    evaluate,
    is_food_eaten,
    is_self_collision,
    is_wall_collision,
)
from canvas_snake.config import Config, Grid, Heading
from canvas_snake.food import BoardFullError, place
from canvas_snake.snake import Snake, is_opposite


# ---------- Grid / config ----------
def test_grid_defaults():
    grid = Grid()
    assert grid.dimension == 20
    assert grid.cell_size == 20
    assert grid.center == (10, 10)
    assert grid.pixel_size == 400
    assert grid.capacity == 400
    assert grid.contains((0, 19))
    assert not grid.contains((20, 0))
    assert not grid.contains((0, -1))


def test_grid_rejects_bad_sizes():
    with pytest.raises(ValueError):
        Grid(dimension=1)
    with pytest.raises(ValueError):
        Grid(cell_size=0)


def test_config_rejects_bad_tunables():
    with pytest.raises(ValueError):
        Config(dimension=1)
    with pytest.raises(ValueError):
        Config(cell_size=0)
    with pytest.raises(ValueError):
        Config(tick_ms=0)
    with pytest.raises(ValueError):
        Config(score_per_food=-10)


def test_heading_vectors():
    assert Heading.NONE.value == (0, 0)
    assert (Heading.UP.dx, Heading.UP.dy) == (0, -1)
    assert Heading.from_name("left") is Heading.LEFT


# ---------- Snake ----------
def test_advance_prepends_new_head():
    snake = Snake([(3, 3), (2, 3)], Heading.RIGHT)
    assert snake.advance(Heading.RIGHT) == (4, 3)
    assert snake.cells == [(4, 3), (3, 3), (2, 3)]


def test_shrink_drops_tail_and_grow_keeps_it():
    snake = Snake([(3, 3), (2, 3)], Heading.RIGHT)
    snake.advance()
    snake.shrink()
    assert snake.cells == [(4, 3), (3, 3)]
    snake.advance()
    snake.grow()
    assert snake.cells == [(5, 3), (4, 3), (3, 3)]


def test_request_rejects_reversal_and_none():
    snake = Snake([(3, 3)], Heading.RIGHT)
    assert not snake.request(Heading.LEFT)
    assert not snake.request(Heading.NONE)
    assert snake.request(Heading.DOWN)
    assert snake.pending is Heading.DOWN
    assert snake.heading is Heading.RIGHT
    assert snake.commit() is Heading.DOWN


def test_any_direction_allowed_before_first_move():
    for heading in (Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT):
        assert Snake([(3, 3)]).request(heading)


def test_is_opposite():
    assert is_opposite(Heading.UP, Heading.DOWN)
    assert is_opposite(Heading.LEFT, Heading.RIGHT)
    assert not is_opposite(Heading.UP, Heading.LEFT)
    assert not is_opposite(Heading.NONE, Heading.NONE)


def test_empty_snake_is_rejected():
    with pytest.raises(ValueError):
        Snake([])


# ---------- Food ----------
def test_food_never_lands_on_snake():
    rng = random.Random(5)
    occupied = {(x, y) for x in range(5) for y in range(5) if (x + y) % 3}
    for _ in range(200):
        assert place(occupied, 5, rng) not in occupied


def test_food_finds_last_free_cell():
    occupied = {(x, y) for x in range(4) for y in range(4)} - {(2, 1)}
    assert place(occupied, 4, random.Random(0)) == (2, 1)


def test_food_on_full_board_raises():
    occupied = [(x, y) for x in range(3) for y in range(3)]
    with pytest.raises(BoardFullError):
        place(occupied, 3, random.Random(0))


def test_food_stays_inside_board():
    rng = random.Random(9)
    for _ in range(100):
        x, y = place([(0, 0)], 6, rng)
        assert 0 <= x < 6 and 0 <= y < 6


# ---------- Collision ----------
@pytest.mark.parametrize("head,hit", [
    ((0, 0), False),
    ((19, 19), False),
    ((-1, 5), True),
    ((20, 5), True),
    ((5, -1), True),
    ((5, 20), True),
])
def test_wall_collision(head, hit):
    assert is_wall_collision(head, 20) is hit


def test_self_collision_ignores_head():
    assert not is_self_collision((5, 5), [(5, 6), (5, 7)])
    assert is_self_collision((6, 5), [(5, 5), (6, 5), (6, 6)])


def test_food_eaten():
    assert is_food_eaten((1, 1), (1, 1))
    assert not is_food_eaten((1, 1), (1, 2))
    assert not is_food_eaten((1, 1), None)


def test_evaluate_order():
    assert evaluate([(20, 3)], (20, 3), 20) is Collision.WALL
    assert evaluate([(6, 5), (5, 5), (6, 5)], (0, 0), 20) is Collision.SELF
    assert evaluate([(4, 4), (3, 4)], (4, 4), 20) is Collision.FOOD
    assert evaluate([(4, 4), (3, 4)], (9, 9), 20) is Collision.NONE
