import random

import pytest

from triplemath.figures import Color, Figure, Level, ShapeKind
from triplemath.game import Game


@pytest.fixture
def game():
    return Game(random.Random(3))


def fig(kind=ShapeKind.CIRCLE, col=3, row=0, value=4, level=Level.LEVEL1, color=Color.RED):
    return Figure(kind, col, row, value, level, color)


def test_new_figure_spawns_top_middle(game):
    cur = game.current
    assert (cur.column, cur.row) == (Game.COLUMNS // 2, 0)
    assert cur.level is Level.LEVEL1
    assert 0 <= cur.value <= 9
    assert game.score == 0


def test_seeded_games_match():
    a = Game(random.Random(7))
    b = Game(random.Random(7))
    assert a.current == b.current


def test_move_stops_at_edges(game):
    for _ in range(10):
        game.move(-1)
    assert game.current.column == 0
    assert not game.can_move(-1)
    for _ in range(10):
        game.move(1)
    assert game.current.column == Game.COLUMNS - 1
    assert not game.can_move(1)


def test_move_blocked_by_figure(game):
    game.current = fig(col=3, row=0)
    game.board[0][4] = fig(col=4, row=0)
    assert not game.can_move(1)
    game.move(1)
    assert game.current.column == 3


def test_step_moves_down(game):
    row = game.current.row
    game.step()
    assert game.current.row == row + 1


def test_hard_drop_lands_on_bottom(game):
    game.current = fig(col=0, value=2)
    game.hard_drop()
    placed = game.board[Game.ROWS - 1][0]
    assert placed is not None
    assert placed.value == 2
    assert game.current is not None


def test_level1_merge(game):
    game.board[7][3] = fig(row=7, value=4)
    game.current = fig(value=5)
    game.hard_drop()
    merged = game.board[6][3]
    assert game.board[7][3] is None
    assert merged.level is Level.LEVEL2
    assert merged.value == 4 + 5
    assert game.score == 4 + 5


def test_level2_merge_clears_both(game):
    game.board[7][3] = fig(row=7, value=6, level=Level.LEVEL2)
    game.board[6][3] = fig(row=6, value=3, level=Level.LEVEL2)
    game.resolve_collisions(6, 3)
    assert game.board[6][3] is None
    assert game.board[7][3] is None
    assert game.score == (6 + 3) * 2


def test_level3_same_kind_no_change(game):
    game.board[7][3] = fig(row=7, value=6, level=Level.LEVEL3)
    game.board[6][3] = fig(row=6, value=3, level=Level.LEVEL3)
    game.resolve_collisions(6, 3)
    assert game.board[6][3] is not None and game.board[7][3] is not None
    assert game.score == 0


def test_mismatch_penalty(game):
    game.board[7][3] = fig(row=7, value=6, color=Color.BLUE)
    game.current = fig(value=2)
    game.hard_drop()
    assert game.score == -2
    assert game.board[6][3].level is Level.LEVEL1


def test_resolve_empty_cell_raises(game):
    with pytest.raises(ValueError):
        game.resolve_collisions(0, 0)


def test_is_over_counts_rows(game):
    for r in range(4, 8):
        game.board[r][0] = fig(col=0, row=r)
    assert not game.is_over()
    game.board[3][6] = fig(col=6, row=3)
    assert game.is_over()


def test_place_when_over_leaves_no_figure(game):
    for r in range(4, 8):
        game.board[r][0] = fig(col=0, row=r)
    game.current = fig(col=6, row=0)
    game.place_figure()
    assert game.is_over()
    assert game.current is None
    game.step()
    assert game.current is None
    with pytest.raises(RuntimeError):
        game.hard_drop()


def test_render_shape(game):
    game.current = fig(value=7, color=Color.YELLOW, kind=ShapeKind.TRIANGLE)
    text = game.render()
    lines = text.splitlines()
    assert lines[0] == "Score: 0"
    assert len(lines) == Game.ROWS + 1
    assert "tY 7" in lines[1]