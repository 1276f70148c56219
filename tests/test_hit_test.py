from martians.api.geometry import Point, Rect
from martians.game.hit_test import hit_test
from martians.game.target import Target


def spawn_at(arena, x, y, w=50, h=50):
    t = Target(rect=Rect(x, y, w, h), asset="enemy.png")
    arena.spawn(t)
    return t


def test_click_inside_removes_and_scores(arena):
    spawn_at(arena, 100, 100)
    assert hit_test(arena, Point(125, 125))
    assert len(arena) == 0
    assert arena.score == 1


def test_click_outside_changes_nothing(arena):
    t = spawn_at(arena, 100, 100)
    assert not hit_test(arena, Point(0, 0))
    assert arena.list_targets() == (t,)
    assert arena.score == 0


def test_corner_hit_and_left_of_corner_miss(arena):
    spawn_at(arena, 100, 100)
    assert not hit_test(arena, Point(99, 100))
    assert hit_test(arena, Point(100, 100))


def test_far_corner_is_inclusive(arena):
    spawn_at(arena, 100, 100)
    assert hit_test(arena, Point(150, 150))


def test_overlap_removes_only_the_oldest(arena):
    old = spawn_at(arena, 100, 100)
    new = spawn_at(arena, 110, 110)
    assert hit_test(arena, Point(120, 120))
    assert arena.list_targets() == (new,)
    assert arena.score == 1
    assert old not in arena.list_targets()


def test_ignored_after_game_over(arena):
    t = spawn_at(arena, 100, 100)
    arena.end()
    assert not hit_test(arena, Point(125, 125))
    assert arena.list_targets() == (t,)
    assert arena.score == 0
