import pytest

from martians.api.config import GameConfig
from martians.game.arena import Arena
from martians.game.difficulty import decay
from martians.game.hit_test import hit_test
from martians.game.scheduler import SpawnScheduler
from martians.api.geometry import Point


def make(arena, timers, cfg, size=(500, 500)):
    canvas = {"size": size}
    sched = SpawnScheduler(arena, timers, lambda: canvas["size"], cfg)
    return sched, canvas


def test_first_spawn_after_initial_delay(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(999)
    assert len(arena) == 0
    timers.run_due(1000)
    assert len(arena) == 1


def test_initial_delay_scales_with_difficulty(timers):
    cfg = GameConfig(initial_difficulty=0.5, seed=1)
    arena = Arena(difficulty=cfg.initial_difficulty)
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(499)
    assert len(arena) == 0
    timers.run_due(500)
    assert len(arena) == 1


def test_delay_decays_between_spawns(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(1000)
    assert sched.current_delay_ms == pytest.approx(980)
    timers.run_due(1979)
    assert len(arena) == 1
    timers.run_due(1981)
    assert len(arena) == 2
    assert sched.current_delay_ms == pytest.approx(960.4)


def test_game_ends_at_capacity(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(10**7)
    assert len(arena) == cfg.capacity
    assert not arena.is_running
    assert not sched.pending
    assert timers.pending() == 0


def test_no_spawn_after_game_over(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(10**7)
    before = (arena.list_targets(), arena.score)
    assert not hit_test(arena, Point(*_center(arena.list_targets()[0])))
    timers.run_due(10**8)
    assert (arena.list_targets(), arena.score) == before


def test_hits_keep_the_game_going(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    now = 0
    while sched.ticks < 50:
        now += 50
        timers.run_due(now)
        for t in arena.list_targets():
            hit_test(arena, Point(*_center(t)))
    assert arena.is_running
    assert arena.score == 50
    # delay never reaches the floor
    assert sched.current_delay_ms > cfg.min_delay_ms


def test_delay_floor_reached_in_long_game(arena, timers):
    cfg = GameConfig(capacity=1000, seed=3)
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(10**6)
    assert cfg.min_delay_ms < sched.current_delay_ms <= cfg.min_delay_ms / cfg.decay_rate


def test_ended_externally_stops_recurrence(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    timers.run_due(1000)
    arena.end()
    timers.run_due(10**6)
    assert len(arena) == 1
    assert not sched.pending


def test_cancel_stops_spawning(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    sched.cancel()
    sched.cancel()
    timers.run_due(10**6)
    assert len(arena) == 0
    assert arena.is_running


def test_start_twice_is_an_error(arena, timers, cfg):
    sched, _ = make(arena, timers, cfg)
    sched.start()
    with pytest.raises(RuntimeError):
        sched.start()


def test_canvas_size_read_every_tick(arena, timers, cfg):
    sched, canvas = make(arena, timers, cfg, size=(500, 500))
    sched.start()
    timers.run_due(1000)
    canvas["size"] = (60, 60)
    timers.run_due(1000 + 981)
    small = arena.list_targets()[-1].rect
    assert small.x <= 10 and small.y <= 10


def test_targets_stay_on_canvas(arena, timers, cfg):
    sched, canvas = make(arena, timers, cfg, size=(640, 480))
    sched.start()
    timers.run_due(10**7)
    for t in arena.list_targets():
        assert 0 <= t.rect.x <= 640 - 50
        assert 0 <= t.rect.y <= 480 - 50
        assert t.asset == cfg.enemy_asset


def _center(t):
    return t.rect.x + t.rect.w / 2, t.rect.y + t.rect.h / 2


def test_spawn_delays_follow_decay_curve(arena, timers):
    cfg = GameConfig(capacity=300, seed=5)
    sched, _ = make(arena, timers, cfg)
    sched.start()
    expected = 1000.0
    now = 0.0
    for _ in range(150):
        now += expected
        timers.run_due(now + 1e-6)
        expected = decay(expected)
        assert sched.current_delay_ms == pytest.approx(expected)
