from __future__ import annotations
import logging
import pygame

from martians.api.config import GameConfig
from martians.app.context import Context
from martians.app.timers import Timers
from martians.game.arena import Arena
from martians.game.hit_test import hit_test
from martians.game.scheduler import SpawnScheduler
from martians.input.pointer import PointerInput
from martians.render.frame import FrameRenderer
from martians.render.sprites import SpriteCache

logger = logging.getLogger(__name__)


def present(ctx: Context, renderer: FrameRenderer) -> None:
    renderer.draw(ctx.canvas)
    ctx.screen.fill((255, 255, 255))
    renderer.draw_border(ctx.screen, ctx.canvas_rect, ctx.cfg.border)
    canvas = ctx.canvas
    if ctx.cfg.mirror:
        canvas = pygame.transform.flip(canvas, True, False)
    ctx.screen.blit(canvas, ctx.canvas_rect.topleft)
    pygame.display.flip()


def run_game(cfg: GameConfig) -> int:
    """Open the window and play until it is closed. Returns the final score."""
    pygame.init()
    pygame.display.set_caption("Martians")
    w, h = cfg.canvas_size
    screen = pygame.display.set_mode((w + 2 * cfg.border, h + 2 * cfg.border), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    ctx = Context(screen=screen, clock=clock, cfg=cfg)

    timers = Timers(now_ms=pygame.time.get_ticks())
    arena = Arena(difficulty=cfg.initial_difficulty)
    scheduler = SpawnScheduler(arena, timers, ctx.canvas_size, cfg)
    renderer = FrameRenderer(arena, cfg.capacity, SpriteCache(cfg.assets_dir))
    pointer = PointerInput(offset=ctx.canvas_rect.topleft, mirror=cfg.mirror)

    redraw = timers.call_every(cfg.redraw_interval_ms, lambda: present(ctx, renderer))
    present(ctx, renderer)
    scheduler.start()
    logger.info("Game started on a %dx%d canvas", *ctx.canvas_size())

    running = True
    try:
        while running:
            clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    ctx.screen = pygame.display.get_surface()
                    ctx.resize((event.w, event.h))
                    present(ctx, renderer)
                else:
                    pt = pointer.click_point(event, ctx.canvas_size())
                    if pt is not None:
                        hit_test(arena, pt)
            timers.run_due(pygame.time.get_ticks())
    finally:
        scheduler.cancel()
        redraw.cancel()
        pygame.quit()

    logger.info("Window closed, score %d", arena.score)
    return arena.score
