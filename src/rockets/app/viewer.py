from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Optional

import pygame

from ..sim.core.simulation import Simulation
from ..sim.types.snapshot import RocketView, Snapshot
from ..sim.utils.math2d import window_to_screen
from .headless import build_config

logger = logging.getLogger(__name__)

_TARGET_FPS = 60
_STROKE_WIDTH = 1


def _draw_rocket(surface: pygame.Surface, rocket: RocketView, screen_dimensions: int) -> None:
    width = max(1, round(rocket.width))
    height = max(1, round(rocket.height))
    body = pygame.Surface((width, height), pygame.SRCALPHA)
    body.fill(pygame.Color(rocket.color))
    pygame.draw.rect(body, pygame.Color(rocket.stroke_color), body.get_rect(), _STROKE_WIDTH)
    rotated = pygame.transform.rotate(body, math.degrees(rocket.heading))
    center = window_to_screen((rocket.x, rocket.y), screen_dimensions)
    surface.blit(rotated, rotated.get_rect(center=center))


def draw_snapshot(surface: pygame.Surface, snapshot: Snapshot) -> None:
    """Paint one frame: background, walls, target, then every rocket."""
    size = snapshot.screen_dimensions
    surface.fill(pygame.Color(snapshot.background))

    for wall in snapshot.walls:
        left, top = window_to_screen((wall.x, wall.y), size)
        side = math.ceil(wall.size)
        pygame.draw.rect(surface, pygame.Color(wall.color), pygame.Rect(int(left), int(top), side, side))

    target = snapshot.target
    pygame.draw.circle(
        surface,
        pygame.Color(target.color),
        window_to_screen((target.x, target.y), size),
        target.radius,
    )

    for rocket in snapshot.rockets:
        _draw_rocket(surface, rocket, size)


def draw_overlay(surface: pygame.Surface, font: pygame.font.Font, snapshot: Snapshot, fps: float) -> None:
    size = snapshot.screen_dimensions
    lines = [f"FPS: {round(fps)}", f"GEN: {snapshot.generation}"]
    for offset, text in enumerate(lines):
        rendered = font.render(text, True, pygame.Color("white"))
        rect = rendered.get_rect(bottomright=(size - 10, size - 30 + offset * 15))
        surface.blit(rendered, rect)


def run_viewer(simulation: Simulation, max_frames: Optional[int] = None) -> None:
    pygame.init()
    try:
        size = simulation.config.window.screen_dimensions
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption("Genetic Rockets")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            simulation.update()
            snapshot = simulation.snapshot()
            draw_snapshot(screen, snapshot)
            draw_overlay(screen, font, snapshot, clock.get_fps())
            pygame.display.flip()
            clock.tick(_TARGET_FPS)

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
    finally:
        pygame.quit()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Watch the genetic rockets evolve")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with simulation settings")
    parser.add_argument("--map", type=Path, default=None, help="Map file overriding grid.map_path")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = build_config(args.config, seed=args.seed, map_path=args.map)
    try:
        simulation = Simulation.from_config(config)
    except OSError as exc:
        logger.error("cannot create world: %s", exc)
        sys.exit(1)
    run_viewer(simulation)


if __name__ == "__main__":
    main()
