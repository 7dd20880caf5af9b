"""Window setup and the main loop of the application."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .manager import AppManager
from .ui import Ui
from .views import IncrementView

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
TITLE = "Sketchy MVC"
TARGET_FPS = 60


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def _pump_events(ui: Ui) -> bool:
    """Feed pending events to the UI; return False once the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        ui.process_event(event)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the application until it is closed."""
    parser = argparse.ArgumentParser(prog="sketchymvc", description="Run the Sketchy MVC demo.")
    parser.add_argument(
        "--frames",
        type=_positive,
        default=None,
        help="stop after this many frames",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        ui = Ui(screen)
        manager = AppManager(IncrementView)
        clock = pygame.time.Clock()

        frames = 0
        while args.frames is None or frames < args.frames:
            if not _pump_events(ui):
                break
            ui.surface = pygame.display.get_surface()
            manager.update()
            ui.new_frame()
            ui.surface.fill((0, 0, 0))
            manager.render()
            pygame.display.flip()
            clock.tick(TARGET_FPS)
            frames += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())