import argparse
import logging
import random
import sys

import pygame

from frame_capture import create_output_path, frame_path, project_path, should_capture
from logging_config import setup_logging
from orbit_field import Point, Rect, create_nodes, draw_commands, step, ATTRACTOR_PADDING

WIDTH, HEIGHT = 1200, 1200
ROWS, COLS = 30, 30
NODE_RADIUS = 20.0
START_X, START_Y = -50.0, 0.0
FPS = 60
BACKGROUND = (0, 0, 0)

log = logging.getLogger("orbit_field.main")


def to_screen(x, y, width, height):
    # centered y-up to pygame's top-left y-down
    return x + width / 2, height / 2 - y


def to_rgb255(color):
    return tuple(max(0, min(255, round(c * 255))) for c in color[:3])


def render(surface, commands):
    width, height = surface.get_size()
    surface.fill(BACKGROUND)
    for cmd in commands:
        pygame.draw.circle(surface, to_rgb255(cmd.color),
                           to_screen(cmd.x, cmd.y, width, height), cmd.radius)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid of nodes orbiting an oscillating attractor.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log capture progress")
    parser.add_argument("--no-capture", action="store_true", help="do not save frames to disk")
    parser.add_argument("--seed", type=int, default=None, help="seed for node colors")
    return parser.parse_args(argv)


def run(capture=True, seed=None):
    win = Rect.from_size(WIDTH, HEIGHT)
    point = Point(START_X, START_Y, win.pad(ATTRACTOR_PADDING))
    nodes = create_nodes(ROWS, COLS, win, point, NODE_RADIUS)
    rng = random.Random(seed)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Orbit Field")
    clock = pygame.time.Clock()
    log.info("Window %dx%d with %d nodes", WIDTH, HEIGHT, len(nodes))

    # output folder exists only once the window does
    out_path = None
    if capture:
        out_path = create_output_path(project_path())
        out_path.mkdir(parents=True, exist_ok=True)
        log.info("Saving frames to %s", out_path)

    frame = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        step(point, nodes, pygame.time.get_ticks() / 1000.0, rng)
        render(screen, draw_commands(nodes))
        pygame.display.flip()

        if out_path is not None and should_capture(frame):
            path = frame_path(out_path, frame)
            pygame.image.save(screen, str(path))
            log.debug("Captured %s", path)

        frame += 1
        clock.tick(FPS)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        run(capture=not args.no_capture, seed=args.seed)
    except (RuntimeError, ValueError, OSError, pygame.error) as exc:
        log.error("Fatal: %s", exc)
        sys.exit(1)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
