import asyncio
import random

import pygame

from difficulty import validate_difficulties
from hud import load_fonts
from play import PlayScene
from scenes import MainMenuScene, PauseScene, SceneContext, SceneManager, ScoreScene
from settings import (ASSETS, FPS, GAME_HEIGHT, GAME_WIDTH, IS_WEB, PIPE_MARGIN, SAVE_FILE,
                      bird_height, bird_width, bird_x, bird_y, pipe_height, pipe_width)
from storage import JsonFileStore, WebStorageStore

PLACEHOLDER_COLORS = {
    "bird": (255, 255, 0),
    "pipe": (0, 255, 0),
    "sky": (135, 206, 235),
    "pause": (255, 255, 255),
}


def load_image_safe(path, size, use_alpha=True):
    try:
        img = pygame.image.load(str(path))
        img = img.convert_alpha() if use_alpha else img.convert()
    except (pygame.error, FileNotFoundError) as e:
        print(f"Failed to load {path.name}: {e}")
        img = pygame.Surface(size)
        for key, color in PLACEHOLDER_COLORS.items():
            if key in path.name:
                img.fill(color)
                break
        else:
            img.fill((255, 0, 255))
    return pygame.transform.scale(img, size)


def load_assets():
    # images need a display mode first
    bird_size = (bird_width, bird_height)
    pipe_size = (pipe_width, pipe_height)
    pipe = load_image_safe(ASSETS / "pipe.png", pipe_size)
    return {
        "sky": load_image_safe(ASSETS / "sky.png", (GAME_WIDTH, GAME_HEIGHT), False),
        "bird": [
            load_image_safe(ASSETS / "bird-downflap.png", bird_size),
            load_image_safe(ASSETS / "bird-midflap.png", bird_size),
            load_image_safe(ASSETS / "bird-upflap.png", bird_size),
        ],
        "pipe_top": pygame.transform.flip(pipe, False, True),
        "pipe_bottom": pipe,
        "pause": load_image_safe(ASSETS / "pause.png", (36, 36)),
        "fonts": load_fonts(ASSETS / "PressStart2P.ttf"),
    }


def build_scenes(store, rng=random):
    ctx = SceneContext(GAME_WIDTH, GAME_HEIGHT, start_position=(bird_x, bird_y))
    scenes = SceneManager()
    scenes.add(MainMenuScene(ctx, scenes))
    scenes.add(ScoreScene(ctx, scenes, store))
    scenes.add(PlayScene(ctx, scenes, store, rng=rng))
    scenes.add(PauseScene(ctx, scenes))
    return scenes


async def main():
    # bad difficulty tables are a config error, fail before opening a window
    validate_difficulties(GAME_HEIGHT, PIPE_MARGIN)

    pygame.init()
    print(f"PYGAME INIT OK, IS_WEB = {IS_WEB}")

    # Simple display mode for web compatibility
    flags = 0 if IS_WEB else (pygame.SCALED | pygame.RESIZABLE)
    window = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT), flags)
    pygame.display.set_caption("Flappy Bird")
    clock = pygame.time.Clock()

    assets = load_assets()
    store = WebStorageStore() if IS_WEB else JsonFileStore(SAVE_FILE)
    print(f"✓ Best score store ready ({type(store).__name__})")

    scenes = build_scenes(store)
    scenes.start("menu")

    while not scenes.quit_requested:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                scenes.quit_requested = True
                break
            scenes.handle_event(event)

        dt_ms = clock.tick(FPS)
        scenes.update(dt_ms)

        scenes.draw(window, assets)
        pygame.display.update()

        await asyncio.sleep(0)

    pygame.quit()


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
