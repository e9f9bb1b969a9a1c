from dataclasses import dataclass, replace
from typing import Tuple

import pygame

from hud import HOVER, WHITE, TextNode, make_menu, title_text
from scoring import read_best_score
from settings import BEST_SCORE_KEY


@dataclass(frozen=True)
class SceneContext:
    width: int
    height: int
    start_position: Tuple[float, float]
    can_go_back: bool = False

    @property
    def screen_center(self):
        return self.width / 2, self.height / 2


RUNNING = "running"
PAUSED = "paused"


class SceneManager:
    """Named scenes, drawn bottom to top. Only running scenes are updated;
    input goes to the topmost running one."""

    def __init__(self):
        self.scenes = {}
        self.stack = []
        self.status = {}
        self.quit_requested = False

    def add(self, scene):
        self.scenes[scene.name] = scene
        return scene

    def get(self, name):
        return self.scenes[name]

    def is_running(self, name):
        return self.status.get(name) == RUNNING

    def is_paused(self, name):
        return self.status.get(name) == PAUSED

    def start(self, name):
        """Stop everything else and run `name` from a fresh create()."""
        for other in list(self.stack):
            self.stop(other)
        self.launch(name)

    def launch(self, name):
        """Run `name` on top of whatever is already active."""
        if name in self.stack:
            self.stack.remove(name)
        self.stack.append(name)
        self.status[name] = RUNNING
        self.scenes[name].create()

    def pause(self, name):
        if self.is_running(name):
            self.status[name] = PAUSED

    def resume(self, name):
        if self.is_paused(name):
            self.status[name] = RUNNING
            self.scenes[name].on_resume()

    def stop(self, name):
        if name in self.stack:
            self.stack.remove(name)
        self.status.pop(name, None)

    def restart(self, name):
        self.status[name] = RUNNING
        if name not in self.stack:
            self.stack.append(name)
        self.scenes[name].create()

    def update(self, dt_ms):
        for name in list(self.stack):
            if self.is_running(name):
                self.scenes[name].update(dt_ms)

    def draw(self, window, assets):
        for name in self.stack:
            self.scenes[name].draw(window, assets)

    def handle_event(self, event):
        for name in reversed(self.stack):
            if self.is_running(name):
                self.scenes[name].handle_event(event)
                return


class MenuScene:
    """Vertical list of labelled actions picked by click or UP/DOWN/RETURN."""

    name = "menu"
    items = ()

    def __init__(self, ctx, scenes):
        self.ctx = ctx
        self.scenes = scenes
        self.nodes = []
        self.selected = 0

    def create(self):
        self.nodes = make_menu(self.ctx, [label for label, _ in self.items])
        self.selected = 0

    def update(self, dt_ms):
        pass

    def on_resume(self):
        pass

    def choose(self, index):
        _, action = self.items[index]
        action(self)

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self.selected = (self.selected - 1) % len(self.items)
            elif event.key == pygame.K_DOWN:
                self.selected = (self.selected + 1) % len(self.items)
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.choose(self.selected)
        elif event.type == pygame.MOUSEMOTION:
            for i, node in enumerate(self.nodes):
                if node.hit(event.pos):
                    self.selected = i
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, node in enumerate(self.nodes):
                if node.hit(event.pos):
                    self.choose(i)
                    return

    def draw(self, window, assets):
        window.blit(assets["sky"], (0, 0))
        for i, node in enumerate(self.nodes):
            node.draw(window, assets["fonts"], HOVER if i == self.selected else WHITE)


class MainMenuScene(MenuScene):
    items = (
        ("Play", lambda self: self.scenes.start("play")),
        ("Score", lambda self: self.scenes.start("score")),
        ("Exit", lambda self: setattr(self.scenes, "quit_requested", True)),
    )


class PauseScene(MenuScene):
    name = "pause"
    items = (
        ("Continue", lambda self: self.resume_play()),
        ("Exit", lambda self: self.exit_to_menu()),
    )

    def resume_play(self):
        self.scenes.stop(self.name)
        self.scenes.resume("play")

    def exit_to_menu(self):
        self.scenes.stop("play")
        self.scenes.start("menu")

    def draw(self, window, assets):
        # overlay: leave the frozen play scene visible underneath
        for i, node in enumerate(self.nodes):
            node.draw(window, assets["fonts"], HOVER if i == self.selected else WHITE)


class ScoreScene:
    name = "score"

    def __init__(self, ctx, scenes, store):
        self.ctx = replace(ctx, can_go_back=True)
        self.scenes = scenes
        self.store = store
        self.best_text = None
        self.back_text = None

    def create(self):
        best = read_best_score(self.store, BEST_SCORE_KEY) or 0
        self.best_text = title_text(self.ctx, f"Best Score: {best}")
        if self.ctx.can_go_back:
            self.back_text = TextNode(10, self.ctx.height - 10, "< Back", size="small",
                                      color=WHITE, origin=(0, 1))

    def update(self, dt_ms):
        pass

    def on_resume(self):
        pass

    def handle_event(self, event):
        if not self.ctx.can_go_back:
            return
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
            self.scenes.start("menu")
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.back_text.hit(event.pos):
            self.scenes.start("menu")

    def draw(self, window, assets):
        window.blit(assets["sky"], (0, 0))
        self.best_text.draw(window, assets["fonts"])
        if self.back_text is not None:
            self.back_text.draw(window, assets["fonts"])
